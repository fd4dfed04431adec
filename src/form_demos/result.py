"""Result type returned by every QR facade operation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover - imported for static type checking only
    from PIL.Image import Image


@dataclass(slots=True)
class QRCodeResult:
    """Success flag and user-facing message with an optional payload.

    ``image`` and ``decoded_text`` are only meaningful when ``success`` is
    true.
    """

    success: bool
    message: str = ""
    image: Optional["Image"] = None
    decoded_text: str = ""

    @classmethod
    def ok(cls, message: str, image: Optional["Image"] = None, decoded_text: str = "") -> "QRCodeResult":
        return cls(True, message, image, decoded_text)

    @classmethod
    def fail(cls, message: str) -> "QRCodeResult":
        return cls(False, message)

    def __bool__(self) -> bool:
        return self.success


__all__ = ["QRCodeResult"]
