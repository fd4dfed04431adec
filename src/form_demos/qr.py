"""QR code facade over :mod:`segno` and :mod:`pyzbar`."""
from __future__ import annotations

import io
import logging
import traceback
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Protocol

from PIL import Image

from .config import AppConfig
from .result import QRCodeResult

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "PNG"

_FORMAT_EXTENSIONS: Dict[str, str] = {
    "PNG": ".png",
    "JPEG": ".jpg",
    "BMP": ".bmp",
}

_EXTENSION_FORMATS: Dict[str, str] = {
    ".png": "PNG",
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
    ".bmp": "BMP",
}

GENERATE_STAGE = "Failed to generate QR code"
DECODE_STAGE = "Failed to decode QR code"
LOAD_STAGE = "Failed to load file"
SAVE_STAGE = "Failed to save file"


class QRCodec(Protocol):
    """The two calls the facade needs from a QR library."""

    def encode(self, text: str, charset: str) -> Image.Image:
        ...

    def decode(self, image: Image.Image, charset: str) -> str:
        ...


@dataclass(slots=True)
class SegnoZbarCodec:
    """Encode with :mod:`segno`, decode with OpenCV and :mod:`pyzbar`."""

    config: AppConfig

    def encode(self, text: str, charset: str) -> Image.Image:
        try:
            import segno  # type: ignore
        except Exception as exc:  # pragma: no cover - depends on environment
            raise RuntimeError("QR generation requires segno; install segno") from exc

        qr = segno.make_qr(text, error=self.config.qr_error_correction, encoding=charset)
        buffer = io.BytesIO()
        qr.save(buffer, kind="png", scale=self.config.qr_scale, border=self.config.qr_border)
        buffer.seek(0)

        with Image.open(buffer) as rendered:
            return rendered.convert("L")

    def decode(self, image: Image.Image, charset: str) -> str:
        try:
            import cv2  # type: ignore
            import numpy as np
            from pyzbar import pyzbar  # type: ignore
        except Exception as exc:  # pragma: no cover - depends on environment
            raise RuntimeError(
                "QR decoding requires opencv-python and pyzbar; install both"
            ) from exc

        rgb = np.asarray(image.convert("RGB"))
        gray = cv2.cvtColor(rgb, cv2.COLOR_RGB2GRAY)
        for processed in (
            gray,
            cv2.GaussianBlur(gray, (5, 5), 0),
            cv2.threshold(gray, 0, 255, cv2.THRESH_BINARY + cv2.THRESH_OTSU)[1],
        ):
            decoded = pyzbar.decode(processed)
            if decoded:
                return bytes(decoded[0].data).decode(charset)

        raise ValueError("No QR code found in image")


@dataclass(slots=True)
class QRCodeFacade:
    """Validate input, delegate to a :class:`QRCodec`, report a :class:`QRCodeResult`.

    None of the public methods raise.  Validation problems and exceptions
    from the codec or from image I/O are both turned into failed results
    whose message is safe to show to the user.
    """

    config: AppConfig
    codec: Optional[QRCodec] = field(default=None)

    def __post_init__(self) -> None:
        if self.codec is None:
            self.codec = SegnoZbarCodec(self.config)

    def generate_from_text(self, text: Optional[str]) -> QRCodeResult:
        validation = self._validate_text(text)
        if not validation.success:
            return validation

        try:
            image = self.codec.encode(text, self.config.qr_charset)
        except Exception as exc:
            return self._handle_error(GENERATE_STAGE, exc)

        logger.info("Generated QR code for %d characters", len(text))
        return QRCodeResult.ok("QR code generated successfully", image=image)

    def decode_from_image(self, image: Optional[Image.Image]) -> QRCodeResult:
        validation = self._validate_image(image)
        if not validation.success:
            return validation

        try:
            text = self.codec.decode(image, self.config.qr_charset)
        except Exception as exc:
            return self._handle_error(DECODE_STAGE, exc)

        logger.info("Decoded QR code with %d characters", len(text))
        return QRCodeResult.ok("QR code decoded successfully", image=image, decoded_text=text)

    def decode_from_file(self, path: Optional[str]) -> QRCodeResult:
        validation = self._validate_path(path)
        if not validation.success:
            return validation

        try:
            with Image.open(path) as image:
                image.load()
                return self.decode_from_image(image)
        except Exception as exc:
            return self._handle_error(LOAD_STAGE, exc)

    def load_image_from_file(self, path: Optional[str]) -> QRCodeResult:
        """Return a result holding a detached copy of the image at ``path``."""

        validation = self._validate_path(path)
        if not validation.success:
            return validation

        try:
            with Image.open(path) as image:
                loaded = image.copy()
        except Exception as exc:
            return self._handle_error(LOAD_STAGE, exc)

        return QRCodeResult.ok(f"Image loaded: {Path(path).name}", image=loaded)

    def save_image_to_file(
        self,
        image: Optional[Image.Image],
        path: Optional[str],
        image_format: Optional[str] = DEFAULT_FORMAT,
    ) -> QRCodeResult:
        if image is None:
            return self._reject("No image loaded")
        if not path or not path.strip():
            return self._reject("Save path not specified")

        image_format = (image_format or DEFAULT_FORMAT).upper()
        target = Path(path)
        if not target.suffix:
            target = target.with_name(target.name + self.default_extension(image_format))

        try:
            to_save = image
            if image_format == "JPEG" and image.mode not in ("1", "L", "RGB", "CMYK"):
                to_save = image.convert("RGB")
            to_save.save(target, format=image_format)
        except Exception as exc:
            return self._handle_error(SAVE_STAGE, exc)

        logger.info("Saved %s image to %s", image_format, target)
        return QRCodeResult.ok(f"Image saved: {target.name}")

    def generate_for_url(self, url: Optional[str]) -> QRCodeResult:
        url = url or ""
        if url.strip() and not url.startswith("http://") and not url.startswith("https://"):
            url = "https://" + url
        return self.generate_from_text(url)

    def generate_for_contact(self, name: str, phone: str, email: str) -> QRCodeResult:
        vcard = (
            "BEGIN:VCARD\n"
            "VERSION:3.0\n"
            f"FN:{name}\n"
            f"TEL:{phone}\n"
            f"EMAIL:{email}\n"
            "END:VCARD"
        )
        return self.generate_from_text(vcard)

    @staticmethod
    def supported_image_formats() -> str:
        """Return a Qt file dialog filter for the formats the facade saves."""

        return "PNG (*.png);;JPEG (*.jpg *.jpeg);;BMP (*.bmp)"

    @staticmethod
    def default_extension(image_format: str) -> str:
        return _FORMAT_EXTENSIONS.get(image_format.upper(), ".png")

    @staticmethod
    def format_for_path(path: str, selected_filter: str = "") -> str:
        """Return the Pillow format name for saving to ``path``.

        A known extension wins.  Without one, the format named at the start
        of the dialog filter the user picked (``"JPEG (*.jpg *.jpeg)"``) is
        used, and PNG after that.
        """

        suffix = Path(path).suffix.lower()
        if suffix in _EXTENSION_FORMATS:
            return _EXTENSION_FORMATS[suffix]

        name = selected_filter.split("(", 1)[0].strip().upper()
        if name in _FORMAT_EXTENSIONS:
            return name
        return DEFAULT_FORMAT

    def _validate_text(self, text: Optional[str]) -> QRCodeResult:
        if not text or not text.strip():
            return self._reject("Text to encode cannot be empty")

        limit = self.config.max_text_length
        if len(text) > limit:
            return self._reject(f"Text is too long (maximum {limit} characters)")

        return QRCodeResult(True)

    def _validate_image(self, image: Optional[Image.Image]) -> QRCodeResult:
        if image is None:
            return self._reject("No image loaded")

        width, height = image.size
        minimum = self.config.min_image_size
        if width < minimum or height < minimum:
            return self._reject("Image is too small to recognise")

        return QRCodeResult(True)

    def _validate_path(self, path: Optional[str]) -> QRCodeResult:
        if not path or not path.strip():
            return self._reject("File path not specified")
        if not Path(path).is_file():
            return self._reject(f"File not found: {path}")
        return QRCodeResult(True)

    @staticmethod
    def _reject(message: str) -> QRCodeResult:
        logger.warning("Validation failed: %s", message)
        return QRCodeResult.fail(message)

    def _handle_error(self, stage: str, exc: Exception) -> QRCodeResult:
        message = f"{stage}: {exc}"
        logger.error(message, exc_info=exc)
        if self.config.debug:
            details = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
            message += f"\n\nDetails: {details}"
        return QRCodeResult.fail(message)


def to_qpixmap(image: Image.Image):  # pragma: no cover - requires PyQt at runtime
    """Return a ``QPixmap`` showing ``image``.

    :mod:`PyQt5` is imported lazily so the facade stays usable in headless
    test environments.
    """

    try:
        from PyQt5.QtGui import QImage, QPixmap
    except Exception as exc:  # pragma: no cover - depends on environment
        raise RuntimeError("PyQt5 is required to display images") from exc

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")

    qimage = QImage()
    if not qimage.loadFromData(buffer.getvalue()):
        raise RuntimeError("Failed to load image into QImage")

    return QPixmap.fromImage(qimage)


__all__ = [
    "DEFAULT_FORMAT",
    "QRCodec",
    "QRCodeFacade",
    "SegnoZbarCodec",
    "to_qpixmap",
]
