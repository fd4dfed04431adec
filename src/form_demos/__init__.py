"""Qt form demos: stack and queue list editors and a QR code facade."""
from __future__ import annotations

from .collection import Discipline, EditorNotice, ItemCollection, add_item, remove_item, show_items
from .config import AppConfig, StyleConfig
from .qr import QRCodeFacade, SegnoZbarCodec
from .result import QRCodeResult

__all__ = [
    "AppConfig",
    "StyleConfig",
    "Discipline",
    "EditorNotice",
    "ItemCollection",
    "add_item",
    "remove_item",
    "show_items",
    "QRCodeFacade",
    "QRCodeResult",
    "SegnoZbarCodec",
]

__version__ = "1.0"
