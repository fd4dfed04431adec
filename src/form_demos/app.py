"""PyQt5 user interface for the form demos."""
from __future__ import annotations

import logging
from typing import Optional

from PIL import Image
from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QApplication,
    QFileDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from .collection import Discipline, EditorNotice, ItemCollection, add_item, remove_item, show_items
from .config import AppConfig, StyleConfig
from .icon import create_icon
from .qr import QRCodeFacade, to_qpixmap
from .result import QRCodeResult

logger = logging.getLogger(__name__)


class ListEditorWindow(QMainWindow):  # pragma: no cover - requires Qt event loop
    """Add/remove/show form over an :class:`ItemCollection`."""

    def __init__(self, discipline: Discipline, config: AppConfig, style: StyleConfig):
        super().__init__()
        self._config = config
        self._style = style
        self._collection = ItemCollection(discipline)
        self._setup_ui()

    def _setup_ui(self) -> None:
        noun = self._collection.discipline.noun
        self.setWindowTitle(f"{noun.capitalize()} example")
        self.setMinimumSize(420, 420)
        self.setStyleSheet(self._style.stylesheet())

        try:
            self.setWindowIcon(create_icon(noun))
        except RuntimeError:
            pass

        central = QWidget()
        layout = QVBoxLayout(central)

        self._input = QLineEdit()
        self._input.setPlaceholderText(f"Item to add to the {noun}...")
        self._input.returnPressed.connect(self._on_add)

        button_row = QHBoxLayout()
        add_btn = QPushButton("Add")
        add_btn.setObjectName("AccentButton")
        remove_btn = QPushButton("Remove")
        show_btn = QPushButton("Show")
        add_btn.clicked.connect(self._on_add)
        remove_btn.clicked.connect(self._on_remove)
        show_btn.clicked.connect(self._on_show)
        button_row.addWidget(add_btn)
        button_row.addWidget(remove_btn)
        button_row.addWidget(show_btn)

        self._list = QListWidget()

        layout.addWidget(self._input)
        layout.addLayout(button_row)
        layout.addWidget(self._list)
        self.setCentralWidget(central)

    def _on_add(self) -> None:
        notice = add_item(self._collection, self._input.text())
        if notice.ok:
            self._input.clear()
        self._notify(notice)

    def _on_remove(self) -> None:
        self._notify(remove_item(self._collection))

    def _on_show(self) -> None:
        self._list.clear()
        self._list.addItems(show_items(self._collection))

    def _notify(self, notice: EditorNotice) -> None:
        QMessageBox.information(self, self.windowTitle(), notice.message)


class QRCodeWindow(QMainWindow):  # pragma: no cover - requires Qt event loop
    """Encode/save/load/decode form over a :class:`QRCodeFacade`."""

    def __init__(self, config: AppConfig, style: StyleConfig):
        super().__init__()
        self._config = config
        self._style = style
        self._qr = QRCodeFacade(config)
        self._image: Optional[Image.Image] = None
        self._setup_ui()

    def _setup_ui(self) -> None:
        self.setWindowTitle(f"QR code example v{self._config.app_version}")
        self.setMinimumSize(640, 720)
        self.setStyleSheet(self._style.stylesheet())

        try:
            self.setWindowIcon(create_icon("Q"))
        except RuntimeError:
            pass

        central = QWidget()
        layout = QVBoxLayout(central)

        text_group = QGroupBox("Text")
        text_layout = QVBoxLayout()
        self._text_input = QLineEdit()
        self._text_input.setMaxLength(self._config.max_text_length * 2)
        self._text_input.setPlaceholderText("Text to encode...")
        text_layout.addWidget(self._text_input)

        button_row = QHBoxLayout()
        encode_btn = QPushButton("Encode")
        encode_btn.setObjectName("AccentButton")
        url_btn = QPushButton("Encode as URL")
        save_btn = QPushButton("Save")
        load_btn = QPushButton("Load")
        decode_btn = QPushButton("Decode")
        encode_btn.clicked.connect(self._on_encode)
        url_btn.clicked.connect(self._on_encode_url)
        save_btn.clicked.connect(self._on_save)
        load_btn.clicked.connect(self._on_load)
        decode_btn.clicked.connect(self._on_decode)
        for button in (encode_btn, url_btn, save_btn, load_btn, decode_btn):
            button_row.addWidget(button)
        text_layout.addLayout(button_row)
        text_group.setLayout(text_layout)

        contact_group = QGroupBox("Contact (vCard)")
        contact_layout = QHBoxLayout()
        self._name_input = QLineEdit()
        self._name_input.setPlaceholderText("Name")
        self._phone_input = QLineEdit()
        self._phone_input.setPlaceholderText("Phone")
        self._email_input = QLineEdit()
        self._email_input.setPlaceholderText("Email")
        contact_btn = QPushButton("Encode contact")
        contact_btn.clicked.connect(self._on_encode_contact)
        contact_layout.addWidget(self._name_input)
        contact_layout.addWidget(self._phone_input)
        contact_layout.addWidget(self._email_input)
        contact_layout.addWidget(contact_btn)
        contact_group.setLayout(contact_layout)

        self._preview = QLabel("QR code will appear here")
        self._preview.setObjectName("qrDisplayLabel")
        self._preview.setAlignment(Qt.AlignCenter)
        self._preview.setMinimumSize(320, 320)

        self._decoded_output = QLineEdit()
        self._decoded_output.setReadOnly(True)
        self._decoded_output.setPlaceholderText("Decoded text will appear here...")

        layout.addWidget(text_group)
        layout.addWidget(contact_group)
        layout.addWidget(self._preview, stretch=1)
        layout.addWidget(QLabel("Decoded text:"))
        layout.addWidget(self._decoded_output)
        self.setCentralWidget(central)

        self.setStatusBar(QStatusBar())
        self.statusBar().showMessage("Ready")

    def _on_encode(self) -> None:
        self._show_generated(self._qr.generate_from_text(self._text_input.text()))

    def _on_encode_url(self) -> None:
        self._show_generated(self._qr.generate_for_url(self._text_input.text()))

    def _on_encode_contact(self) -> None:
        result = self._qr.generate_for_contact(
            self._name_input.text(),
            self._phone_input.text(),
            self._email_input.text(),
        )
        self._show_generated(result)

    def _show_generated(self, result: QRCodeResult) -> None:
        if not result.success:
            QMessageBox.warning(self, "Error", result.message)
            return
        self._set_image(result.image)
        self.statusBar().showMessage(result.message)

    def _on_save(self) -> None:
        if self._image is None:
            QMessageBox.information(self, "Information", "No image to save")
            return

        path, selected_filter = QFileDialog.getSaveFileName(
            self, "Save QR Code", "", self._qr.supported_image_formats()
        )
        if not path:
            return

        image_format = self._qr.format_for_path(path, selected_filter)
        result = self._qr.save_image_to_file(self._image, path, image_format)
        if result.success:
            QMessageBox.information(self, "Success", result.message)
        else:
            QMessageBox.critical(self, "Error", result.message)

    def _on_load(self) -> None:
        path, _ = QFileDialog.getOpenFileName(
            self, "Open QR Image", "", self._qr.supported_image_formats()
        )
        if not path:
            return

        result = self._qr.load_image_from_file(path)
        if not result.success:
            QMessageBox.critical(self, "Error", result.message)
            return
        self._set_image(result.image)
        self._decoded_output.clear()
        self.statusBar().showMessage(result.message)

    def _on_decode(self) -> None:
        if self._image is None:
            QMessageBox.information(self, "Information", "Load an image with a QR code")
            return

        result = self._qr.decode_from_image(self._image)
        if not result.success:
            QMessageBox.warning(self, "Error", result.message)
            return
        self._decoded_output.setText(result.decoded_text)
        self.statusBar().showMessage(result.message)

    def _set_image(self, image: Optional[Image.Image]) -> None:
        self._release_image()
        self._image = image
        if image is None:
            self._preview.setText("QR code will appear here")
            return

        try:
            pixmap = to_qpixmap(image)
        except RuntimeError as exc:
            self._preview.setText(f"Preview failed: {exc}")
            return

        scaled = pixmap.scaled(self._preview.size(), Qt.KeepAspectRatio, Qt.FastTransformation)
        self._preview.setPixmap(scaled)

    def _release_image(self) -> None:
        if self._image is not None:
            self._image.close()
            self._image = None

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._release_image()
        event.accept()


def create_window(demo: str, config: AppConfig, style: StyleConfig) -> QMainWindow:  # pragma: no cover - requires Qt
    if demo == "stack":
        return ListEditorWindow(Discipline.STACK, config, style)
    if demo == "queue":
        return ListEditorWindow(Discipline.QUEUE, config, style)
    if demo == "qr":
        return QRCodeWindow(config, style)
    raise ValueError(f"Unknown demo: {demo}")


def run(demo: str = "qr", config: Optional[AppConfig] = None) -> int:  # pragma: no cover - requires Qt event loop
    config = config or AppConfig()
    app = QApplication.instance() or QApplication([])
    app.setApplicationName(config.app_name)
    window = create_window(demo, config, StyleConfig())
    window.show()
    logger.info("Started %s demo", demo)
    return app.exec_()


__all__ = ["ListEditorWindow", "QRCodeWindow", "create_window", "run"]
