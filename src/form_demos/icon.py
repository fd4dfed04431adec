"""Window icon helpers."""
from __future__ import annotations

# Corners that carry a finder square, as (column, row) in a 3x3 grid.
_FINDER_CELLS = ((0, 0), (2, 0), (0, 2))


def create_icon(letter: str, color: str = "#88C0D0", size: int = 64):  # pragma: no cover - requires PyQt at runtime
    """Return a ``QIcon`` styled after a QR code with ``letter`` in the free corner.

    Each demo passes its own letter so the windows can be told apart in the
    task bar.
    """

    try:
        from PyQt5.QtCore import QRectF, Qt
        from PyQt5.QtGui import QColor, QFont, QIcon, QPainter, QPixmap
    except Exception as exc:  # pragma: no cover - depends on environment
        raise RuntimeError("PyQt5 is required to generate the window icon") from exc

    cell = size / 3.0
    pixmap = QPixmap(size, size)
    pixmap.fill(QColor("#2E3440"))

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.Antialiasing)
    painter.setPen(Qt.NoPen)

    for column, row in _FINDER_CELLS:
        outer = QRectF(column * cell, row * cell, cell, cell).adjusted(2, 2, -2, -2)
        painter.setBrush(QColor(color))
        painter.drawRect(outer)
        painter.setBrush(QColor("#2E3440"))
        painter.drawRect(outer.adjusted(cell / 6, cell / 6, -cell / 6, -cell / 6))
        painter.setBrush(QColor(color))
        painter.drawRect(outer.adjusted(cell / 3, cell / 3, -cell / 3, -cell / 3))

    painter.setPen(QColor(color))
    painter.setFont(QFont("Arial", max(8, int(cell * 0.7)), QFont.Bold))
    painter.drawText(QRectF(2 * cell, 2 * cell, cell, cell), Qt.AlignCenter, letter[:1].upper())
    painter.end()

    return QIcon(pixmap)


__all__ = ["create_icon"]
