"""CapturedPanel — shows the pieces each side has lost."""

from __future__ import annotations

from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from chesslet.core.captured import CapturedPieces
from chesslet.core.enums import Color
from chesslet.core.piece import piece_symbol

_TITLES: dict[Color, str] = {
    Color.WHITE: "White Captured",
    Color.BLACK: "Black Captured",
}


class CapturedPanel(QWidget):
    """Two rows of captured-piece symbols, one per color, in capture order."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(4)

        self._rows: dict[Color, QLabel] = {}
        for color in (Color.WHITE, Color.BLACK):
            title = QLabel(_TITLES[color])
            title.setObjectName("capturedTitle")
            row = QLabel()
            row.setStyleSheet("font-size: 26px;")
            layout.addWidget(title)
            layout.addWidget(row)
            self._rows[color] = row
        layout.addStretch()

    def set_captured(self, captured: CapturedPieces) -> None:
        """Re-render both rows from *captured*."""
        for color, label in self._rows.items():
            label.setText("".join(piece_symbol(color, pt) for pt in captured.of(color)))

    def row_text(self, color: Color) -> str:
        return self._rows[color].text()
