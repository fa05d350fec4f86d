"""Visual theme constants and QSS styles for chesslet."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # legal move targets
    piece_light: QColor
    piece_dark: QColor
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 160, 0, 90),
            piece_light=QColor(255, 255, 255),
            piece_dark=QColor(20, 20, 20),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 160, 0, 90),
            piece_light=QColor(255, 255, 255),
            piece_dark=QColor(20, 20, 20),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 160, 0, 90),
            piece_light=QColor(255, 255, 255),
            piece_dark=QColor(20, 20, 20),
            coord_light=QColor(112, 149, 120),
            coord_dark=QColor(236, 238, 220),
        )


THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Blue": BoardTheme.blue(),
    "Green": BoardTheme.green(),
}


APP_STYLE = """
QMainWindow, QWidget {
    background-color: #2b2b2b;
    color: #e0e0e0;
}
QLabel#capturedTitle {
    font-weight: bold;
}
QLabel#turnLabel {
    font-size: 15px;
    padding: 4px;
}
"""
