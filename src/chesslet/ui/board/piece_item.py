"""PieceItem — a chess piece glyph on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsSimpleTextItem

from chesslet.core.enums import Color
from chesslet.core.piece import Piece
from chesslet.core.types import Square


class PieceItem(QGraphicsSimpleTextItem):
    """A single chess piece drawn as its Unicode symbol.

    Stores its logical *square*; centred inside its tile.
    """

    _FONT_RATIO = 0.72

    def __init__(
        self,
        piece: Piece,
        square: Square,
        tile_size: int,
        light: QColor,
        dark: QColor,
    ) -> None:
        super().__init__(piece.symbol)
        self.piece = piece
        self.square = square

        font = QFont()
        font.setPixelSize(int(tile_size * self._FONT_RATIO))
        self.setFont(font)

        # White glyphs get a dark outline, black glyphs a light one.
        fill, outline = (light, dark) if piece.color == Color.WHITE else (dark, light)
        self.setBrush(QBrush(fill))
        self.setPen(QPen(outline, 1.0))
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)

    def place(self, x: float, y: float, tile_size: int) -> None:
        """Centre the glyph in the tile whose top-left corner is (x, y)."""
        bounds = self.boundingRect()
        self.setPos(
            x + (tile_size - bounds.width()) / 2,
            y + (tile_size - bounds.height()) / 2,
        )
