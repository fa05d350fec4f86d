"""Captured-piece bookkeeping for display."""

from __future__ import annotations

from dataclasses import dataclass, field

from chesslet.core.enums import Color, PieceType
from chesslet.core.piece import Piece


@dataclass
class CapturedPieces:
    """Append-only record, per color, of the piece types taken off the board.

    ``white`` lists captured *white* pieces and ``black`` captured *black*
    pieces, each in capture order. Legality never consults this.
    """

    white: list[PieceType] = field(default_factory=list)
    black: list[PieceType] = field(default_factory=list)

    def record(self, piece: Piece) -> None:
        """Append *piece*'s type to the list of its own color."""
        self.of(piece.color).append(piece.piece_type)

    def of(self, color: Color) -> list[PieceType]:
        return self.white if color == Color.WHITE else self.black

    def clear(self) -> None:
        self.white.clear()
        self.black.clear()

    def __len__(self) -> int:
        return len(self.white) + len(self.black)
