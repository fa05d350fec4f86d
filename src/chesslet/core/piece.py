"""Pieces as plain color + type values."""

from __future__ import annotations

from dataclasses import dataclass

from chesslet.core.enums import Color, PieceType

_LETTERS = "PNBRQK"
_WHITE_GLYPHS = "♙♘♗♖♕♔"
_BLACK_GLYPHS = "♟♞♝♜♛♚"

_GLYPHS: dict[Color, dict[PieceType, str]] = {
    Color.WHITE: dict(zip(PieceType, _WHITE_GLYPHS)),
    Color.BLACK: dict(zip(PieceType, _BLACK_GLYPHS)),
}
_LETTER_OF: dict[PieceType, str] = dict(zip(PieceType, _LETTERS))
_TYPE_OF: dict[str, PieceType] = {letter: pt for pt, letter in _LETTER_OF.items()}


def piece_symbol(color: Color, piece_type: PieceType) -> str:
    return _GLYPHS[color][piece_type]


@dataclass(frozen=True, slots=True)
class Piece:
    """A colored piece. Two pieces are equal when color and type match."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        letter = _LETTER_OF[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Parse a board-diagram letter; case picks the color."""
        piece_type = _TYPE_OF.get(char.upper()) if len(char) == 1 else None
        if piece_type is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, piece_type)

    @property
    def symbol(self) -> str:
        return piece_symbol(self.color, self.piece_type)
