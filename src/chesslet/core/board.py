"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from chesslet.core.enums import Color, PieceType
from chesslet.core.piece import Piece
from chesslet.core.types import ALL_SQUARES, BOARD_SIZE, Square, square_index

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square container of optional pieces.

    Pure storage: no rule is checked here. Squares outside the board raise
    :class:`ValueError`.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[square_index(sq)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[square_index(sq)] = piece

    def get(self, sq: Square) -> Piece | None:
        return self[sq]

    def set(self, sq: Square, piece: Piece | None) -> None:
        self[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, row by row."""
        for sq in ALL_SQUARES:
            piece = self._squares[square_index(sq)]
            if piece is not None:
                yield sq, piece

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * (BOARD_SIZE * BOARD_SIZE)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position (black on rows 0-1, white on rows 6-7)."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[(0, col)] = Piece(Color.BLACK, pt)
            b[(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[(7, col)] = Piece(Color.WHITE, pt)
        return b

    @classmethod
    def from_diagram(cls, rows: Iterable[str]) -> Board:
        """Build a board from eight text rows, row 0 first.

        Each row holds eight characters: a piece letter (``PNBRQK`` white,
        ``pnbrqk`` black) or ``.`` for an empty square. Spaces are ignored.
        """
        lines = [row.replace(" ", "") for row in rows]
        if len(lines) != BOARD_SIZE or any(len(line) != BOARD_SIZE for line in lines):
            raise ValueError("Board diagram must be 8 rows of 8 squares")

        b = cls()
        for row, line in enumerate(lines):
            for col, char in enumerate(line):
                if char != ".":
                    b[(row, col)] = Piece.from_char(char)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self[(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  0 1 2 3 4 5 6 7")
        return "\n".join(rows)
