"""Position — board plus side to move."""

from __future__ import annotations

from chesslet.core.board import Board
from chesslet.core.enums import Color
from chesslet.core.move import Move
from chesslet.core.piece import Piece


class Position:
    """Chess position: board + side to move.

    Mutated in place by :meth:`make_move`; there is no history and no undo.
    """

    __slots__ = ("board", "turn")

    def __init__(
        self,
        board: Board | None = None,
        turn: Color = Color.WHITE,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.turn = turn

    @classmethod
    def initial(cls) -> Position:
        """Standard starting setup, white to move."""
        return cls(Board.initial(), Color.WHITE)

    # ── Core move operation ──────────────────────────────────────────────

    def make_move(self, move: Move) -> Piece | None:
        """Move the piece on ``move.from_sq`` and flip the turn.

        Returns the piece that stood on the destination, if any. Legality is
        the caller's responsibility.
        """
        piece = self.board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        captured = self.board[move.to_sq]
        self.board[move.to_sq] = piece
        self.board[move.from_sq] = None
        self.turn = self.turn.opposite
        return captured

    # ── Utilities ────────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.turn

    def copy(self) -> Position:
        return Position(board=self.board.copy(), turn=self.turn)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.turn == other.turn and self.board == other.board

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.turn} to move"
