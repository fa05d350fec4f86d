"""Move legality per piece type, path clearance, destination generation."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chesslet.core.board import Board
from chesslet.core.enums import Color, PieceType
from chesslet.core.move import Move
from chesslet.core.piece import Piece
from chesslet.core.types import ALL_SQUARES, Square

if TYPE_CHECKING:
    from chesslet.core.position import Position


KNIGHT_JUMPS: frozenset[tuple[int, int]] = frozenset({(2, 1), (1, 2)})

# Pawns of each color advance toward decreasing (white) or increasing (black) row.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Whether every square strictly between *from_sq* and *to_sq* is empty.

    Steps one square at a time along the sign of each axis delta, so the two
    squares must share a row, a column or a diagonal.
    """
    step_r = _sign(to_sq[0] - from_sq[0])
    step_c = _sign(to_sq[1] - from_sq[1])
    row = from_sq[0] + step_r
    col = from_sq[1] + step_c
    while (row, col) != to_sq:
        if board[(row, col)] is not None:
            return False
        row += step_r
        col += step_c
    return True


# -- Per-piece rules ---------------------------------------------------------


def _pawn_ok(board: Board, piece: Piece, move: Move) -> bool:
    direction = PAWN_DIRECTION[piece.color]
    (row, col), (to_row, to_col) = move.from_sq, move.to_sq
    target_empty = board[move.to_sq] is None

    if col == to_col and target_empty:
        if row + direction == to_row:
            return True
        if (
            row == PAWN_HOME_ROW[piece.color]
            and row + 2 * direction == to_row
            and board[(row + direction, col)] is None
        ):
            return True

    if abs(col - to_col) == 1 and row + direction == to_row:
        return not target_empty

    return False


def _knight_ok(board: Board, piece: Piece, move: Move) -> bool:
    dr, dc = move.delta
    return (abs(dr), abs(dc)) in KNIGHT_JUMPS


def _bishop_ok(board: Board, piece: Piece, move: Move) -> bool:
    dr, dc = move.delta
    if dr == 0 or abs(dr) != abs(dc):
        return False
    return is_path_clear(board, move.from_sq, move.to_sq)


def _rook_ok(board: Board, piece: Piece, move: Move) -> bool:
    dr, dc = move.delta
    return (dr == 0) != (dc == 0) and is_path_clear(board, move.from_sq, move.to_sq)


def _queen_ok(board: Board, piece: Piece, move: Move) -> bool:
    return _rook_ok(board, piece, move) or _bishop_ok(board, piece, move)


def _king_ok(board: Board, piece: Piece, move: Move) -> bool:
    dr, dc = move.delta
    return abs(dr) <= 1 and abs(dc) <= 1


_PieceRule = Callable[[Board, Piece, Move], bool]

PIECE_RULES: dict[PieceType, _PieceRule] = {
    PieceType.PAWN: _pawn_ok,
    PieceType.KNIGHT: _knight_ok,
    PieceType.BISHOP: _bishop_ok,
    PieceType.ROOK: _rook_ok,
    PieceType.QUEEN: _queen_ok,
    PieceType.KING: _king_ok,
}


class MoveGenerator:
    """Answers legality questions for a given :class:`Position`.

    Never mutates the position.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def is_legal(self, move: Move) -> bool:
        """Piece rules plus the side-to-move check.

        The moving piece must belong to the side whose turn it is.
        """
        piece = self._board[move.from_sq]
        if piece is None or piece.color != self._pos.turn:
            return False
        return self.is_pseudo_legal(move)

    def is_pseudo_legal(self, move: Move) -> bool:
        """Per-piece movement rules only; ignores whose turn it is.

        May leave the mover's own king capturable.
        """
        board = self._board
        piece = board[move.from_sq]
        if piece is None:
            return False

        target = board[move.to_sq]
        if target is not None and target.color == piece.color:
            return False

        rule = PIECE_RULES.get(piece.piece_type)
        if rule is None:
            return False
        return rule(board, piece, move)

    def legal_destinations(self, from_sq: Square) -> set[Square]:
        """Every square the piece on *from_sq* may legally move to."""
        return {
            to_sq for to_sq in ALL_SQUARES if self.is_legal(Move(from_sq, to_sq))
        }

    def generate_legal_moves(self) -> list[Move]:
        """All legal moves for the side to move, in board order."""
        moves: list[Move] = []
        for from_sq in self._board.pieces(self._pos.turn):
            for to_sq in ALL_SQUARES:
                move = Move(from_sq, to_sq)
                if self.is_pseudo_legal(move):
                    moves.append(move)
        return moves
