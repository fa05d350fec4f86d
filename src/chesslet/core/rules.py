"""High-level rule entry points: legality queries and move application."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chesslet.core.move import Move
from chesslet.core.move_generator import MoveGenerator
from chesslet.core.piece import Piece

if TYPE_CHECKING:
    from chesslet.core.captured import CapturedPieces
    from chesslet.core.position import Position
    from chesslet.core.types import Square

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """Outcome of one applied move."""

    move: Move
    piece: Piece
    captured: Piece | None = None

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def is_legal_move(position: Position, from_sq: Square, to_sq: Square) -> bool:
        return MoveGenerator(position).is_legal(Move(from_sq, to_sq))

    @staticmethod
    def legal_destinations(position: Position, from_sq: Square) -> set[Square]:
        return MoveGenerator(position).legal_destinations(from_sq)

    @staticmethod
    def apply_move(
        position: Position, move: Move, captured: CapturedPieces
    ) -> MoveRecord:
        """Play *move* on *position* and record any capture.

        Caller is responsible for legality check. The taken piece is filed
        under its own color in *captured*.
        """
        piece = position.board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        taken = position.make_move(move)
        if taken is not None:
            captured.record(taken)
            _LOGGER.debug(
                "%s %s captured %s on %s",
                piece.color,
                piece.piece_type,
                taken.piece_type,
                move.to_sq,
            )

        _LOGGER.debug(
            "Applied %s -> %s, %s to move", move.from_sq, move.to_sq, position.turn
        )
        return MoveRecord(move=move, piece=piece, captured=taken)
