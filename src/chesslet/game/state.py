"""Game session — one position, its captures, and the click-selection state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chesslet.core.captured import CapturedPieces
from chesslet.core.enums import Color
from chesslet.core.move import Move
from chesslet.core.move_generator import MoveGenerator
from chesslet.core.position import Position
from chesslet.core.rules import MoveRecord, Rules
from chesslet.core.types import Square

_LOGGER = logging.getLogger(__name__)


@dataclass
class GameState:
    """Owns the live position and drives the select → confirm protocol.

    This is a pure data/logic class — no threading, no UI.
    """

    position: Position = field(default_factory=Position.initial)
    captured: CapturedPieces = field(default_factory=CapturedPieces)
    selected: Square | None = field(default=None, init=False)
    hints: frozenset[Square] = field(default=frozenset(), init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, position: Position | None = None) -> None:
        """Initialise (or reset) the game."""
        self.position = position if position is not None else Position.initial()
        self.captured = CapturedPieces()
        self.clear_selection()

    # ── Selection ────────────────────────────────────────────────────────

    def select(self, sq: Square) -> bool:
        """Select the piece on *sq* if it belongs to the side to move.

        Caches its legal destinations in :attr:`hints`.
        """
        if not self.is_selectable(sq):
            return False
        self.selected = sq
        self.hints = frozenset(Rules.legal_destinations(self.position, sq))
        return True

    def clear_selection(self) -> None:
        self.selected = None
        self.hints = frozenset()

    def click(self, sq: Square) -> MoveRecord | None:
        """Handle a click on *sq*.

        Without a selection the click tries to select. With one, a hinted
        square plays the move and anything else just drops the selection.
        """
        if self.selected is None:
            self.select(sq)
            return None

        if sq in self.hints:
            return self.apply_move(Move(self.selected, sq))

        self.clear_selection()
        return None

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a validated move and return its record.

        Caller is responsible for legality check.
        """
        record = Rules.apply_move(self.position, move, self.captured)
        self.clear_selection()
        taken = record.captured
        if taken is not None:
            _LOGGER.info(
                "%s %s taken, %d piece(s) captured so far",
                taken.color,
                taken.piece_type,
                len(self.captured),
            )
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.turn

    def is_selectable(self, sq: Square) -> bool:
        piece = self.position.board[sq]
        return piece is not None and piece.color == self.position.turn

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return MoveGenerator(self.position).generate_legal_moves()
