"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chesslet.core import CapturedPieces, Move, Position, Rules

    pos = Position.initial()
    Rules.legal_destinations(pos, (6, 4))   # {(5, 4), (4, 4)}
    Rules.apply_move(pos, Move((6, 4), (4, 4)), CapturedPieces())
"""

from chesslet.core.board import Board
from chesslet.core.captured import CapturedPieces
from chesslet.core.enums import Color, PieceType
from chesslet.core.move import Move
from chesslet.core.move_generator import MoveGenerator, is_path_clear
from chesslet.core.piece import Piece
from chesslet.core.position import Position
from chesslet.core.rules import MoveRecord, Rules
from chesslet.core.types import (
    ALL_SQUARES,
    Square,
    is_valid_square,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "is_valid_square",
    # Domain objects
    "Board",
    "CapturedPieces",
    "Move",
    "MoveGenerator",
    "MoveRecord",
    "Piece",
    "Position",
    "Rules",
    "is_path_clear",
]
