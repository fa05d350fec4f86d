"""Square type alias and coordinate helpers.

Board layout (row, col), both 0–7:
    row 0 is black's back rank, row 7 is white's back rank;
    col 0 is the a-file, col 7 is the h-file.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col)

BOARD_SIZE = 8


def is_valid_square(sq: Square) -> bool:
    """Check whether both coordinates lie on the board."""
    row, col = sq
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_index(sq: Square) -> int:
    """Flat 0–63 index of *sq*; raises ValueError when off the board."""
    if not is_valid_square(sq):
        raise ValueError(f"Square off the board: {sq!r}")
    return sq[0] * BOARD_SIZE + sq[1]


ALL_SQUARES: tuple[Square, ...] = tuple(
    (row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)
