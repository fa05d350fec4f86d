"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesslet.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single from → to transition."""

    from_sq: Square
    to_sq: Square

    @property
    def delta(self) -> tuple[int, int]:
        """(Δrow, Δcol) from origin to destination."""
        return (self.to_sq[0] - self.from_sq[0], self.to_sq[1] - self.from_sq[1])
