"""Game management layer — session state over the core rules."""

from chesslet.game.state import GameState

__all__ = ["GameState"]
