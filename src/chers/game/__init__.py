"""Game layer: move history and lifecycle on top of the core rules."""

from chers.game.state import GamePhase, GameState, MoveRecord

__all__ = [
    "GamePhase",
    "GameState",
    "MoveRecord",
]
