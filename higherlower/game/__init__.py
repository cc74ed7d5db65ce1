"""Game engine and state management."""

from higherlower.game.events import GameEvent, EventType
from higherlower.game.state import GameOverReason, GameState
from higherlower.game.engine import CardView, Guess, HigherLowerGame, TurnResult

__all__ = [
    "GameEvent",
    "EventType",
    "GameOverReason",
    "GameState",
    "CardView",
    "Guess",
    "HigherLowerGame",
    "TurnResult",
]
