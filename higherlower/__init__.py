"""Core Higher/Lower engine - 100% UI-agnostic."""

from higherlower.cards import Card, Deck, Rank, Suit, rank_value
from higherlower.errors import (
    EmptyDeckError,
    GameNotStartedError,
    GameOverError,
    HigherLowerError,
    InsufficientCardsError,
    InvalidGuessError,
)

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "rank_value",
    "EmptyDeckError",
    "GameNotStartedError",
    "GameOverError",
    "HigherLowerError",
    "InsufficientCardsError",
    "InvalidGuessError",
]
