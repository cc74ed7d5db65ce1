"""Exceptions raised by the Higher/Lower engine."""


class HigherLowerError(Exception):
    """Base class for all engine errors."""


class EmptyDeckError(HigherLowerError, IndexError):
    """Raised when drawing from a deck with no cards left."""

    def __init__(self) -> None:
        super().__init__("Cannot draw from empty deck")


class InsufficientCardsError(HigherLowerError, RuntimeError):
    """Raised when a freshly reset deck cannot supply the two opening cards."""

    def __init__(self, available: int) -> None:
        super().__init__(f"Not enough cards to start a game: {available} available, 2 needed")
        self.available = available


class GameNotStartedError(HigherLowerError, RuntimeError):
    """Raised when the game is queried or played before begin()."""

    def __init__(self) -> None:
        super().__init__("Game not started. Call begin() first.")


class GameOverError(HigherLowerError, RuntimeError):
    """Raised when a guess is submitted after the game has ended."""

    def __init__(self) -> None:
        super().__init__("Game is over. Call begin() to play again.")


class InvalidGuessError(HigherLowerError, ValueError):
    """Raised for a guess that is neither higher nor lower."""

    def __init__(self, guess: object) -> None:
        super().__init__(f"Invalid guess: {guess!r} (expected 'higher' or 'lower')")
        self.guess = guess
