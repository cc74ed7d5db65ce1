"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Game state machine states.

    Flow: NOT_STARTED → IN_PROGRESS → GAME_OVER → (begin) IN_PROGRESS
    """

    # Before the first begin()
    NOT_STARTED = auto()

    # Guesses are being accepted
    IN_PROGRESS = auto()

    # Wrong guess or deck exhausted
    GAME_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class GameOverReason(Enum):
    """Why a game ended."""

    WRONG_GUESS = "Wrong guess"
    DECK_EXHAUSTED = "Deck is empty (you win)"

    def __str__(self) -> str:
        return self.value

    @property
    def is_win(self) -> bool:
        """Check if the game ended with the player clearing the deck."""
        return self == GameOverReason.DECK_EXHAUSTED

