"""Higher/Lower game engine with state machine."""

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Callable

from transitions import Machine

from higherlower.cards import Card, Deck, Rank, Suit
from higherlower.errors import (
    GameNotStartedError,
    GameOverError,
    InsufficientCardsError,
    InvalidGuessError,
)
from higherlower.game.events import EventEmitter, EventType, GameEvent
from higherlower.game.state import GameOverReason, GameState

TIE_REASON = "Tie (equal cards always count as correct)"


class Guess(Enum):
    """The player's prediction for the challenging card."""

    HIGHER = "higher"
    LOWER = "lower"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, guess: "Guess | str") -> "Guess":
        """Return a Guess for a Guess or its value string, else raise InvalidGuessError."""
        if isinstance(guess, cls):
            return guess
        if not isinstance(guess, str):
            raise InvalidGuessError(guess)
        try:
            return cls(guess)
        except ValueError:
            raise InvalidGuessError(guess) from None


@dataclass(frozen=True, slots=True)
class CardView:
    """Read-only projection of a card for the presentation layer."""

    suit: Suit
    rank: Rank
    value: int
    display: str

    def __str__(self) -> str:
        return self.display

    @classmethod
    def from_card(cls, card: Card) -> "CardView":
        """Create a CardView from a core Card."""
        return cls(suit=card.suit, rank=card.rank, value=card.value, display=str(card))


@dataclass(frozen=True, slots=True)
class TurnResult:
    """Outcome of resolving one guess."""

    current: CardView
    challenger: CardView
    guess: Guess
    correct: bool
    score: int
    remaining: int
    game_over: bool
    reason: str | None = None


class HigherLowerGame:
    """
    Higher/Lower game engine using a state machine.

    The engine owns its deck outright and only ever hands out CardView
    projections. It is completely UI-agnostic: communication happens
    through return values, exceptions and events.

    Ties are resolved as correct whichever way the player guessed.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "deal", "source": "*", "dest": "in_progress"},
        {"trigger": "advance", "source": "in_progress", "dest": "in_progress"},
        {"trigger": "end_game", "source": "in_progress", "dest": "game_over"},
    ]

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize a new game. Nothing is dealt until begin() is called.

        Args:
            rng: Random number generator for reproducible games
        """
        self._deck = Deck(rng=rng or Random())
        self._current: Card | None = None
        self._challenger: Card | None = None
        self._score = 0
        self._reason: GameOverReason | None = None
        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="not_started",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    @property
    def game_over_reason(self) -> GameOverReason | None:
        """Why the last game ended, or None while one is running."""
        return self._reason

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def begin(self) -> None:
        """
        Start a new game, discarding any previous one.

        Rebuilds and shuffles the deck, zeroes the score and deals the
        current and challenging cards. The event history restarts with
        the new game.
        """
        self._deck.reset()
        if self._deck.remaining() < 2:
            raise InsufficientCardsError(self._deck.remaining())

        self.events.clear_history()
        self._deck.shuffle()
        self.events.emit_new(EventType.DECK_SHUFFLED, remaining=self._deck.remaining())

        self._score = 0
        self._reason = None

        self._current = self._draw()
        self._challenger = self._draw()

        self.deal()
        self.events.emit_new(
            EventType.GAME_STARTED,
            current=str(self._current),
            challenger=str(self._challenger),
            remaining=self._deck.remaining(),
        )

    def _draw(self) -> Card:
        card = self._deck.draw()
        self.events.emit_new(
            EventType.CARD_DRAWN,
            card=str(card),
            remaining=self._deck.remaining(),
        )
        return card

    def _require_started(self) -> None:
        if self.state == GameState.NOT_STARTED:
            raise GameNotStartedError()

    def _face_up(self) -> tuple[Card, Card]:
        """Return the current and challenging cards."""
        if self._current is None or self._challenger is None:
            raise GameNotStartedError()
        return self._current, self._challenger

    def get_current_card(self) -> CardView:
        """Return the face-up card the challenger is compared against."""
        current, _ = self._face_up()
        return CardView.from_card(current)

    def get_challenging_card(self) -> CardView:
        """Return the challenging card."""
        _, challenger = self._face_up()
        return CardView.from_card(challenger)

    def get_score(self) -> int:
        """Return the number of correct guesses this game."""
        self._require_started()
        return self._score

    def remaining_cards(self) -> int:
        """Return the number of cards left in the deck."""
        self._require_started()
        return self._deck.remaining()

    def is_game_over(self) -> bool:
        """Check if the current game has ended."""
        self._require_started()
        return self.state == GameState.GAME_OVER

    def check_higher_or_lower(self, guess: Guess | str) -> TurnResult:
        """
        Resolve a guess about the challenging card.

        Args:
            guess: Guess.HIGHER or Guess.LOWER (or "higher"/"lower")

        Returns:
            The outcome of the turn

        Raises:
            GameNotStartedError: begin() has never been called
            GameOverError: the game has already ended
            InvalidGuessError: guess is neither higher nor lower
        """
        self._require_started()
        if self.state == GameState.GAME_OVER:
            raise GameOverError()
        guess = Guess.coerce(guess)

        current, challenger = self._face_up()

        comparison = challenger.value - current.value
        tie = comparison == 0
        correct = (
            tie
            or (comparison > 0 and guess == Guess.HIGHER)
            or (comparison < 0 and guess == Guess.LOWER)
        )

        if not correct:
            return self._finish_wrong(guess, current, challenger)

        self._score += 1
        self._current = challenger
        if tie:
            self.events.emit_new(EventType.TIE, card=str(challenger))
        self.events.emit_new(
            EventType.GUESS_CORRECT,
            guess=guess.value,
            card=str(challenger),
            score=self._score,
        )

        if self._deck.remaining() == 0:
            return self._finish_exhausted(guess, challenger)

        self._challenger = self._draw()
        self.advance()

        return TurnResult(
            current=CardView.from_card(challenger),
            challenger=CardView.from_card(self._challenger),
            guess=guess,
            correct=True,
            score=self._score,
            remaining=self._deck.remaining(),
            game_over=False,
            reason=TIE_REASON if tie else None,
        )

    def _finish_wrong(self, guess: Guess, current: Card, challenger: Card) -> TurnResult:
        """End the game on a wrong guess, leaving both cards where they were."""
        self._reason = GameOverReason.WRONG_GUESS
        self.events.emit_new(
            EventType.GUESS_WRONG,
            guess=guess.value,
            current=str(current),
            challenger=str(challenger),
        )
        self.end_game()
        self.events.emit_new(EventType.GAME_ENDED, reason=self._reason.name, score=self._score)

        return TurnResult(
            current=CardView.from_card(current),
            challenger=CardView.from_card(challenger),
            guess=guess,
            correct=False,
            score=self._score,
            remaining=self._deck.remaining(),
            game_over=True,
            reason=str(self._reason),
        )

    def _finish_exhausted(self, guess: Guess, last: Card) -> TurnResult:
        """End the game after the last card was called correctly."""
        self._reason = GameOverReason.DECK_EXHAUSTED
        self.events.emit_new(EventType.DECK_EXHAUSTED, score=self._score)
        self.end_game()
        self.events.emit_new(EventType.GAME_ENDED, reason=self._reason.name, score=self._score)

        return TurnResult(
            current=CardView.from_card(last),
            challenger=CardView.from_card(last),
            guess=guess,
            correct=True,
            score=self._score,
            remaining=0,
            game_over=True,
            reason=str(self._reason),
        )
