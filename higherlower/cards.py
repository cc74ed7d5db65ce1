"""Card and Deck classes - immutable cards and a 54-card deck with Jokers."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random

from higherlower.errors import EmptyDeckError


class Suit(Enum):
    """Card suits. Labels only, suits never affect a card's value."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        return self.name.title()


class Rank(Enum):
    """Card ranks, including the Joker."""

    TWO = auto()
    THREE = auto()
    FOUR = auto()
    FIVE = auto()
    SIX = auto()
    SEVEN = auto()
    EIGHT = auto()
    NINE = auto()
    TEN = auto()
    JACK = auto()
    QUEEN = auto()
    KING = auto()
    ACE = auto()
    JOKER = auto()

    def __str__(self) -> str:
        return RANK_LABELS[self]

    @property
    def is_joker(self) -> bool:
        """Check if this rank is the Joker."""
        return self == Rank.JOKER


RANK_LABELS: dict[Rank, str] = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "Jack",
    Rank.QUEEN: "Queen",
    Rank.KING: "King",
    Rank.ACE: "Ace",
    Rank.JOKER: "Joker",
}

RANK_VALUES: dict[Rank, int] = {
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 11,
    Rank.QUEEN: 12,
    Rank.KING: 13,
    Rank.ACE: 14,
    Rank.JOKER: 15,
}

# Canonical deck-building order
SUITS: tuple[Suit, ...] = (Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES)
STANDARD_RANKS: tuple[Rank, ...] = tuple(r for r in Rank if not r.is_joker)

# A Joker still needs a suit label; which one carries no meaning.
JOKER_SUITS: tuple[Suit, ...] = (Suit.CLUBS, Suit.SPADES)

DECK_SIZE = len(SUITS) * len(STANDARD_RANKS) + len(JOKER_SUITS)


def rank_value(rank: Rank) -> int:
    """
    Return the numeric strength of a rank.

    Two through Ten score their pip count, then Jack=11, Queen=12,
    King=13, Ace=14 and Joker=15. This is the only ordering between cards.
    """
    return RANK_VALUES[rank]


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    suit: Suit
    rank: Rank

    def __str__(self) -> str:
        if self.is_joker:
            return "Joker"
        return f"{self.rank} of {self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.rank.name})"

    @property
    def value(self) -> int:
        """Return the comparison value of this card."""
        return rank_value(self.rank)

    @property
    def is_joker(self) -> bool:
        """Check if this card is a Joker."""
        return self.rank.is_joker


class Deck:
    """A 52-card deck plus two Jokers, dealt from the top (the end of the list)."""

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize a new deck in canonical order.

        Args:
            rng: Random number generator used by shuffle()
        """
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Reset deck to all 54 cards in canonical order."""
        self._cards = [Card(suit, rank) for suit in SUITS for rank in STANDARD_RANKS]
        self._cards.extend(Card(suit, Rank.JOKER) for suit in JOKER_SUITS)

    def shuffle(self) -> None:
        """Shuffle the deck in place (Fisher-Yates)."""
        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]

    def draw(self) -> Card:
        """Draw a card from the top of the deck."""
        if not self._cards:
            raise EmptyDeckError()
        return self._cards.pop()

    def remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)
