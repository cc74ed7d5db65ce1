"""Pytest fixtures for Higher/Lower tests."""

from random import Random

import pytest
from hypothesis import strategies as st

from higherlower.cards import Card, Deck, Rank, Suit
from higherlower.game import HigherLowerGame


class NoSwapRandom(Random):
    """Random whose Fisher-Yates picks never move a card, leaving the deck in canonical order."""

    def randint(self, a: int, b: int) -> int:
        return b


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def game(rng):
    """A new game instance, not yet begun."""
    return HigherLowerGame(rng=rng)


@pytest.fixture
def started_game(game):
    """A game that has been begun."""
    game.begin()
    return game


@pytest.fixture
def ordered_game():
    """A begun game whose deck was left in canonical order by the shuffle."""
    g = HigherLowerGame(rng=NoSwapRandom())
    g.begin()
    return g


def set_cards(game: HigherLowerGame, current: Card, challenger: Card) -> None:
    """Force the two face-up cards of a begun game."""
    game._current = current
    game._challenger = challenger


def play_perfectly(game: HigherLowerGame):
    """Guess correctly until the game ends, returning the last TurnResult."""
    while True:
        current = game.get_current_card()
        challenger = game.get_challenging_card()
        guess = "higher" if challenger.value >= current.value else "lower"
        result = game.check_higher_or_lower(guess)
        if result.game_over:
            return result


@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(suit, rank)


def deck_cards(deck: Deck) -> list[Card]:
    """Empty a deck, returning its cards bottom first."""
    cards = [deck.draw() for _ in range(deck.remaining())]
    cards.reverse()
    return cards
