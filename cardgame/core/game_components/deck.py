# cardgame/core/game_components/deck.py

import logging
from numbers import Integral
from typing import List, Optional, Tuple

import numpy as np # Using numpy for random operations for better control with seeding
from numpy.random import Generator

from cardgame.core.game_components.card import Card
from cardgame.core.game_components.face import Face
from cardgame.core.game_components.suit import Suit

logger = logging.getLogger(__name__)
logger.setLevel(logging.WARNING)

CARDS_PER_DECK = len(Suit) * len(Face)


def ordered_cards() -> List[Card]:
    """Returns the 52 cards in canonical order: suit-major (S, H, D, C), face-ascending."""
    return [Card(suit, face) for suit in Suit for face in Face]


class Deck:
    """
    Represents a deck of 52 playing cards.

    Each call to `deal_hand` works on the full deck: it shuffles all 52 cards,
    deals from the top and then restores the canonical order, so dealt cards
    are not tracked across calls.
    """
    def __init__(self, rng: Optional[Generator] = None):
        self._cards: List[Card] = []
        # Use provided RNG or create a new default one
        self._rng = rng if rng is not None else np.random.default_rng()
        self.reset()

    def reset(self):
        """Restores the full deck in canonical order."""
        self._cards = ordered_cards()

    def shuffle(self):
        """
        Shuffles the deck in place using the internal random number generator.

        Every position is visited once and swapped with a uniformly chosen
        position anywhere in the deck, which may be itself.
        """
        size = len(self._cards)
        for i in range(size):
            j = int(self._rng.integers(0, size))
            self._cards[i], self._cards[j] = self._cards[j], self._cards[i]

    def deal_hand(self, n: int) -> List[Card]:
        """
        Deals a hand of `n` distinct cards from a freshly shuffled deck.

        Args:
            n (int): The number of cards to deal, between 0 and 52.

        Returns:
            List[Card]: The dealt cards, in the shuffled order.

        Raises:
            ValueError: If `n` is not an integer between 0 and 52.
        """
        if isinstance(n, bool) or not isinstance(n, Integral) or not 0 <= n <= CARDS_PER_DECK:
            raise ValueError(f"Parameter n must be a number between 0 and {CARDS_PER_DECK}, got {n!r}.")
        self.shuffle()
        dealt_cards = self._cards[:int(n)]
        self.reset()
        logger.debug(f"Dealt {len(dealt_cards)} cards: {[card.code for card in dealt_cards]}")
        return dealt_cards

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def __len__(self):
        return len(self._cards)

    def __repr__(self):
        return f"Deck({len(self._cards)} cards)"
