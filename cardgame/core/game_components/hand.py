# cardgame/core/game_components/hand.py

from collections import Counter
from typing import Iterable, Iterator, Optional, Tuple, Union

from cardgame.core.game_components.card import Card
from cardgame.core.game_components.face import Face
from cardgame.core.game_components.suit import Suit

NO_MATCH_TEXT = "No hearts"


class Hand:
    """Represents a dealt hand. The cards are fixed at construction; every query is read-only."""
    def __init__(self, cards: Optional[Iterable[Card]] = None):
        self._cards: Tuple[Card, ...] = tuple(cards) if cards is not None else ()

    @property
    def cards(self) -> Tuple[Card, ...]:
        return self._cards

    def check_flush(self, n: int) -> bool:
        """
        Checks whether at least `n` cards share a suit.

        Args:
            n (int): The number of cards that must have the same suit.

        Returns:
            bool: True if any suit is held `n` or more times.
        """
        suit_counts = Counter(card.suit for card in self._cards)
        return any(count >= n for count in suit_counts.values())

    def contains_card(self, suit: Union[Suit, str], face: Union[Face, int]) -> bool:
        """Checks whether the hand holds the card with the given suit and face."""
        return Card(suit, face) in self._cards

    def get_sum(self) -> int:
        """Returns the sum of the face values, 1 for an Ace up to 13 for a King."""
        return sum(int(card.face) for card in self._cards)

    def get_suits(self, suit: Union[Suit, str]) -> str:
        """
        Lists the held cards of `suit`, sorted by face, as space-separated codes.

        Returns "No hearts" when the hand holds no card of that suit, whatever
        the suit asked for.
        """
        suit = Suit.from_code(suit)
        matching = sorted((card for card in self._cards if card.suit == suit), key=lambda card: card.face)
        if not matching:
            return NO_MATCH_TEXT
        return " ".join(card.code for card in matching)

    def __len__(self):
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __eq__(self, other):
        if not isinstance(other, Hand):
            return NotImplemented
        return self._cards == other._cards

    def __hash__(self):
        return hash(self._cards)

    def __str__(self):
        return ", ".join(str(card) for card in self._cards) if self._cards else "Empty Hand"

    def __repr__(self):
        return f"Hand({list(self._cards)})"
