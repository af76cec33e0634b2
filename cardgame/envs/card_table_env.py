# cardgame/envs/card_table_env.py

import logging
import os
from dataclasses import dataclass
from numbers import Integral
from typing import Any, Dict, Optional, Tuple, Union

from numpy.random import Generator

from cardgame.core.game_components.card import Card
from cardgame.core.game_components.deck import CARDS_PER_DECK, Deck
from cardgame.core.game_components.hand import Hand
from cardgame.core.game_components.suit import Suit
from cardgame.core.utils import spaces
from cardgame.envs.base_env import BaseCardEnv


# Configure logging for the card table environment
logger = logging.getLogger(__name__)
logger.setLevel(logging.WARNING) # Set to INFO for general messages, DEBUG for detailed tracing


@dataclass(frozen=True)
class HandReport:
    """Results of checking a hand."""
    sum: int
    suits: str
    flush: bool
    has_watched_card: bool


@dataclass(frozen=True)
class TableView:
    """
    Everything a renderer needs to draw the table.

    Attributes:
        cards (Tuple[str, ...]): Codes of the dealt cards, e.g. ("1S", "12H").
        image_paths (Tuple[str, ...]): One image path per card, empty without an assets directory.
        check (Optional[HandReport]): The last check results, None until the first check.
        deals (int): Hands dealt since the last reset.
    """
    cards: Tuple[str, ...]
    image_paths: Tuple[str, ...]
    check: Optional[HandReport]
    deals: int


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


class CardTableEnv(BaseCardEnv):
    """
    A single-player card table with two events: deal a new hand, and check
    the current one. Each event produces a new immutable `TableView`.

    Action Space:
    0: Deal a new hand (the last check results stay on display)
    1: Check the current hand
    """

    ACTION_DEAL = 0
    ACTION_CHECK = 1

    def __init__(self, render_mode: Optional[str] = None, hand_size: int = 5, flush_size: int = 5,
                 watched_card: Union[Card, Tuple[Any, int]] = ("S", 12), listed_suit: Union[Suit, str] = "H",
                 assets_dir: Optional[str] = None, seed: Optional[int] = None):
        super().__init__(render_mode=render_mode, seed=seed)

        for name, value in (("hand_size", hand_size), ("flush_size", flush_size)):
            if isinstance(value, bool) or not isinstance(value, Integral) or not 0 <= value <= CARDS_PER_DECK:
                raise ValueError(f"{name} must be an integer between 0 and {CARDS_PER_DECK}, got {value!r}.")
        self.hand_size = int(hand_size)
        self.flush_size = int(flush_size)
        if isinstance(watched_card, Card):
            self.watched_card: Card = watched_card
        elif isinstance(watched_card, tuple) and len(watched_card) == 2:
            self.watched_card = Card(*watched_card)
        else:
            raise ValueError(f"watched_card must be a Card or a (suit, face) pair, got {watched_card!r}.")
        self.listed_suit: Suit = Suit.from_code(listed_suit)
        self.assets_dir = assets_dir

        self.action_space = spaces.DiscreteSpace(2)
        self.action_description = f"{self.ACTION_DEAL}: Deal, {self.ACTION_CHECK}: Check"

        # Pass the environment's RNG to the Deck
        self.deck: Deck = Deck(rng=self._np_random)
        self.hand: Hand = Hand()
        self._report: Optional[HandReport] = None
        self._deals: int = 0

        self.reset(seed=seed)

    def _reseed(self, rng: Generator) -> None:
        super()._reseed(rng)
        self.deck = Deck(rng=self._np_random)

    def _deal(self) -> None:
        self.hand = Hand(self.deck.deal_hand(self.hand_size))
        self._deals += 1
        logger.debug(f"Deal {self._deals}: {[card.code for card in self.hand]}")

    def _check(self) -> HandReport:
        report = HandReport(
            sum=self.hand.get_sum(),
            suits=self.hand.get_suits(self.listed_suit),
            flush=self.hand.check_flush(self.flush_size),
            has_watched_card=self.hand.contains_card(self.watched_card.suit, self.watched_card.face),
        )
        logger.debug(f"Checked hand {[card.code for card in self.hand]}: {report}")
        return report

    def _image_path(self, card: Card) -> str:
        return os.path.join(self.assets_dir, f"{card.code}.png")

    def _get_observation(self) -> TableView:
        codes = tuple(card.code for card in self.hand)
        images = tuple(self._image_path(card) for card in self.hand) if self.assets_dir is not None else ()
        return TableView(cards=codes, image_paths=images, check=self._report, deals=self._deals)

    def _info(self, action: str) -> Dict[str, Any]:
        return {"hand": self.hand, "action": action}

    def _reset_game_state(self) -> Tuple[TableView, Dict[str, Any]]:
        self._deals = 0
        self._report = None
        self._deal()
        return self._get_observation(), self._info("reset")

    def _step_game_logic(self, action: int) -> Tuple[TableView, Dict[str, Any]]:
        if action == self.ACTION_DEAL:
            self._deal()
            return self._get_observation(), self._info("deal")
        self._report = self._check()
        return self._get_observation(), self._info("check")

    def _render_ansi(self) -> str:
        """
        Returns a string representation of the table for ANSI output.
        """
        output = ["\n--- Card Table (ANSI) ---"]
        output.append(f"Hand: {' '.join(card.code for card in self.hand) or '(empty)'}")
        if self._report is not None:
            output.append(f"Sum: {self._report.sum}")
            output.append(f"{self.listed_suit.name.capitalize()}: {self._report.suits}")
            output.append(f"Flush: {_yes_no(self._report.flush)}")
            output.append(f"{self.watched_card}: {_yes_no(self._report.has_watched_card)}")
        output.append("----------------------")
        return "\n".join(output)
