# cardgame/core/game_components/card.py

import re
from dataclasses import dataclass

from cardgame.core.game_components.face import Face
from cardgame.core.game_components.suit import Suit

_CODE_PATTERN = re.compile(r"^(\d{1,2})([SHDCshdc])$")


@dataclass(frozen=True)
class Card:
    """
    Represents a single playing card.

    Cards are immutable values: two cards with the same suit and face are
    equal and hash the same. The suit may be given as its one-letter code
    and the face as a plain int in [1, 13].

    Attributes:
        suit (Suit): The suit of the card.
        face (Face): The face of the card, 1 (Ace) to 13 (King).
    """
    suit: Suit
    face: Face

    def __post_init__(self):
        object.__setattr__(self, "suit", Suit.from_code(self.suit))
        object.__setattr__(self, "face", Face.from_value(self.face))

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """
        Parses a card code such as "1S" or "12H".

        Raises:
            ValueError: If the code is not a face number followed by a suit letter.
        """
        match = _CODE_PATTERN.match(code) if isinstance(code, str) else None
        if match is None:
            raise ValueError(f"Malformed card code {code!r}.")
        return cls(match.group(2), int(match.group(1)))

    @property
    def code(self) -> str:
        """The "<face><suit>" code, also used to name card images (e.g. "12H")."""
        return f"{int(self.face)}{self.suit.value}"

    def __str__(self):
        return f"{self.face.name.capitalize()} of {self.suit.name.capitalize()}"

    def __repr__(self):
        return f"Card({self.suit.name}, {self.face.name})"
