# cardgame/core/game_components/suit.py

from enum import Enum


class Suit(Enum):
    """The four suits, in canonical deck order. The value is the one-letter code."""
    SPADES = "S"
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"

    @classmethod
    def from_code(cls, code: str) -> "Suit":
        """Looks up a suit by its one-letter code (case-insensitive)."""
        if isinstance(code, cls):
            return code
        if not isinstance(code, str):
            raise ValueError(f"Suit code must be a string, got {code!r}.")
        try:
            return cls(code.upper())
        except ValueError:
            raise ValueError(f"Unknown suit code {code!r}, expected one of S, H, D, C.") from None

    @property
    def code(self) -> str:
        return self.value
