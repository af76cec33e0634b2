# cardgame/core/game_components/face.py

from enum import IntEnum


class Face(IntEnum):
    """Card faces 1-13 by position. Values are used as-is when summing a hand."""
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @classmethod
    def from_value(cls, value: int) -> "Face":
        """Converts an int in [1, 13] to a Face."""
        if isinstance(value, cls):
            return value
        # bool is an int subclass, but True is not a face
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Face must be an integer between 1 and 13, got {value!r}.")
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Face must be an integer between 1 and 13, got {value!r}.") from None
