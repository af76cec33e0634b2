# cardgame/core/utils/spaces.py

from numbers import Integral
from typing import Any, Optional, Tuple, Union

import numpy as np
from numpy.random import Generator


class Space:
    """
    Base class for defining action spaces.
    Mimics a simplified version of Gymnasium's spaces.
    """
    def __init__(self, shape: Union[Tuple[int, ...], int], dtype: Any):
        if isinstance(shape, int):
            self.shape = (shape,)
        else:
            self.shape = shape
        self.dtype = dtype

    def sample(self, rng: Optional[Generator] = None) -> Any:
        """Generates a random sample from the space."""
        raise NotImplementedError

    def contains(self, x: Any) -> bool:
        """Checks if a value is contained within the space."""
        raise NotImplementedError

    def __contains__(self, x: Any) -> bool:
        return self.contains(x)


class DiscreteSpace(Space):
    """
    A discrete space, representing a finite set of non-negative integers.
    The valid actions are {0, 1, ..., n-1}.
    """
    def __init__(self, n: int):
        if n <= 0:
            raise ValueError(f"DiscreteSpace needs at least one element, got n={n}.")
        super().__init__(shape=(), dtype=int)
        self.n = n

    def sample(self, rng: Optional[Generator] = None) -> int:
        """Returns a random integer from 0 to n-1."""
        rng = rng if rng is not None else np.random.default_rng()
        return int(rng.integers(0, self.n))

    def contains(self, x: Any) -> bool:
        """Checks if x is an integer within the range [0, n-1]."""
        return isinstance(x, Integral) and not isinstance(x, bool) and 0 <= x < self.n

    def __repr__(self) -> str:
        return f"DiscreteSpace({self.n})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiscreteSpace):
            return NotImplemented
        return self.n == other.n
