from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class Rand(Protocol):
    """Randomness capability consumed by the opening, swap and scoring code."""

    def next_float(self) -> float:
        """Return a float in ``[0, 1)``."""
        ...

    def next_int_in_range(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high)``."""
        ...


class NumpyRand:
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    @classmethod
    def from_seed(cls, seed: Optional[int]) -> "NumpyRand":
        return cls(np.random.default_rng(seed))

    def next_float(self) -> float:
        return float(self.rng.random())

    def next_int_in_range(self, low: int, high: int) -> int:
        if high <= low:
            raise ValueError(f"Empty range [{low}, {high}).")
        return int(self.rng.integers(low, high))
