"""Random numbers and shuffling."""

from __future__ import annotations

import random
from typing import MutableSequence, TypeVar

T = TypeVar("T")


class Randomizer:
    """A Mersenne Twister source, seeded from the system unless a seed is given."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def generate_int(self, low: int, high: int) -> int:
        """A uniform integer in ``[low, high]``."""
        if low > high:
            raise ValueError(f"empty range [{low}, {high}]")
        return self._rng.randint(low, high)

    def generate_float(self, low: float, high: float) -> float:
        """A uniform float in ``[low, high)``."""
        if low > high:
            raise ValueError(f"empty range [{low}, {high})")
        return low + self._rng.random() * (high - low)

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Shuffle ``items`` in place."""
        self._rng.shuffle(items)