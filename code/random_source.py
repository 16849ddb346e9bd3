"""Injectable randomness used by the road growers."""

from __future__ import annotations

import random
from typing import List, Optional, Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Minimal randomness contract consumed by the generator."""

    def next_int(self, low: int, high: int) -> int:
        """Return a uniformly random integer in ``[low, high)``."""
        ...

    def shuffle(self, items: List[T]) -> None:
        """Shuffle ``items`` in place."""
        ...


class SeededRandomSource:
    """RandomSource backed by a private ``random.Random`` instance."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._random = random.Random(seed)

    def next_int(self, low: int, high: int) -> int:
        if high <= low:
            raise ValueError(f"Empty range [{low}, {high})")
        return self._random.randrange(low, high)

    def shuffle(self, items: List[T]) -> None:
        self._random.shuffle(items)
