"""
wangfill - Weighted Random Picker

Small reservoir of items with relative probabilities. Supports picking
without removal (pick) and drawing with removal (take).
"""

import random
from bisect import bisect_right
from itertools import accumulate
from typing import Generic, TypeVar

T = TypeVar("T")


class RandomPicker(Generic[T]):
    """
    Weighted random selection over a finite set of items.

    Each draw consumes exactly one rng.random() value, so a seeded generator
    reproduces the same sequence of picks. Items with a non-positive
    probability are never added.
    """

    def __init__(self, rng=None):
        # Falls back to the shared module generator so random.seed() applies
        self.rng = rng if rng is not None else random
        self._items: list[T] = []
        self._weights: list[float] = []
        self._thresholds: list[float] = []

    def add(self, item: T, probability: float = 1.0) -> None:
        if probability <= 0:
            return
        total = self._thresholds[-1] if self._thresholds else 0.0
        self._items.append(item)
        self._weights.append(probability)
        self._thresholds.append(total + probability)

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()
        self._weights.clear()
        self._thresholds.clear()

    @property
    def total_weight(self) -> float:
        return self._thresholds[-1] if self._thresholds else 0.0

    def _draw_index(self) -> int:
        if not self._items:
            raise IndexError("Cannot pick from an empty RandomPicker")
        value = self.rng.random() * self.total_weight
        index = bisect_right(self._thresholds, value)
        # Float rounding can land exactly on the total
        return min(index, len(self._items) - 1)

    def pick(self) -> T:
        """Return a weighted random item, leaving it in the picker."""
        return self._items[self._draw_index()]

    def take(self) -> T:
        """Return a weighted random item and remove it from the picker."""
        index = self._draw_index()
        item = self._items.pop(index)
        self._weights.pop(index)
        self._thresholds = list(accumulate(self._weights))
        return item

    def __len__(self) -> int:
        return len(self._items)
