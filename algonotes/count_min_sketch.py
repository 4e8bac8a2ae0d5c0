"""Count-min sketch: approximate frequency counts in fixed memory."""

from collections.abc import Callable
from typing import Any

HashFunction = Callable[[Any], int]


class CountMinSketch:
    """One row of ``width`` counters per hash function.

    Estimates never fall below the true count; collisions can only raise them.
    """

    def __init__(self, width: int, *args: HashFunction) -> None:
        if width <= 0:
            raise ValueError("sketch width must be positive")
        if not args:
            raise ValueError("count-min sketch needs at least one hash function")
        self._width = width
        self._hashes = args
        self._rows = [[0] * width for _ in args]

    def count(self, value) -> None:
        """Record one occurrence of ``value``."""
        for row, h in zip(self._rows, self._hashes):
            row[h(value) % self._width] += 1

    def min_estimate(self, value) -> int:
        """Return the smallest counter ``value`` maps to."""
        return min(
            row[h(value) % self._width] for row, h in zip(self._rows, self._hashes)
        )

    def clear(self) -> None:
        """Reset every counter to zero."""
        self._rows = [[0] * self._width for _ in self._hashes]