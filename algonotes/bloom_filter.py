"""Bloom filter over a fixed number of bits and a set of hash functions."""

from collections.abc import Callable, Hashable
from typing import Any

HashFunction = Callable[[Any], int]


class BloomFilter:
    """Probabilistic set membership with no false negatives.

    With m bits, k hash functions and n elements the false-positive rate is
    about (1 - (1 - 1/m)**(k*n))**k. Each hash function maps a value to an
    integer that is reduced modulo ``size``.
    """

    def __init__(self, size: int, *args: HashFunction) -> None:
        if size <= 0:
            raise ValueError("bloom filter size must be positive")
        if not args:
            raise ValueError("bloom filter needs at least one hash function")
        self._size = size
        self._hashes = args
        self._bits = bytearray(size)
        self._count = 0

    def _indexes(self, value: Hashable):
        return (h(value) % self._size for h in self._hashes)

    def add(self, value) -> None:
        """Record ``value`` in the filter."""
        for idx in self._indexes(value):
            self._bits[idx] = 1
        self._count += 1

    def test(self, value) -> bool:
        """Return False if ``value`` was surely never added, else True."""
        return all(self._bits[idx] for idx in self._indexes(value))

    def __contains__(self, value) -> bool:
        return self.test(value)

    def count(self) -> int:
        """Return how many values have been added."""
        return self._count

    def clear(self) -> None:
        """Forget every value."""
        self._bits = bytearray(self._size)
        self._count = 0