"""Fowler-Noll-Vo hashes computed over little-endian machine words.

Input is consumed a whole word (8 bytes for the 64-bit variants, 4 for the
32-bit ones) at a time; a trailing partial word is zero-padded.
"""

FNV_BASIS64 = 0xCBF29CE484222325
FNV_BASIS32 = 0x811C9DC5
FNV_PRIME64 = 0x100000001B3
FNV_PRIME32 = 0x1000193

_MASK64 = 0xFFFFFFFFFFFFFFFF
_MASK32 = 0xFFFFFFFF


def _words(data, size: int):
    raw = bytes(memoryview(data))
    for start in range(0, len(raw), size):
        yield int.from_bytes(raw[start:start + size], "little")


def _fnv1(data, size: int, basis: int, prime: int, mask: int) -> int:
    h = basis
    for word in _words(data, size):
        h = (h * prime) & mask
        h ^= word
    return h


def _fnv1a(data, size: int, basis: int, prime: int, mask: int) -> int:
    h = basis
    for word in _words(data, size):
        h ^= word
        h = (h * prime) & mask
    return h


def fnv1_64(data) -> int:
    """64-bit FNV-1 (multiply, then xor) over 8-byte words."""
    return _fnv1(data, 8, FNV_BASIS64, FNV_PRIME64, _MASK64)


def fnv1_32(data) -> int:
    """32-bit FNV-1 (multiply, then xor) over 4-byte words."""
    return _fnv1(data, 4, FNV_BASIS32, FNV_PRIME32, _MASK32)


def fnv1a_64(data) -> int:
    """64-bit FNV-1a (xor, then multiply) over 8-byte words."""
    return _fnv1a(data, 8, FNV_BASIS64, FNV_PRIME64, _MASK64)


def fnv1a_32(data) -> int:
    """32-bit FNV-1a (xor, then multiply) over 4-byte words."""
    return _fnv1a(data, 4, FNV_BASIS32, FNV_PRIME32, _MASK32)