"""MurmurHash3, 32-bit variant, over little-endian words."""

_MASK32 = 0xFFFFFFFF
_C1 = 0xCC9E2D51
_C2 = 0x1B873593


def _rotl(x: int, r: int) -> int:
    return ((x << r) | (x >> (32 - r))) & _MASK32


def _scramble(k: int) -> int:
    k = (k * _C1) & _MASK32
    k = _rotl(k, 15)
    return (k * _C2) & _MASK32


def murmur3(data, seed: int = 0) -> int:
    """Return the 32-bit MurmurHash3 of a bytes-like object."""
    raw = bytes(memoryview(data))
    length = len(raw)
    h = seed & _MASK32
    body = length & ~3
    for start in range(0, body, 4):
        h ^= _scramble(int.from_bytes(raw[start:start + 4], "little"))
        h = _rotl(h, 13)
        h = (h * 5 + 0xE6546B64) & _MASK32
    tail = raw[body:]
    if tail:
        h ^= _scramble(int.from_bytes(tail, "little"))
    h ^= length & _MASK32
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & _MASK32
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & _MASK32
    h ^= h >> 16
    return h