"""Jenkins one-at-a-time hash."""

_MASK32 = 0xFFFFFFFF


def jenkins(data, seed: int = 0) -> int:
    """Return the 32-bit one-at-a-time hash of a bytes-like object."""
    h = seed & _MASK32
    for byte in bytes(memoryview(data)):
        h = (h + byte) & _MASK32
        h = (h + (h << 10)) & _MASK32
        h ^= h >> 6
    h = (h + (h << 3)) & _MASK32
    h ^= h >> 11
    h = (h + (h << 15)) & _MASK32
    return h