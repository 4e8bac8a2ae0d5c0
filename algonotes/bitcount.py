"""Population count by parallel bit merging and by clearing low bits."""

_WIDTHS = (8, 32, 64)


def bitcount(k: int, bits: int = 32) -> int:
    """Count set bits of ``k`` taken as an unsigned integer of ``bits`` bits.

    ``bits`` is 8, 32 or 64; wider values are truncated to that width.
    """
    if bits not in _WIDTHS:
        raise ValueError(f"bit width must be one of {_WIDTHS}")
    full = (1 << bits) - 1
    k &= full
    m1 = 0x55555555_55555555 & full
    m2 = 0x33333333_33333333 & full
    m4 = 0x0F0F0F0F_0F0F0F0F & full
    k = (k - ((k >> 1) & m1)) & full
    k = (k & m2) + ((k >> 2) & m2)
    k = (k + (k >> 4)) & m4
    if bits == 8:
        return k
    ones = 0x01010101_01010101 & full
    return ((k * ones) & full) >> (bits - 8)


def iterative_count(k: int) -> int:
    """Count set bits of a non-negative integer by clearing the lowest one."""
    if k < 0:
        raise ValueError("iterative_count needs a non-negative integer")
    total = 0
    while k:
        k &= k - 1
        total += 1
    return total