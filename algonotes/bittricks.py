"""Branch-free tricks on fixed-width unsigned integers."""

_MASK32 = 0xFFFFFFFF


def _smear_right(x: int) -> int:
    """Set every bit below the highest set bit of a 32-bit value."""
    for shift in (1, 2, 4, 8, 16):
        x |= x >> shift
    return x


def flp2(x: int) -> int:
    """Return the greatest power of two not above ``x`` (32-bit, 0 for 0)."""
    x = _smear_right(x & _MASK32)
    return x - (x >> 1)


def clp2(x: int) -> int:
    """Return the least power of two not below ``x``.

    Works on 32-bit unsigned values, so 0 and values above 2**31 wrap to 0.
    """
    x = _smear_right((x - 1) & _MASK32)
    return (x + 1) & _MASK32


def nearest_power_2(v: int) -> int:
    """Round a 32-bit unsigned value up to the next power of two."""
    return clp2(v)


def bit_reverse(num: int, bits: int = 32, signed: bool = False) -> int:
    """Reverse the bit order of ``num`` taken as a ``bits``-wide integer.

    ``bits`` must be a power of two of at least 8. Negative inputs are read
    in two's complement; with ``signed`` the result is returned that way too.
    The work is done in O(log bits) swap steps.
    """
    if isinstance(num, bool) or not isinstance(num, int):
        raise TypeError("bit_reverse needs an integer")
    if bits < 8 or bits & (bits - 1):
        raise ValueError("bit width must be a power of two of at least 8")
    full = (1 << bits) - 1
    num &= full
    mask = full
    step = bits >> 1
    while step > 0:
        mask ^= (mask << step) & full
        num = ((num >> step) & mask) | ((num << step) & ~mask & full)
        step >>= 1
    if signed and num >> (bits - 1):
        num -= 1 << bits
    return num