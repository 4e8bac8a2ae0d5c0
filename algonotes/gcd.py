"""Greatest common divisor: Euclid's and the binary (Stein) algorithms."""


def _cmod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend, as in truncating division."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def _ctz(x: int) -> int:
    """Number of trailing zero bits of a non-zero integer."""
    return (x & -x).bit_length() - 1


def _require_non_negative(a: int, b: int) -> None:
    if a < 0 or b < 0:
        raise ValueError("binary gcd needs non-negative integers")


def gcd1(a: int, b: int) -> int:
    """Recursive Euclid with truncating remainder."""
    return gcd1(b, _cmod(a, b)) if b else a


def gcd2(a: int, b: int) -> int:
    """Iterative Euclid with truncating remainder."""
    while b:
        a, b = b, _cmod(a, b)
    return a


def bgcd1(a: int, b: int) -> int:
    """Binary gcd that strips factors of two one at a time."""
    _require_non_negative(a, b)
    mul = 1
    while True:
        if a == 0:
            return b * mul
        if b == 0 or a == b:
            return a * mul
        while a % 2 == 0 and b % 2 == 0:
            a >>= 1
            b >>= 1
            mul <<= 1
        while a % 2 == 0 and b % 2 == 1:
            a >>= 1
        while a % 2 == 1 and b % 2 == 0:
            b >>= 1
        a, b = abs(a - b), min(a, b)


def bgcd2(a: int, b: int) -> int:
    """Binary gcd using trailing-zero counts."""
    _require_non_negative(a, b)
    if a == 0:
        return b
    if b == 0:
        return a
    az, bz = _ctz(a), _ctz(b)
    shift = min(az, bz)
    a >>= az
    b >>= bz
    while a != 0:
        diff = a - b
        b = min(a, b)
        a = abs(diff)
        if a:
            a >>= _ctz(a)
    return b << shift


def bgcd3(a: int, b: int) -> int:
    """Binary gcd that takes the trailing-zero count of the difference."""
    _require_non_negative(a, b)
    if a == 0:
        return b
    if b == 0:
        return a
    az, bz = _ctz(a), _ctz(b)
    shift = min(az, bz)
    b >>= bz
    while a != 0:
        a >>= az
        diff = b - a
        az = _ctz(diff) if diff else 0
        b = min(a, b)
        a = abs(diff)
    return b << shift