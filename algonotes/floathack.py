"""Approximate single-precision float operations done on the bit pattern.

These tricks do not handle NaN propagation and give meaningless results for
inputs outside their domain (for example negative values to the roots).
"""

import struct

ONE_AS_INT = 0x3F800000
SCALE_UP = float(0x00800000)
SCALE_DOWN = 1.0 / SCALE_UP

_MASK32 = 0xFFFFFFFF
_SIGN = 0x80000000


def _f32(x: float) -> float:
    """Round a Python float to single precision."""
    return struct.unpack("<f", struct.pack("<f", x))[0]


def as_int(f: float) -> int:
    """Return the 32-bit pattern of ``f`` as a single-precision float."""
    return struct.unpack("<I", struct.pack("<f", f))[0]


def as_float(i: int) -> float:
    """Read the low 32 bits of ``i`` as a single-precision float."""
    return struct.unpack("<f", struct.pack("<I", i & _MASK32))[0]


def negate_float(f: float) -> float:
    """Flip the sign bit."""
    return as_float(as_int(f) ^ _SIGN)


def abs_float(f: float) -> float:
    """Clear the sign bit."""
    return as_float(as_int(f) & ~_SIGN)


def flog2(x: float) -> float:
    """Approximate log2 of a positive float from its exponent and mantissa."""
    return _f32(_f32(float(as_int(x) - ONE_AS_INT)) * SCALE_DOWN)


def fexp2(x: float) -> float:
    """Approximate 2**x by building the bit pattern directly."""
    return as_float(int(_f32(x * SCALE_UP)) + ONE_AS_INT)


def fpow(x: float, p: float) -> float:
    """Approximate x**p as 2**(p * log2(x))."""
    scaled = _f32(p * _f32(float(as_int(x) - ONE_AS_INT)))
    return as_float(int(scaled) + ONE_AS_INT)


def fsqrt(x: float) -> float:
    """Approximate the square root by halving the exponent."""
    return as_float((as_int(x) >> 1) + (ONE_AS_INT >> 1))


def _rsqrt_newton(f: float, magic: int) -> float:
    xhalf = _f32(f * 0.5)
    y = as_float(magic - (as_int(f) >> 1))
    t = _f32(_f32(xhalf * y) * y)
    return _f32(y * _f32(1.5 - t))


def frsqrt(f: float) -> float:
    """Inverse square root with the classic magic constant and one Newton step."""
    return _rsqrt_newton(f, 0x5F3759DF)


def frsqrt2(f: float) -> float:
    """Inverse square root with a more accurate magic constant."""
    return _rsqrt_newton(f, 0x5F375A86)


def frsqrt3(f: float) -> float:
    """Inverse square root with a tuned constant and tuned Newton coefficients."""
    f2 = as_float(0x5F1FFFF9 - (as_int(f) >> 1))
    inner = _f32(_f32(2.38924456) - _f32(_f32(f * f2) * f2))
    return _f32(_f32(_f32(0.703952253) * f2) * inner)