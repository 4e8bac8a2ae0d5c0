"""Fibonacci hashing of integers into a power-of-two number of buckets."""

GOLDEN_RATIO = 1.6180339
TWO64_DIV_PHI = 11400714819323198485

_MASK64 = 0xFFFFFFFFFFFFFFFF


def is_power_of_two(b: int) -> bool:
    """Return True when ``b`` has at most one set bit (zero counts as one)."""
    return (b & (b - 1)) == 0


def number_of_bits(b: int) -> int:
    """Return how many bits index ``b`` buckets, i.e. the popcount of b - 1."""
    u = (b - 1) & _MASK64
    count = 0
    while u:
        count += 1
        u &= u - 1
    return count


def _shift_for(buckets: int) -> int:
    if buckets < 2 or not is_power_of_two(buckets):
        raise ValueError("Number of buckets must be power of two")
    return 64 - number_of_bits(buckets)


def fibonacci_hash(v: int, buckets: int) -> int:
    """Map a 64-bit value to a bucket with multiplicative Fibonacci hashing."""
    shift = _shift_for(buckets)
    return ((v & _MASK64) * TWO64_DIV_PHI & _MASK64) >> shift


def fibonacci_hash_opt(v: int, buckets: int) -> int:
    """Fibonacci hashing that first folds the high bits into the low ones."""
    shift = _shift_for(buckets)
    v &= _MASK64
    v ^= v >> shift
    return (v * TWO64_DIV_PHI & _MASK64) >> shift