"""Small bit tricks on 64-bit unsigned integers."""

_MASK64 = (1 << 64) - 1


def more_than_one(x: int) -> bool:
    """Return True if more than one bit of the 64-bit value ``x`` is set."""
    x &= _MASK64
    return (x & ((x - 1) & _MASK64)) != 0


def lsb(x: int) -> int:
    """Isolate the least significant set bit of the 64-bit value ``x``."""
    x &= _MASK64
    return x & (-x & _MASK64)