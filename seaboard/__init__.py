"""Chess board primitives: bitboards, wrapping integers, moves, side-relative directions and move lists."""

__version__ = "0.1.0"
__all__ = ["bit_twiddles", "wrapping", "bb", "sides", "mov", "movelist"]