"""Fixed-width unsigned integers whose arithmetic wraps around."""

from __future__ import annotations

import operator
from typing import Callable, ClassVar


def wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to an unsigned integer of width ``bits``."""
    if bits <= 0:
        raise ValueError(f"bit width must be positive, got {bits}")
    return value & ((1 << bits) - 1)


def _check_shift(shift: int) -> int:
    shift = operator.index(shift)
    if shift < 0:
        raise ValueError(f"shift amount must not be negative, got {shift}")
    return shift


def wrapping_shl(value: int, shift: int, bits: int) -> int:
    """Shift left, taking the shift amount modulo the bit width."""
    shift = _check_shift(shift)
    return wrap(wrap(value, bits) << (shift % bits), bits)


def wrapping_shr(value: int, shift: int, bits: int) -> int:
    """Shift right, taking the shift amount modulo the bit width."""
    shift = _check_shift(shift)
    return wrap(value, bits) >> (shift % bits)


def _binop(fn: Callable[[int, int], int]):
    def method(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return type(self)(fn(self.value, rhs))

    return method


class WrappingInt:
    """An unsigned integer of width ``BITS`` with wrapping operators."""

    BITS: ClassVar[int] = 0
    __slots__ = ("value",)

    def __init__(self, value):
        if self.BITS <= 0:
            raise TypeError(f"{type(self).__name__} has no bit width")
        self.value = wrap(operator.index(value), self.BITS)

    def _coerce(self, other):
        if isinstance(other, WrappingInt):
            return other.value if other.BITS == self.BITS else None
        if isinstance(other, int) and not isinstance(other, bool):
            return wrap(other, self.BITS)
        return None

    __mod__ = _binop(operator.mod)
    __or__ = _binop(operator.or_)
    __and__ = _binop(operator.and_)
    __xor__ = _binop(operator.xor)
    __add__ = _binop(operator.add)
    __sub__ = _binop(operator.sub)
    __mul__ = _binop(operator.mul)
    __floordiv__ = _binop(operator.floordiv)

    __ror__ = __or__
    __rand__ = __and__
    __rxor__ = __xor__
    __radd__ = __add__
    __rmul__ = __mul__

    def __lshift__(self, shift):
        return type(self)(wrapping_shl(self.value, shift, self.BITS))

    def __rshift__(self, shift):
        return type(self)(wrapping_shr(self.value, shift, self.BITS))

    def __invert__(self):
        return type(self)(~self.value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def __eq__(self, other) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if isinstance(other, int) and not isinstance(other, WrappingInt):
            return self.value == other
        return self.value == rhs

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"


class U8(WrappingInt):
    """An 8-bit wrapping unsigned integer."""

    BITS: ClassVar[int] = 8
    __slots__ = ()


class U64(WrappingInt):
    """A 64-bit wrapping unsigned integer."""

    BITS: ClassVar[int] = 64
    __slots__ = ()