"""Directions on the board as seen by each player."""

from __future__ import annotations

import enum

from seaboard.bb import Bitboard
from seaboard.wrapping import wrap

# Square steps for White; Black mirrors every one of them.
_STEPS = {
    "down": -8,
    "up": 8,
    "left": -1,
    "right": 1,
    "down_left": -9,
    "down_right": -7,
    "up_left": 7,
    "up_right": 9,
}


def _shift(bb: Bitboard, guard: Bitboard | None, amount: int) -> Bitboard:
    if guard is not None:
        bb = bb & ~guard
    return bb << amount if amount >= 0 else bb >> -amount


class Side(enum.Enum):
    """A player, giving square steps and bitboard shifts relative to it."""

    WHITE = 0
    BLACK = 1

    @property
    def opponent(self) -> Side:
        """The opposing player."""
        return Side.BLACK if self is Side.WHITE else Side.WHITE

    def _step(self, sq: int, name: str) -> int:
        delta = _STEPS[name]
        if self is Side.BLACK:
            delta = -delta
        return wrap(sq + delta, 8)

    def down(self, sq: int) -> int:
        """The square one rank down from this player's view."""
        return self._step(sq, "down")

    def up(self, sq: int) -> int:
        """The square one rank up from this player's view."""
        return self._step(sq, "up")

    def left(self, sq: int) -> int:
        """The square one file left from this player's view."""
        return self._step(sq, "left")

    def right(self, sq: int) -> int:
        """The square one file right from this player's view."""
        return self._step(sq, "right")

    def down_left(self, sq: int) -> int:
        """The square diagonally down-left from this player's view."""
        return self._step(sq, "down_left")

    def down_right(self, sq: int) -> int:
        """The square diagonally down-right from this player's view."""
        return self._step(sq, "down_right")

    def up_left(self, sq: int) -> int:
        """The square diagonally up-left from this player's view."""
        return self._step(sq, "up_left")

    def up_right(self, sq: int) -> int:
        """The square diagonally up-right from this player's view."""
        return self._step(sq, "up_right")

    def _shift(self, bb: Bitboard, name: str) -> Bitboard:
        guard, amount = _SHIFTS[self][name]
        return _shift(bb, guard, amount)

    def shift_down(self, bb: Bitboard) -> Bitboard:
        """Shift every square one rank down."""
        return self._shift(bb, "down")

    def shift_up(self, bb: Bitboard) -> Bitboard:
        """Shift every square one rank up."""
        return self._shift(bb, "up")

    def shift_left(self, bb: Bitboard) -> Bitboard:
        """Shift every square one file left, dropping the edge file."""
        return self._shift(bb, "left")

    def shift_right(self, bb: Bitboard) -> Bitboard:
        """Shift every square one file right, dropping the edge file."""
        return self._shift(bb, "right")

    def shift_down_left(self, bb: Bitboard) -> Bitboard:
        """Shift every square diagonally down-left."""
        return self._shift(bb, "down_left")

    def shift_down_right(self, bb: Bitboard) -> Bitboard:
        """Shift by the down-right entry of this player's shift table."""
        return self._shift(bb, "down_right")

    def shift_up_left(self, bb: Bitboard) -> Bitboard:
        """Shift every square diagonally up-left."""
        return self._shift(bb, "up_left")

    def shift_up_right(self, bb: Bitboard) -> Bitboard:
        """Shift every square diagonally up-right."""
        return self._shift(bb, "up_right")


# (file cleared before shifting, shift amount: positive left, negative right)
_SHIFTS = {
    Side.WHITE: {
        "down": (None, -8),
        "up": (None, 8),
        "left": (Bitboard.FILE_A, -1),
        "right": (Bitboard.FILE_H, 1),
        "down_left": (Bitboard.FILE_A, -9),
        "down_right": (Bitboard.FILE_H, 7),
        "up_left": (Bitboard.FILE_A, 7),
        "up_right": (Bitboard.FILE_H, 9),
    },
    Side.BLACK: {
        "down": (None, 8),
        "up": (None, -8),
        "left": (Bitboard.FILE_H, 1),
        "right": (Bitboard.FILE_A, -1),
        "down_left": (Bitboard.FILE_H, 9),
        "down_right": (Bitboard.FILE_A, -7),
        "up_left": (Bitboard.FILE_H, -7),
        "up_right": (Bitboard.FILE_A, -9),
    },
}