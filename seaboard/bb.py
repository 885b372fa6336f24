"""64-square bitboards and the board masks built on them."""

from __future__ import annotations

from typing import ClassVar, Iterator

from seaboard.bit_twiddles import lsb as _lsb
from seaboard.bit_twiddles import more_than_one as _more_than_one
from seaboard.wrapping import U64

PLAYER_CNT = 2
FILE_CNT = 8
RANK_CNT = 8
CASTLING_SIDES = 2

ALL = 0xFFFF_FFFF_FFFF_FFFF

FILE_A = 0x0101_0101_0101_0101
FILE_B = FILE_A << 1
FILE_C = FILE_A << 2
FILE_D = FILE_A << 3
FILE_E = FILE_A << 4
FILE_F = FILE_A << 5
FILE_G = FILE_A << 6
FILE_H = FILE_A << 7

RANK_1 = 0x0000_0000_0000_00FF
RANK_2 = 0x0000_0000_0000_FF00
RANK_3 = 0x0000_0000_00FF_0000
RANK_4 = 0x0000_0000_FF00_0000
RANK_5 = 0x0000_00FF_0000_0000
RANK_6 = 0x0000_FF00_0000_0000
RANK_7 = 0x00FF_0000_0000_0000
RANK_8 = 0xFF00_0000_0000_0000

FILE_BB = (FILE_A, FILE_B, FILE_C, FILE_D, FILE_E, FILE_F, FILE_G, FILE_H)
RANK_BB = (RANK_1, RANK_2, RANK_3, RANK_4, RANK_5, RANK_6, RANK_7, RANK_8)

_B1, _C1, _D1, _F1, _G1 = 1, 2, 3, 5, 6
_B8, _C8, _D8, _F8, _G8 = 57, 58, 59, 61, 62

CASTLING_PATH_WHITE_K_SIDE = (1 << _F1) | (1 << _G1)
CASTLING_PATH_WHITE_Q_SIDE = (1 << _B1) | (1 << _C1) | (1 << _D1)
CASTLING_PATH_BLACK_K_SIDE = (1 << _F8) | (1 << _G8)
CASTLING_PATH_BLACK_Q_SIDE = (1 << _B8) | (1 << _C8) | (1 << _D8)

CASTLING_PATH = (
    (CASTLING_PATH_WHITE_K_SIDE, CASTLING_PATH_WHITE_Q_SIDE),
    (CASTLING_PATH_BLACK_K_SIDE, CASTLING_PATH_BLACK_Q_SIDE),
)

ROOK_BLACK_KSIDE_START = 63
ROOK_BLACK_QSIDE_START = 56
ROOK_WHITE_KSIDE_START = 7
ROOK_WHITE_QSIDE_START = 0

CASTLING_ROOK_START = (
    (ROOK_WHITE_KSIDE_START, ROOK_WHITE_QSIDE_START),
    (ROOK_BLACK_KSIDE_START, ROOK_BLACK_QSIDE_START),
)


class Bitboard(U64):
    """A set of board squares, one bit per square (a1 = 0, h8 = 63)."""

    __slots__ = ()

    ALL: ClassVar[Bitboard]
    FILE_A: ClassVar[Bitboard]
    FILE_B: ClassVar[Bitboard]
    FILE_C: ClassVar[Bitboard]
    FILE_D: ClassVar[Bitboard]
    FILE_E: ClassVar[Bitboard]
    FILE_F: ClassVar[Bitboard]
    FILE_G: ClassVar[Bitboard]
    FILE_H: ClassVar[Bitboard]
    RANK_1: ClassVar[Bitboard]
    RANK_2: ClassVar[Bitboard]
    RANK_3: ClassVar[Bitboard]
    RANK_4: ClassVar[Bitboard]
    RANK_5: ClassVar[Bitboard]
    RANK_6: ClassVar[Bitboard]
    RANK_7: ClassVar[Bitboard]
    RANK_8: ClassVar[Bitboard]

    @classmethod
    def empty(cls) -> Bitboard:
        """The bitboard with no squares set."""
        return cls(0)

    @classmethod
    def from_square(cls, sq: int) -> Bitboard:
        """A bitboard holding only square ``sq``."""
        if not 0 <= sq < 64:
            raise ValueError(f"square index out of range: {sq}")
        return cls(1 << sq)

    def popcnt(self) -> int:
        """Number of squares set."""
        return bin(self.value).count("1")

    def bsf(self) -> int:
        """Index of the lowest set square, or 64 when empty."""
        if self.value == 0:
            return 64
        return (self.value & -self.value).bit_length() - 1

    def lsb(self) -> Bitboard:
        """A bitboard holding only the lowest set square (empty if none)."""
        return Bitboard(_lsb(self.value))

    def more_than_one(self) -> bool:
        """True if more than one square is set."""
        return _more_than_one(self.value)

    def to_square(self) -> int:
        """The single square set in this bitboard."""
        if self.popcnt() != 1:
            raise ValueError(f"expected exactly one square set, got {self.popcnt()}")
        return self.bsf()

    def pop_lsb(self) -> tuple[int, Bitboard, Bitboard]:
        """Split off the lowest square: ``(square, its bitboard, the rest)``."""
        if self.value == 0:
            raise ValueError("pop from an empty bitboard")
        sq = self.bsf()
        return sq, Bitboard(1 << sq), self & (self - 1)

    def render(self) -> str:
        """A framed 8x8 drawing of the board, rank 8 at the top."""
        lines = ["", "   ┌────────────────────────┐"]
        for rank in range(7, -1, -1):
            cells = "".join(
                " 1 " if self.value >> (rank * 8 + file) & 1 else " . "
                for file in range(8)
            )
            lines.append(f" {rank + 1} │{cells}│")
        lines.append("   └────────────────────────┘")
        lines.append("     a  b  c  d  e  f  g  h ")
        return "\n".join(lines) + "\n"

    def __iter__(self) -> Iterator[int]:
        value = self.value
        while value:
            low = value & -value
            yield low.bit_length() - 1
            value ^= low

    def __len__(self) -> int:
        return self.popcnt()

    def __contains__(self, sq: int) -> bool:
        return 0 <= sq < 64 and bool(self.value >> sq & 1)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Bitboard(0x{self.value:016x})"


Bitboard.ALL = Bitboard(ALL)
Bitboard.FILE_A = Bitboard(FILE_A)
Bitboard.FILE_B = Bitboard(FILE_B)
Bitboard.FILE_C = Bitboard(FILE_C)
Bitboard.FILE_D = Bitboard(FILE_D)
Bitboard.FILE_E = Bitboard(FILE_E)
Bitboard.FILE_F = Bitboard(FILE_F)
Bitboard.FILE_G = Bitboard(FILE_G)
Bitboard.FILE_H = Bitboard(FILE_H)
Bitboard.RANK_1 = Bitboard(RANK_1)
Bitboard.RANK_2 = Bitboard(RANK_2)
Bitboard.RANK_3 = Bitboard(RANK_3)
Bitboard.RANK_4 = Bitboard(RANK_4)
Bitboard.RANK_5 = Bitboard(RANK_5)
Bitboard.RANK_6 = Bitboard(RANK_6)
Bitboard.RANK_7 = Bitboard(RANK_7)
Bitboard.RANK_8 = Bitboard(RANK_8)