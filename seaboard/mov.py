"""Chess moves as produced by move generation."""

from __future__ import annotations

import dataclasses
import enum

_FILES = "abcdefgh"


def square_name(sq: int) -> str:
    """The algebraic name of a square index, e.g. 12 -> 'e2'."""
    if not 0 <= sq < 64:
        raise ValueError(f"square index out of range: {sq}")
    return f"{_FILES[sq % 8]}{sq // 8 + 1}"


class MoveType(enum.Flag):
    """Flags describing what kind of move a move is."""

    PROMOTION = 0b00000001
    EN_PASSANT = 0b00000010
    CASTLE = 0b00000100
    CAPTURE = 0b00001000
    QUIET = 0b00010000
    NULL = 0b00100000


class PromoPiece(enum.Enum):
    """Pieces a pawn may promote to, valued by their UCI letter."""

    KNIGHT = "n"
    BISHOP = "b"
    ROOK = "r"
    QUEEN = "q"


@dataclasses.dataclass(frozen=True)
class Move:
    """A move from ``orig`` to ``dest`` with its kind and promotion piece."""

    orig: int
    dest: int
    promo: PromoPiece | None = None
    move_type: MoveType = MoveType.QUIET

    def __post_init__(self) -> None:
        has_flag = bool(self.move_type & MoveType.PROMOTION)
        if has_flag != (self.promo is not None):
            raise ValueError(
                "a promotion piece must be given exactly when the move is a promotion"
            )

    @classmethod
    def null(cls) -> Move:
        """The null move, used as a placeholder."""
        return cls(64, 64, None, MoveType.NULL)

    def is_null(self) -> bool:
        return MoveType.NULL in self.move_type

    def is_capture(self) -> bool:
        return MoveType.CAPTURE in self.move_type

    def is_en_passant(self) -> bool:
        return MoveType.EN_PASSANT in self.move_type

    def is_castle(self) -> bool:
        return MoveType.CASTLE in self.move_type

    def is_quiet(self) -> bool:
        return MoveType.QUIET in self.move_type

    def is_quiet_or_castle(self) -> bool:
        return bool(self.move_type & (MoveType.QUIET | MoveType.CASTLE))

    def is_promo(self) -> bool:
        return MoveType.PROMOTION in self.move_type

    def with_promo(self, promo: PromoPiece) -> Move:
        """A copy of this promotion move promoting to ``promo`` instead."""
        if not self.is_promo():
            raise ValueError("only a promotion move can change its promotion piece")
        return dataclasses.replace(self, promo=PromoPiece(promo))

    def to_uci(self) -> str:
        """The move in UCI notation, e.g. 'e2e4'; 'Null' for the null move."""
        if self.is_null():
            return "Null"
        text = square_name(self.orig) + square_name(self.dest)
        if self.promo is not None:
            text += self.promo.value
        return text

    def __str__(self) -> str:
        return self.to_uci()