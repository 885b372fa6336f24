"""Containers for the moves produced by move generation."""

from __future__ import annotations

import abc
import random as _random
from typing import Iterable, Iterator

from seaboard.mov import Move

MAX_MOVES = 254
"""Default capacity of a bounded move list."""

MAX_MOVES_FAST = 54
"""Number of moves a ``FastMoveList`` keeps before spilling into overflow storage."""


class MoveList(abc.ABC):
    """A sized, iterable collection of moves that can be appended to and cleared."""

    @abc.abstractmethod
    def push(self, mv: Move) -> None:
        """Append a move."""

    @abc.abstractmethod
    def clear(self) -> None:
        """Remove every move."""

    @abc.abstractmethod
    def __len__(self) -> int: ...

    @abc.abstractmethod
    def __iter__(self) -> Iterator[Move]: ...

    def extend(self, moves: Iterable[Move]) -> None:
        """Push each of ``moves`` in turn."""
        for mv in moves:
            self.push(mv)

    def __bool__(self) -> bool:
        return len(self) > 0


class BoundedMoveList(MoveList):
    """A move list with a fixed capacity; pushes beyond it are silently dropped."""

    def __init__(self, capacity: int = MAX_MOVES):
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._moves: list[Move] = []

    def push(self, mv: Move) -> None:
        """Append ``mv`` if there is room left."""
        if len(self._moves) < self.capacity:
            self._moves.append(mv)

    def clear(self) -> None:
        self._moves.clear()

    def random(self) -> Move | None:
        """A randomly chosen move, or None when the list is empty."""
        if not self._moves:
            return None
        return _random.choice(self._moves)

    def to_list(self) -> list[Move]:
        """A plain list holding the moves in order."""
        return list(self._moves)

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)

    def __getitem__(self, index: int) -> Move:
        if not 0 <= index < len(self._moves):
            raise IndexError(
                f"index out of bounds; the len is {len(self._moves)} but the index is {index}"
            )
        return self._moves[index]

    def __setitem__(self, index: int, mv: Move) -> None:
        if not 0 <= index < len(self._moves):
            raise IndexError(
                f"index out of bounds; the len is {len(self._moves)} but the index is {index}"
            )
        self._moves[index] = mv

    def __str__(self) -> str:
        return "[" + "".join(f"{mv}, " for mv in self._moves) + "]\n"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._moves!r})"


class BasicMoveList(BoundedMoveList):
    """The standard bounded move list, holding up to ``MAX_MOVES`` moves."""


class OverflowingMoveList(MoveList):
    """An unbounded move list."""

    def __init__(self) -> None:
        self._moves: list[Move] = []

    def push(self, mv: Move) -> None:
        self._moves.append(mv)

    def clear(self) -> None:
        self._moves.clear()

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)

    def __getitem__(self, index: int) -> Move:
        return self._moves[index]

    def __setitem__(self, index: int, mv: Move) -> None:
        self._moves[index] = mv


class FastMoveList(MoveList):
    """A move list with a main store of ``MAX_MOVES_FAST`` moves and an overflow store."""

    def __init__(self) -> None:
        self._main: list[Move] = []
        self._overflow: list[Move] = []

    def push(self, mv: Move) -> None:
        if len(self._main) < MAX_MOVES_FAST:
            self._main.append(mv)
        else:
            self._overflow.append(mv)

    def clear(self) -> None:
        self._main.clear()
        self._overflow.clear()

    @property
    def overflowed(self) -> bool:
        """True once the main store is full and moves have spilled over."""
        return bool(self._overflow)

    def __len__(self) -> int:
        return len(self._main) + len(self._overflow)

    def __iter__(self) -> Iterator[Move]:
        yield from self._main
        yield from self._overflow


class MoveStack:
    """Shared storage for a stack of move lists, one ``Frame`` per search ply."""

    def __init__(self) -> None:
        self._data: list[Move] = []

    def new_frame(self) -> Frame:
        """Open an empty frame on top of the stack."""
        return Frame(self)

    def __len__(self) -> int:
        return len(self._data)


class Frame(MoveList):
    """A window onto the top of a ``MoveStack``, holding one list of moves.

    Only the topmost open frame may be pushed to or closed. Closing a frame
    releases its moves from the stack.
    """

    def __init__(self, stack: MoveStack):
        self._stack = stack
        self._start = len(stack._data)
        self._end = self._start
        self._closed = False

    def _check_top(self, action: str) -> None:
        if self._closed:
            raise RuntimeError(f"cannot {action} a closed frame")
        if self._end != len(self._stack._data):
            raise RuntimeError(f"cannot {action} a frame that is not on top of its stack")

    def push(self, mv: Move) -> None:
        self._check_top("push to")
        self._stack._data.append(mv)
        self._end += 1

    def clear(self) -> None:
        self._check_top("clear")
        del self._stack._data[self._start:]
        self._end = self._start

    def close(self) -> None:
        """Release this frame's moves from the stack. Closing twice does nothing."""
        if self._closed:
            return
        self._check_top("close")
        del self._stack._data[self._start:]
        self._end = self._start
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> Frame:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __len__(self) -> int:
        return self._end - self._start

    def __iter__(self) -> Iterator[Move]:
        return iter(self._stack._data[self._start:self._end])