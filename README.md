# seaboard

Building blocks for chess programs: 64-bit bitboards, fixed-width wrapping
integers, moves with UCI notation, side-relative directions and several
move-list containers. It has no third-party dependencies.

## Installation

```
pip install seaboard
```

To run the test suite:

```
pip install "seaboard[test]"
pytest
```

## Modules

### `seaboard.bit_twiddles`

- `lsb(x)` isolates the lowest set bit of a 64-bit value (`lsb(0) == 0`).
- `more_than_one(x)` tells whether more than one bit is set.

### `seaboard.wrapping`

- `wrap(value, bits)` reduces an `int` to an unsigned value of the given
  width; `wrapping_shl` and `wrapping_shr` shift with the shift amount taken
  modulo the width. A negative shift amount raises `ValueError`.
- `WrappingInt` is the base of `U8` and `U64`, unsigned integers whose
  `+ - * // % & | ^ ~ << >>` operators wrap to their width. They mix with
  plain `int`s and compare equal to them by value.

### `seaboard.bb`

`Bitboard` is a `U64` holding one bit per square (a1 = 0, h8 = 63).

- Constants `Bitboard.ALL`, `Bitboard.FILE_A` … `FILE_H`,
  `Bitboard.RANK_1` … `RANK_8`; the module also exports the same masks as
  plain ints, plus `FILE_BB`, `RANK_BB`, `CASTLING_PATH` and
  `CASTLING_ROOK_START`.
- `Bitboard.empty()`, `Bitboard.from_square(sq)`.
- `popcnt()`, `bsf()` (64 when empty), `lsb()`, `more_than_one()`.
- `to_square()` returns the single set square; it raises `ValueError`
  unless exactly one square is set.
- `pop_lsb()` returns `(square, square_bitboard, rest)`; it raises
  `ValueError` on an empty bitboard.
- Iterating yields set squares from lowest to highest; `len()` and `in`
  work as for a set of squares.
- `render()` (also `str()`) draws the board in a frame, rank 8 at the top.

### `seaboard.sides`

`Side.WHITE` and `Side.BLACK`, with `opponent`, give square steps (`up`,
`down`, `left`, `right`, `up_left`, `up_right`, `down_left`, `down_right`)
and bitboard shifts (`shift_up`, `shift_down`, … ) relative to that player.
"Up" points toward the opponent. Square steps wrap to 8 bits; sideways and
diagonal shifts clear the edge file first so squares do not wrap across the
board.

### `seaboard.mov`

- `MoveType` is a flag enum: `PROMOTION`, `EN_PASSANT`, `CASTLE`,
  `CAPTURE`, `QUIET`, `NULL`.
- `PromoPiece` is `KNIGHT`, `BISHOP`, `ROOK` or `QUEEN`, valued by its UCI
  letter.
- `Move(orig, dest, promo, move_type)` is a frozen dataclass. It raises
  `ValueError` unless a promotion piece is given exactly when the move has
  the `PROMOTION` flag. `Move.null()` is the placeholder null move.
- Predicates `is_null`, `is_capture`, `is_en_passant`, `is_castle`,
  `is_quiet`, `is_quiet_or_castle`, `is_promo`.
- `with_promo(piece)` returns a copy promoting to another piece.
- `to_uci()` (also `str()`) gives `e2e4`, `e7e8q`, or `Null`.
- `square_name(sq)` turns a square index into its name, e.g. `12 -> 'e2'`.

### `seaboard.movelist`

All lists share the `MoveList` interface: `push`, `clear`, `extend`,
`len()`, iteration and truthiness.

- `BoundedMoveList(capacity=254)` silently drops pushes past its capacity;
  it supports indexing (out-of-range raises `IndexError`), `random()` and
  `to_list()`. `BasicMoveList` is the same with the default capacity.
- `OverflowingMoveList` is unbounded and indexable.
- `FastMoveList` keeps its first 54 moves in a main store and the rest in
  an overflow store; `overflowed` reports whether it has spilled over.
- `MoveStack` holds the moves of a stack of `Frame`s, one per search ply.
  `new_frame()` opens a frame on top; only the topmost open frame may be
  pushed to, cleared or closed (otherwise `RuntimeError`). A frame is a
  context manager and closing it releases its moves from the stack.

## Example

```python
from seaboard.bb import Bitboard
from seaboard.mov import Move, MoveType
from seaboard.movelist import BasicMoveList, MoveStack

bb = Bitboard(4415494823944)
print(bb.popcnt())        # 5
print(list(bb))           # [3, 13, 28, 34, 42]
print(bb.render())

moves = BasicMoveList()
moves.push(Move(12, 28, None, MoveType.QUIET))
print([m.to_uci() for m in moves])   # ['e2e4']

stack = MoveStack()
with stack.new_frame() as frame:
    frame.push(Move(6, 21, None, MoveType.QUIET))
    print(len(frame))     # 1
print(len(stack))         # 0
```

## What this package does not do

There is no board position here: no FEN parsing, no piece placement, no
move generation or legality checking, no making or unmaking of moves, and no
search or engine command loop. The package provides the pieces such a
program is built from, not the program itself.