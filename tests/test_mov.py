import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from seaboard.mov import Move, MoveType, PromoPiece, square_name

squares = st.integers(min_value=0, max_value=63)


def test_square_names_are_distinct_and_short():
    names = [square_name(sq) for sq in range(64)]
    assert len(set(names)) == 64
    assert all(len(name) == 2 for name in names)
    assert square_name(0) == "a1"
    assert square_name(63) == "h8"


@pytest.mark.parametrize("sq", [-1, 64, 100])
def test_square_name_out_of_range(sq):
    with pytest.raises(ValueError):
        square_name(sq)


def test_uci_of_quiet_move():
    mv = Move(12, 28)
    assert mv.to_uci() == "e2e4"
    assert str(mv) == "e2e4"


def test_null_move():
    mv = Move.null()
    assert mv.is_null()
    assert mv.to_uci() == "Null"
    assert not mv.is_capture()
    assert not mv.is_promo()
    assert mv == Move.null()


@given(orig=squares, dest=squares)
def test_uci_prefix_is_the_two_squares(orig, dest):
    mv = Move(orig, dest, None, MoveType.QUIET)
    assert mv.to_uci() == square_name(orig) + square_name(dest)


@given(orig=squares, dest=squares, piece=st.sampled_from(list(PromoPiece)))
def test_promotion_uci_ends_with_piece_letter(orig, dest, piece):
    mv = Move(orig, dest, piece, MoveType.PROMOTION | MoveType.CAPTURE)
    text = mv.to_uci()
    assert text[:4] == Move(orig, dest).to_uci()
    assert text[4:] == piece.value
    assert mv.is_promo()
    assert mv.is_capture()


def test_flag_queries():
    ep = Move(36, 43, None, MoveType.EN_PASSANT | MoveType.CAPTURE)
    assert ep.is_en_passant()
    assert ep.is_capture()
    assert not ep.is_quiet_or_castle()

    castle = Move(4, 6, None, MoveType.CASTLE)
    assert castle.is_castle()
    assert castle.is_quiet_or_castle()
    assert not castle.is_quiet()

    quiet = Move(12, 20)
    assert quiet.is_quiet()
    assert quiet.is_quiet_or_castle()
    assert not quiet.is_castle()


def test_move_type_values_fixed_by_format():
    assert MoveType(0b00000001) is MoveType.PROMOTION
    assert MoveType(0b00100000) is MoveType.NULL
    assert MoveType(0b00001010) == MoveType.EN_PASSANT | MoveType.CAPTURE


def test_with_promo_replaces_piece():
    mv = Move(52, 60, PromoPiece.QUEEN, MoveType.PROMOTION)
    under = mv.with_promo(PromoPiece.KNIGHT)
    assert under.promo is PromoPiece.KNIGHT
    assert mv.promo is PromoPiece.QUEEN
    assert dataclasses.replace(under, promo=PromoPiece.QUEEN) == mv


def test_with_promo_rejects_non_promotion():
    with pytest.raises(ValueError):
        Move(12, 28).with_promo(PromoPiece.QUEEN)


def test_inconsistent_promotion_is_rejected():
    with pytest.raises(ValueError):
        Move(52, 60, None, MoveType.PROMOTION)
    with pytest.raises(ValueError):
        Move(12, 20, PromoPiece.ROOK, MoveType.QUIET)


def test_moves_are_hashable_values():
    assert len({Move(12, 28), Move(12, 28), Move(12, 20)}) == 2