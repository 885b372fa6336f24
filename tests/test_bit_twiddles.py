from hypothesis import given
from hypothesis import strategies as st

from seaboard.bit_twiddles import lsb, more_than_one

u64 = st.integers(min_value=0, max_value=(1 << 64) - 1)


def test_lsb_works():
    assert lsb(3523476) == 4
    assert lsb(2346467342467) == 1
    assert lsb(239889852416) == 2_048
    assert lsb(0) == 0


def test_lsb_of_top_bit():
    assert lsb(1 << 63) == 1 << 63
    assert lsb((1 << 64) - 1) == 1


def test_more_than_one_values():
    assert more_than_one(0) is False
    assert more_than_one(1) is False
    assert more_than_one(8) is False
    assert more_than_one(1 << 63) is False
    assert more_than_one(3) is True
    assert more_than_one((1 << 63) | 1) is True


@given(u64)
def test_lsb_is_a_set_bit_of_input(x):
    bit = lsb(x)
    assert bit & x == bit
    assert bit & (bit - 1) == 0 if bit else x == 0


@given(u64)
def test_more_than_one_matches_popcount(x):
    assert more_than_one(x) == (bin(x).count("1") > 1)