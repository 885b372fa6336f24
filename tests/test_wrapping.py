import pytest
from hypothesis import given
from hypothesis import strategies as st

from seaboard.wrapping import U8, U64, WrappingInt, wrap, wrapping_shl, wrapping_shr

SQ_CONSTS = [
    0xFE, 0xC1, 0x21, 0x9F, 0x44, 0xA0, 0xF7, 0xFF, 0x11, 0x7A, 0x01, 0x02, 0x03, 0x04, 0x05,
    0x06, 0x07, 0x08,
]

BIT_CONSTS = [
    0xFE00C4D0, 0x12F450012, 0xFFFFFFFF, 0x00000001, 0xA0E34001, 0x9ABBC0AA,
    0x412CBFFF, 0x90000C10, 0xC200C4D0, 0xFE00C4D0, 0xFE00C4D0, 0x44FF2221,
    0x772C0F64, 0x09F3C833, 0x04444A09, 0x3333FFEE, 0x670FA111, 0x7BBBB005,
]

u8 = st.integers(min_value=0, max_value=0xFF)
u64 = st.integers(min_value=0, max_value=(1 << 64) - 1)


def test_wrap_values():
    assert wrap(256, 8) == 0
    assert wrap(-1, 8) == 255
    assert wrap(-1, 64) == (1 << 64) - 1
    assert wrap(0x1FF, 8) == 0xFF


def test_wrap_rejects_bad_width():
    with pytest.raises(ValueError):
        wrap(1, 0)


def test_wrapping_shifts_take_amount_modulo_width():
    assert wrapping_shl(1, 65, 64) == 2
    assert wrapping_shl(0xFFFFFFFF, 64, 64) == 0xFFFFFFFF
    assert wrapping_shr(0x80, 15, 8) == 1
    assert wrapping_shl(0xFE, 9, 8) == 0xFC


def test_negative_shift_rejected():
    with pytest.raises(ValueError):
        wrapping_shl(1, -1, 8)
    with pytest.raises(ValueError):
        U64(1) >> -3


def test_base_class_has_no_width():
    with pytest.raises(TypeError):
        WrappingInt(3)


def test_u8_pinned_results():
    assert (U8(0xFE) + U8(0xC1)).value == 0xBF
    assert (U8(0x21) - U8(0xFE)).value == 0x23
    assert (U8(0xFE) * U8(0xC1)).value == 0x7E
    assert (U8(0xFE) // U8(0x21)).value == 7
    assert (U8(0xFE) % U8(0x21)).value == 23
    assert (U8(0xFE) << 9).value == 0xFC
    assert (U8(0x44) >> 0xFE).value == 1
    assert (~U8(0xFE)).value == 1


def test_u64_pinned_results():
    assert (~U64(1)).value == 0xFFFF_FFFF_FFFF_FFFE
    assert (U64(0) - U64(1)).value == (1 << 64) - 1
    assert (U64(1 << 63) * 2).value == 0
    assert (U64(0xFFFFFFFF) << 64).value == 0xFFFFFFFF
    assert (U64(0xFFFFFFFF) << 65).value == 0x1FFFFFFFE


def test_results_keep_type_and_accept_plain_ints():
    result = U8(3) | 4
    assert isinstance(result, U8)
    assert result == 7
    assert (4 | U8(3)) == U8(7)


def test_mixed_widths_are_rejected():
    with pytest.raises(TypeError):
        U8(1) + U64(1)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        U8(5) // U8(0)
    with pytest.raises(ZeroDivisionError):
        U64(5) % 0


@pytest.mark.parametrize("bits", SQ_CONSTS)
def test_sq_consts_invariants(bits):
    a = U8(bits)
    assert (~~a) == a
    assert (a + ~a).value == 0xFF
    for other in SQ_CONSTS:
        b = U8(other)
        assert (a + b) - b == a
        assert (a ^ b) ^ b == a
        assert (a | b) & a == a
        assert (a // b) * b + (a % b) == a
        assert (a << other) == (a << (other % 8))
        assert (a >> other) == (a >> (other % 8))


@pytest.mark.parametrize("bits", BIT_CONSTS)
def test_bit_consts_invariants(bits):
    a = U64(bits)
    assert (~~a) == a
    for other in BIT_CONSTS:
        b = U64(other)
        assert (a + b) - b == a
        assert (a ^ b) ^ b == a
        assert (a & b) | a == a
        assert (a // b) * b + (a % b) == a
    for x in range(67):
        assert (a << x) == (a << (x % 64))
        assert (a >> x) == (a >> (x % 64))


@given(u64, u64)
def test_add_sub_round_trip(a, b):
    assert (U64(a) + U64(b)) - U64(b) == U64(a)


@given(u8)
def test_value_stays_in_range(a):
    assert 0 <= (U8(a) * U8(a) + 0x99).value <= 0xFF