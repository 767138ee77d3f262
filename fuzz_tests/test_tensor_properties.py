import struct
from math import prod

import hypothesis.strategies as st
import pytest
from hypothesis import given

from tensorbits import Float, ShapeMismatchError, Signed, Unsigned, add, tensor

from .strategies import nested_lists, ragged_lists

int64s = st.integers(min_value=-(2**63), max_value=2**63 - 1)
doubles = st.floats(allow_nan=False)


@given(nested_lists(int64s))
def test_integers_round_trip(shape_and_value):
    shape, value = shape_and_value
    t = tensor(value)

    assert t.type == Signed(64)
    assert t.shape == shape
    assert t.to_buffer().bit_length == prod(shape) * 64
    assert t.to_list() == value


@given(nested_lists(doubles))
def test_floats_round_trip(shape_and_value):
    shape, value = shape_and_value
    t = tensor(value)

    assert t.shape == shape
    assert t.to_list() == value


@given(nested_lists(st.integers()))
def test_narrow_integers_wrap(shape_and_value):
    shape, value = shape_and_value
    t = tensor(value, type=Unsigned(8))

    assert t.shape == shape
    assert t.to_buffer().bit_length == prod(shape) * 8
    assert list(t.to_buffer().words(8)) == [x % 256 for x in flat(value)]


@given(nested_lists(st.booleans()))
def test_booleans_take_one_bit_each(shape_and_value):
    shape, value = shape_and_value
    t = tensor(value)

    assert t.type == Unsigned(1)
    assert t.to_buffer().bit_length == len(flat(value))
    assert [bool(x) for x in flat(t.to_list())] == flat(value)


@given(ragged_lists())
def test_ragged_lists_report_position(ragged):
    row, columns, other_columns, value = ragged

    with pytest.raises(ShapeMismatchError) as exc_info:
        tensor(value)

    assert exc_info.value.expected == (columns,)
    assert exc_info.value.actual == (other_columns,)
    assert exc_info.value.actual_position == row


@given(nested_lists(st.integers(min_value=0, max_value=255)), st.integers(-1000, 1000))
def test_add_matches_python(shape_and_value, scalar):
    _, value = shape_and_value
    t = add(tensor(value, type=Unsigned(8)), scalar)

    bits = t.type.bits
    if isinstance(t.type, Signed):
        expected = [wrap_signed(x + scalar, bits) for x in flat(value)]
    else:
        expected = [(x + scalar) % (1 << bits) for x in flat(value)]
    assert flat(t.to_list()) == expected


small_singles = st.floats(
    width=32, allow_nan=False, allow_infinity=False, min_value=-(2.0**100), max_value=2.0**100
)


@given(nested_lists(small_singles), st.integers(-1000, 1000))
def test_add_to_float_tensor(shape_and_value, scalar):
    shape, value = shape_and_value
    t = add(tensor(value, type=Float(32)), scalar)

    assert t.type == Float(32)
    assert t.shape == shape
    assert flat(t.to_list()) == [single(x + scalar) for x in flat(value)]


def single(x: float) -> float:
    return struct.unpack(">f", struct.pack(">f", x))[0]


def wrap_signed(integer: int, bits: int) -> int:
    integer %= 1 << bits
    if integer >= 1 << (bits - 1):
        integer -= 1 << bits
    return integer


def flat(value) -> list:
    if isinstance(value, list):
        return [leaf for element in value for leaf in flat(element)]
    else:
        return [value]
