import struct

import pytest

from tensorbits import Float, InvalidTypeError, PackedBuffer, Signed, Unsigned, add, tensor


def test_add_scalars():
    assert add(1, 2) == 3
    assert add(1, 2.2) == 3.2
    assert add(True, 1) == 2


def test_add_scalar_to_tensor():
    t = add(tensor([1, 2, 3]), 1)

    assert t.to_buffer() == PackedBuffer.from_words([2, 3, 4], 64)
    assert t.type == Signed(64)
    assert t.shape == (3,)


def test_float_scalar_converts_tensor_to_float():
    t = add(tensor([1, 2, 3]), 1.0)

    assert t.to_buffer() == PackedBuffer(struct.pack(">3d", 2.0, 3.0, 4.0), 192)
    assert t.type == Float(64)


def test_float_tensor_stays_float():
    t = add(tensor([1.0, 2.0, 3.0]), 1)

    assert t.to_buffer() == PackedBuffer(struct.pack(">3d", 2.0, 3.0, 4.0), 192)


def test_float_tensor_keeps_width():
    t = add(tensor([1.0, 2.0, 3.0], type=Float(32)), 1)

    assert t.to_buffer() == PackedBuffer(struct.pack(">3f", 2.0, 3.0, 4.0), 96)
    assert t.type == Float(32)


def test_small_scalar_overflows():
    t = add(tensor([True, False, True]), 1)

    assert t.to_buffer() == PackedBuffer(b"\x40", 3)
    assert t.type == Unsigned(1)


def test_large_scalar_grows_type():
    t = add(tensor([True, False, True]), 10)

    assert t.to_buffer() == PackedBuffer(bytes([11, 10, 11]), 24)
    assert t.type == Unsigned(8)


def test_negative_scalar_makes_unsigned_signed():
    t = add(tensor([0, 1, 2], type=Unsigned(8)), -1)

    assert t.to_buffer() == PackedBuffer(b"\xff\xff\x00\x00\x00\x01", 48)
    assert t.type == Signed(16)
    assert t.to_list() == [-1, 0, 1]


def test_boolean_scalar():
    t = add(tensor([1, 2], type=Unsigned(8)), True)

    assert t.type == Unsigned(8)
    assert t.to_list() == [2, 3]


def test_add_keeps_shape():
    t = add(tensor([[[1], [2]], [[3], [4]]], type=Signed(8)), 100)

    assert t.shape == (2, 2, 1)
    assert t.to_list() == [[[101], [102]], [[103], [104]]]


def test_add_to_empty_tensor():
    t = add(tensor([]), 1)

    assert t.shape == (0,)
    assert t.to_buffer() == PackedBuffer(b"", 0)


def test_add_does_not_modify_input():
    t = tensor([1, 2, 3], type=Unsigned(8))
    buffer = t.to_buffer()

    add(t, -1)

    assert t.type == Unsigned(8)
    assert t.to_buffer() == buffer


def test_scalar_on_the_left():
    assert add(1, tensor([1, 2])) == add(tensor([1, 2]), 1)


def test_operators():
    t = tensor([1, 2], type=Unsigned(8))

    assert t + 1 == add(t, 1)
    assert 1 + t == add(t, 1)
    assert t + -1.5 == add(t, -1.5)


def test_add_two_tensors_is_not_supported():
    with pytest.raises(TypeError):
        add(tensor([1]), tensor([2]))

    with pytest.raises(TypeError):
        tensor([1]) + tensor([2])


def test_add_non_number():
    with pytest.raises(TypeError):
        add(tensor([1]), "1")

    with pytest.raises(TypeError):
        tensor([1]) + "1"


def test_unrepresentable_result_type():
    wide = add(tensor([1], type=Unsigned(64)), -1)
    assert wide.type == Signed(128)
    assert wide.to_list() == [0]

    with pytest.raises(InvalidTypeError):
        add(wide, 1.0)
