"""Conversion between Python numbers and fixed-width words.

A word is a non-negative integer holding exactly the bits of one encoded element: the low bits of
the two's-complement value for integer types, or the IEEE 754 bit pattern for float types. Words
are concatenated into a `PackedBuffer` most significant bit first.
"""

__all__ = [
    "float_packer",
    "float_unpacker",
    "integer_range",
    "integer_from_float",
    "word_encoder",
    "word_decoder",
    "encode_scalar",
    "decode_scalar",
    "decode_buffer",
    "reencode",
]

import math
from struct import Struct
from typing import Any, Callable

from .bits import BitReader, BitWriter, PackedBuffer
from .type import ElementType, Float, Signed, Unsigned

float_structs = {16: Struct(">e"), 32: Struct(">f"), 64: Struct(">d")}


def float_packer(bits: int) -> Callable[[Any], int]:
    pack = float_structs[bits].pack

    def pack_word(value) -> int:
        try:
            packed = pack(float(value))
        except OverflowError:
            # Narrowing past the largest finite value rounds to infinity
            packed = pack(math.inf if value > 0 else -math.inf)
        return int.from_bytes(packed, "big")

    return pack_word


def float_unpacker(bits: int) -> Callable[[int], float]:
    unpack = float_structs[bits].unpack
    n_bytes = bits // 8

    def unpack_word(word: int) -> float:
        return unpack(word.to_bytes(n_bytes, "big"))[0]

    return unpack_word


def integer_range(type: ElementType) -> tuple[int, int]:
    match type:
        case Signed(bits):
            return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        case Unsigned(bits):
            return 0, (1 << bits) - 1
        case _:
            raise NotImplementedError(f"No integer range for {type!r}")


def integer_from_float(value, low: int, high: int) -> int:
    """Truncate a float toward zero. NaN becomes 0 and infinities become `low` or `high`."""
    if math.isnan(value):
        return 0
    elif value == math.inf:
        return high
    elif value == -math.inf:
        return low
    else:
        return int(value)


def word_encoder(type: ElementType) -> Callable[[Any], int]:
    """Select the function turning one value into a word of `type`.

    Booleans are the integers 1 and 0. Integers keep their low `type.bits` bits, so values out of
    range wrap around instead of failing. Floats stored as integers are truncated toward zero by
    `integer_from_float`.
    """
    match type:
        case Float(bits):
            return float_packer(bits)
        case Signed(bits) | Unsigned(bits):
            mask = (1 << bits) - 1
            low, high = integer_range(type)

            def encode_integer(value) -> int:
                if not isinstance(value, int):
                    value = integer_from_float(value, low, high)
                return value & mask

            return encode_integer
        case _:
            raise NotImplementedError(f"No encoder for {type!r}")


def word_decoder(type: ElementType) -> Callable[[int], Any]:
    """Select the function turning one word of `type` back into a Python number."""
    match type:
        case Float(bits):
            return float_unpacker(bits)
        case Signed(bits):
            sign_shift = bits - 1

            def decode_signed(word: int) -> int:
                return word - ((word >> sign_shift) << bits)

            return decode_signed
        case Unsigned():
            return int
        case _:
            raise NotImplementedError(f"No decoder for {type!r}")


def encode_scalar(value: Any, type: ElementType) -> PackedBuffer:
    writer = BitWriter()
    writer.write(word_encoder(type)(value), type.bits)
    return writer.finish()


def decode_scalar(buffer: PackedBuffer, type: ElementType) -> Any:
    return word_decoder(type)(BitReader(buffer).read(type.bits))


def decode_buffer(buffer: PackedBuffer, type: ElementType) -> list[Any]:
    """Decode every element of `buffer` in row-major order."""
    decode = word_decoder(type)
    return [decode(word) for word in buffer.words(type.bits)]


def reencode(buffer: PackedBuffer, from_type: ElementType, to_type: ElementType) -> PackedBuffer:
    """Repack every element of `buffer` from `from_type` into `to_type`."""
    from .kernels import kernel

    if from_type == to_type:
        return buffer

    return kernel(from_type.__class__, to_type.__class__)(buffer, from_type, to_type, None)
