__all__ = ["validate", "infer", "merge", "merge_scalar", "unsigned_size", "signed_size"]

from functools import reduce
from numbers import Integral, Real
from typing import Any

from ._exceptions import InvalidTypeError
from ._type import ElementType, Float, Signed, Unsigned

float_widths = (16, 32, 64)
unsigned_widths = (1, 8, 16, 32, 64)
signed_widths = (8, 16, 32, 64)


def validate(type: Any) -> ElementType:
    """Return `type` if it can describe tensor elements, otherwise raise InvalidTypeError."""
    match type:
        case Float(bits) if isinstance(bits, int) and bits in float_widths:
            return type
        case Signed(bits) | Unsigned(bits) if isinstance(bits, int) and bits > 0:
            return type
        case _:
            raise InvalidTypeError(type)


def infer(value: Any) -> ElementType:
    """Infer the element type of a scalar or arbitrarily nested list of scalars.

    Booleans are `u1`, integers are `s64`, and real numbers are `f64`. Nested leaves are combined
    with `merge`, so the result can represent every leaf. A structure with no leaves is `f64`.
    """
    leaf_types = list(iter_leaf_types(value))
    if len(leaf_types) == 0:
        return Float(64)
    else:
        return reduce(merge, leaf_types)


def iter_leaf_types(value: Any):
    if isinstance(value, (list, tuple)):
        for element in value:
            yield from iter_leaf_types(element)
    else:
        yield scalar_type(value)


def scalar_type(value: Any) -> ElementType:
    if isinstance(value, bool):
        return Unsigned(1)
    elif isinstance(value, Integral):
        return Signed(64)
    elif isinstance(value, Real):
        return Float(64)
    else:
        raise TypeError(f"Expected a boolean or a real number, but got {value!r}")


def merge(left: ElementType, right: ElementType) -> ElementType:
    """Find the smallest type that represents every value of both types.

    Any float makes the result a float as wide as the widest operand. Integers of the same
    signedness take the larger width. A signed and an unsigned integer become a signed integer,
    doubling the unsigned width when it is not narrower than the signed width.
    """
    match left, right:
        case (Float(), _) | (_, Float()):
            return Float(max(left.bits, right.bits))
        case (Signed(), Signed()):
            return Signed(max(left.bits, right.bits))
        case (Unsigned(), Unsigned()):
            return Unsigned(max(left.bits, right.bits))
        case (Signed(signed_bits), Unsigned(unsigned_bits)) | (
            Unsigned(unsigned_bits),
            Signed(signed_bits),
        ):
            if unsigned_bits >= signed_bits:
                return Signed(unsigned_bits * 2)
            else:
                return Signed(signed_bits)
        case _:
            raise NotImplementedError(f"Cannot merge {left!r} with {right!r}")


def unsigned_size(integer: int) -> int:
    for bits in unsigned_widths:
        if integer < 1 << bits:
            return bits
    return unsigned_widths[-1]


def signed_size(integer: int) -> int:
    for bits in signed_widths:
        if -(1 << (bits - 1)) <= integer < 1 << (bits - 1):
            return bits
    return signed_widths[-1]


def merge_scalar(tensor_type: ElementType, scalar: Any) -> ElementType:
    """Find the type of a tensor after combining it with a scalar.

    Unlike `infer`, integers are sized by their value, so a small integer does not widen a narrow
    tensor. A negative integer turns an unsigned tensor signed. A float tensor keeps its type.
    """
    if isinstance(scalar, bool):
        scalar = int(scalar)

    match tensor_type:
        case Float():
            return tensor_type
        case _ if not isinstance(scalar, Integral):
            return merge(tensor_type, scalar_type(scalar))
        case Unsigned() if scalar >= 0:
            return merge(tensor_type, Unsigned(unsigned_size(scalar)))
        case _:
            return merge(tensor_type, Signed(signed_size(scalar)))
