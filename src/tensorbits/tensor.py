from __future__ import annotations

__all__ = ["Tensor", "tensor"]

from dataclasses import dataclass
from math import prod
from numbers import Real
from typing import Any

from returns.functions import raise_exception

from .bits import PackedBuffer
from .encoding import decode_buffer, reencode
from .flatten import flatten
from .type import ElementType, infer, parse_type, validate


@dataclass(frozen=True, slots=True)
class Tensor:
    """Dense tensor of numbers packed into a run of bits.

    Elements are stored in row-major order, each taking exactly `type.bits` bits with no padding
    between them. A tensor is never modified; operations return new tensors. An instance should
    be constructed via `tensor`.
    """

    shape: tuple[int, ...]
    type: ElementType
    data: PackedBuffer

    def __post_init__(self):
        expected_length = prod(self.shape) * self.type.bits
        if self.data.bit_length != expected_length:
            raise ValueError(
                f"Expected a buffer of {expected_length} bits for shape {self.shape} and type "
                f"{self.type}, but got {self.data.bit_length} bits"
            )

    @property
    def rank(self) -> int:
        return len(self.shape)

    def to_buffer(self) -> PackedBuffer:
        return self.data

    def to_list(self) -> Any:
        """Decode the tensor into nested lists, or a single number if the rank is 0."""
        values = iter(decode_buffer(self.data, self.type))

        def recurse(shape: tuple[int, ...]):
            if len(shape) == 0:
                return next(values)
            else:
                return [recurse(shape[1:]) for _ in range(shape[0])]

        return recurse(self.shape)

    def as_type(self, type: ElementType | str) -> Tensor:
        type = resolve_type(type)
        return Tensor(self.shape, type, reencode(self.data, self.type, type))

    def __add__(self, other) -> Tensor:
        from .operators import add

        if isinstance(other, Real):
            return add(self, other)
        else:
            return NotImplemented

    def __radd__(self, other) -> Tensor:
        from .operators import add

        if isinstance(other, Real):
            return add(other, self)
        else:
            return NotImplemented

    def __repr__(self):
        return f"tensor({self.to_list()!r}, type={str(self.type)!r})"


def resolve_type(type: ElementType | str) -> ElementType:
    if isinstance(type, str):
        return parse_type(type).alt(raise_exception).unwrap()
    else:
        return validate(type)


def tensor(value: Any, *, type: ElementType | str | None = None) -> Tensor:
    """Build a tensor from a number, a boolean, or nested lists of those.

    The nesting of the lists gives the shape. If `type` is not given, it is inferred from the
    values with `tensorbits.type.infer`. Values that do not fit in the given type keep only their
    low-order bits.

    Raises `InvalidTypeError` if the type cannot describe elements, and `ShapeMismatchError` if
    lists at the same depth have different shapes.
    """
    if type is None:
        type = infer(value)
    type = resolve_type(type)

    shape, data = flatten(value, type)

    return Tensor(shape, type, data)
