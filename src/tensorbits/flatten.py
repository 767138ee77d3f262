__all__ = ["ShapeMismatchError", "flatten"]

from dataclasses import dataclass
from numbers import Real
from typing import Any

from .bits import BitWriter, PackedBuffer
from .encoding import word_encoder
from .type import ElementType


@dataclass(frozen=True, slots=True)
class ShapeMismatchError(Exception):
    expected: tuple[int, ...]
    actual: tuple[int, ...]
    expected_position: int
    actual_position: int

    def __str__(self):
        return (
            f"Expected every list at the same depth to have the same shape, but got "
            f"{self.expected} at position {self.expected_position} and {self.actual} at "
            f"position {self.actual_position}"
        )


def flatten(value: Any, type: ElementType) -> tuple[tuple[int, ...], PackedBuffer]:
    """Pack a scalar or nested list of scalars into a row-major buffer.

    Returns the shape implied by the nesting together with the buffer. All lists at the same depth
    must have the same shape. An empty list has shape `(0,)` regardless of what might have been
    nested inside it.
    """
    encode = word_encoder(type)
    bits = type.bits
    writer = BitWriter()

    def recurse(node: Any) -> tuple[int, ...]:
        if isinstance(node, (list, tuple)):
            if len(node) == 0:
                return (0,)

            child_shape = recurse(node[0])
            for position in range(1, len(node)):
                sibling_shape = recurse(node[position])
                if sibling_shape != child_shape:
                    raise ShapeMismatchError(child_shape, sibling_shape, 0, position)

            return (len(node), *child_shape)
        elif isinstance(node, Real):
            writer.write(encode(node), bits)
            return ()
        else:
            raise TypeError(f"Expected a boolean, a real number, or a list, but got {node!r}")

    shape = recurse(value)

    return shape, writer.finish()
