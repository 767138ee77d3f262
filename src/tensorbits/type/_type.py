__all__ = ["ElementType", "Signed", "Unsigned", "Float"]

from dataclasses import dataclass
from typing import ClassVar


class ElementType:
    """How one scalar of a tensor is laid out in its packed buffer.

    An element type is a kind (signed integer, unsigned integer, or floating point) and a width
    in bits. Every element of a tensor occupies exactly `bits` bits of the buffer.
    """

    __slots__ = ()

    prefix: ClassVar[str]
    bits: int

    def __str__(self) -> str:
        return f"{self.prefix}{self.bits}"


@dataclass(frozen=True, slots=True)
class Signed(ElementType):
    prefix: ClassVar[str] = "s"

    bits: int


@dataclass(frozen=True, slots=True)
class Unsigned(ElementType):
    prefix: ClassVar[str] = "u"

    bits: int


@dataclass(frozen=True, slots=True)
class Float(ElementType):
    prefix: ClassVar[str] = "f"

    bits: int
