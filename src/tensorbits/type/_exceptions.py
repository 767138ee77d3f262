__all__ = ["InvalidTypeError"]

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class InvalidTypeError(Exception):
    type: Any

    def __str__(self):
        return (
            f"Expected a signed or unsigned integer type with a positive width or a float type "
            f"with a width of 16, 32, or 64, but got {self.type!r}"
        )
