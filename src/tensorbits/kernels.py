"""Specialized loops that repack every element of a buffer.

Each pair of source and target kinds gets its own loop, generated as Python source in which the
decoding of the source kind and the encoding of the target kind are written out inline. The kind
is therefore looked up once per buffer rather than once per element. Widths are ordinary
arguments, so a single loop serves every width of its kinds.

The generated source is assembled only from the fixed fragments in this module and is executed
in a closed namespace holding just the bit cursors and the codec helpers it calls. No user input
reaches the compiled text; values, types, and operands are passed as arguments at call time.
"""

__all__ = ["Operator", "Kernel", "kernel", "all_kernels"]

import logging
from enum import Enum
from functools import lru_cache
from typing import Any, Callable

from .bits import BitReader, BitWriter, PackedBuffer
from .encoding import float_packer, float_unpacker, integer_from_float, integer_range
from .source_builder import SourceBuilder
from .type import ElementType, Float, Signed, Unsigned

logger = logging.getLogger(__name__)

Kernel = Callable[[PackedBuffer, ElementType, ElementType, Any], PackedBuffer]


class Operator(str, Enum):
    # Python 3.10 does not support StrEnum, so do it manually
    add = "+"

    def __str__(self) -> str:
        return self.name


def decode_prelude(kind: type[ElementType]) -> list[str]:
    if kind is Signed:
        return ["from_sign_shift = from_bits - 1"]
    elif kind is Float:
        return ["unpack_from = float_unpacker(from_bits)"]
    else:
        return []


def decode_expression(kind: type[ElementType]) -> str:
    if kind is Signed:
        return "word - ((word >> from_sign_shift) << from_bits)"
    elif kind is Float:
        return "unpack_from(word)"
    else:
        return "word"


def encode_prelude(kind: type[ElementType], value_is_float: bool) -> list[str]:
    if kind is Float:
        return ["pack_to = float_packer(to_bits)"]
    elif value_is_float:
        return ["to_mask = (1 << to_bits) - 1", "to_low, to_high = integer_range(to_type)"]
    else:
        return ["to_mask = (1 << to_bits) - 1"]


def encode_expression(kind: type[ElementType], value: str, value_is_float: bool) -> str:
    if kind is Float:
        return f"pack_to({value})"
    elif value_is_float:
        return f"integer_from_float({value}, to_low, to_high) & to_mask"
    else:
        return f"{value} & to_mask"


@lru_cache()
def kernel(
    from_kind: type[ElementType], to_kind: type[ElementType], operator: Operator | None = None
) -> Kernel:
    """Get the loop repacking elements of `from_kind` into `to_kind`.

    With an `operator`, each decoded element is combined with the operand before it is encoded.
    The returned function takes the buffer, the source type, the target type, and the operand.
    """
    if operator is None:
        name = f"{from_kind.__name__.lower()}_to_{to_kind.__name__.lower()}"
        value = "value"
    else:
        name = f"{from_kind.__name__.lower()}_{operator.name}_to_{to_kind.__name__.lower()}"
        value = f"value {operator.value} operand"

    # Integer targets only receive floats from float sources; operators on integer targets are
    # only ever given integer operands
    value_is_float = from_kind is Float

    source = SourceBuilder()
    with source.block(f"def {name}(buffer, from_type, to_type, operand):"):
        source.append("from_bits = from_type.bits")
        source.append("to_bits = to_type.bits")
        source.extend(decode_prelude(from_kind))
        source.extend(encode_prelude(to_kind, value_is_float))
        source.append("writer = BitWriter()")
        source.append("write = writer.write")
        with source.block("for word in BitReader(buffer).words(from_bits):"):
            source.append(f"value = {decode_expression(from_kind)}")
            source.append(f"write({encode_expression(to_kind, value, value_is_float)}, to_bits)")
        source.append("return writer.finish()")

    logger.debug("Generated kernel %s:\n%s", name, source.source())

    return source.compile(
        name,
        {
            "BitReader": BitReader,
            "BitWriter": BitWriter,
            "float_packer": float_packer,
            "float_unpacker": float_unpacker,
            "integer_from_float": integer_from_float,
            "integer_range": integer_range,
        },
    )


def all_kernels(operator: Operator | None = None) -> dict[tuple[str, str], Kernel]:
    """Generate the loop for every pair of kinds."""
    kinds = (Signed, Unsigned, Float)
    return {
        (from_kind.__name__, to_kind.__name__): kernel(from_kind, to_kind, operator)
        for from_kind in kinds
        for to_kind in kinds
    }
