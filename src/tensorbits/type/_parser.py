__all__ = ["parse_type"]

from parsita import ParseError, ParserContext, reg
from returns import result

from ._exceptions import InvalidTypeError
from ._inference import validate
from ._type import ElementType, Float, Signed, Unsigned


class TypeParsers(ParserContext):
    bits = reg(r"[0-9]+") > int

    signed = "s" >> bits > Signed
    unsigned = "u" >> bits > Unsigned
    floating = "f" >> bits > Float

    element_type = signed | unsigned | floating


def parse_type(string: str, /) -> result.Result[ElementType, ParseError | InvalidTypeError]:
    try:
        return TypeParsers.element_type.parse(string).map(validate)
    except InvalidTypeError as e:
        return result.Failure(e)
