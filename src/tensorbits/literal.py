__all__ = ["parse_literal"]

from typing import Any

from parsita import ParseError, ParserContext, lit, reg, repsep
from parsita.util import constant
from returns import result


class LiteralParsers(ParserContext, whitespace=r"[ \t\n]*"):
    true = lit("true") > constant(True)
    false = lit("false") > constant(False)
    boolean = true | false

    floating_point = reg(r"[+-]?\d+((\.\d+([Ee][+-]?\d+)?)|((\.\d+)?[Ee][+-]?\d+))") > float
    integer = reg(r"[+-]?[0-9]+") > int
    number = floating_point | integer

    sequence = "[" >> repsep(literal, ",") << "]"  # noqa: F821
    literal = boolean | number | sequence


def parse_literal(string: str, /) -> result.Result[Any, ParseError]:
    """Parse a number, `true`, `false`, or a bracketed list of those, e.g. `[[1, 2], [3, 4]]`."""
    return LiteralParsers.literal.parse(string)
