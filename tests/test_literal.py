import pytest
from returns.result import Failure, Success

from tensorbits.literal import parse_literal


@pytest.mark.parametrize(
    ("string", "value"),
    [
        ("0", 0),
        ("-12", -12),
        ("1.5", 1.5),
        ("-2e3", -2000.0),
        ("true", True),
        ("false", False),
        ("[]", []),
        ("[1, 2, 3]", [1, 2, 3]),
        ("[[1, 2], [3, 4]]", [[1, 2], [3, 4]]),
        ("[true, -2, 3.5e1]", [True, -2, 35.0]),
        ("[ [ ] ]", [[]]),
    ],
)
def test_parse_literal(string, value):
    assert parse_literal(string) == Success(value)


@pytest.mark.parametrize("string", ["", "[", "[1,]", "[1 2]", "one", "[[1], [2]"])
def test_parse_bad_literal(string):
    assert isinstance(parse_literal(string), Failure)
