__all__ = ["app"]

from typing import Annotated, Optional

import typer
from returns.result import Failure, Success

from .flatten import ShapeMismatchError
from .literal import parse_literal
from .operators import add
from .tensor import tensor
from .type import InvalidTypeError, parse_type

app = typer.Typer()


@app.command()
def tensorbits(
    literal: Annotated[
        str,
        typer.Argument(
            show_default=False,
            help="The value of the tensor, e.g. [[1, 2], [3, 4]].",
        ),
    ],
    type_string: Annotated[
        Optional[str],
        typer.Option(
            "--type",
            "-t",
            help=(
                "The element type, e.g. s64, u8, or f32. If not given, it is inferred from the "
                "values."
            ),
        ),
    ] = None,
    scalar_string: Annotated[
        Optional[str],
        typer.Option(
            "--add",
            "-a",
            help="A number to add to every element of the tensor.",
        ),
    ] = None,
):
    # Parse value
    match parse_literal(literal):
        case Failure(error):
            typer.echo(f"Failed to parse tensor value:\n{error}", err=True)
            raise typer.Exit(1)
        case Success(value):
            pass
        case _:
            raise NotImplementedError()

    # Parse type
    if type_string is None:
        type = None
    else:
        match parse_type(type_string):
            case Failure(InvalidTypeError() as error):
                typer.echo(str(error), err=True)
                raise typer.Exit(1)
            case Failure(error):
                typer.echo(f"Failed to parse type:\n{error}", err=True)
                raise typer.Exit(1)
            case Success(type):
                pass
            case _:
                raise NotImplementedError()

    # Parse scalar
    if scalar_string is None:
        scalar = None
    else:
        match parse_literal(scalar_string):
            case Success(bool() | int() | float() as scalar):
                pass
            case Success(_):
                typer.echo(f"Expected a number to add, but got {scalar_string}", err=True)
                raise typer.Exit(1)
            case Failure(error):
                typer.echo(f"Failed to parse number to add:\n{error}", err=True)
                raise typer.Exit(1)
            case _:
                raise NotImplementedError()

    # Build tensor
    try:
        result = tensor(value, type=type)
    except ShapeMismatchError as error:
        typer.echo(str(error), err=True)
        raise typer.Exit(1) from error

    if scalar is not None:
        try:
            result = add(result, scalar)
        except InvalidTypeError as error:
            typer.echo(str(error), err=True)
            raise typer.Exit(1) from error

    typer.echo(f"type: {result.type}")
    typer.echo(f"shape: {result.shape}")
    typer.echo(f"bits: {result.data.bit_length}")
    typer.echo(f"data: {result.data.data.hex()}")
