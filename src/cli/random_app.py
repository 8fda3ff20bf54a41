"""`oddjobs random ...` commands."""

from __future__ import annotations

import random
from typing import Optional

import typer
from pydantic import ValidationError

from core.domain.models import BooleanRequest, DigitsRequest, IntegerRequest, RandomRequest
from core.services.random_values import InvalidBaseError, render

app = typer.Typer(
    no_args_is_help=True,
    help="Generate random values (non-cryptographic, not reproducible between runs).",
)


def _emit(request: RandomRequest) -> None:
    # Fresh generator per invocation, seeded from OS entropy.
    rng = random.Random()
    try:
        text = render(request, rng)
    except InvalidBaseError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=int(exc.exit_code))
    if text is not None:
        typer.echo(text)


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    return str(errors[0].get("msg", exc))


@app.command()
def boolean() -> None:
    """Generates a random boolean value."""

    _emit(BooleanRequest())


@app.command()
def integer(
    hexadecimal: bool = typer.Option(False, "--hex", help="Display the number in hexadecimal."),
    minimum: Optional[int] = typer.Option(
        None, "--min", help="The minimum value that can be returned (default: -2**127)."
    ),
    maximum: Optional[int] = typer.Option(
        None, "--max", help="The maximum value that can be returned (default: 2**127 - 1)."
    ),
) -> None:
    """Generates a random signed integer."""

    bounds: dict[str, int] = {}
    if minimum is not None:
        bounds["minimum"] = minimum
    if maximum is not None:
        bounds["maximum"] = maximum
    try:
        request = IntegerRequest(hexadecimal=hexadecimal, **bounds)
    except ValidationError as exc:
        raise typer.BadParameter(_first_error(exc), param_hint="'--min' / '--max'") from exc
    _emit(request)


@app.command()
def digits(
    length: int = typer.Argument(..., min=0, help="The amount of digits to generate."),
    base: int = typer.Option(
        10,
        "--base",
        help="The numerical base of the digits. Must be between 2 and 36.",
    ),
) -> None:
    """Generates random digits with a given length."""

    _emit(DigitsRequest(length=length, base=base))
