"""Random value generation.

All functions take an explicit `random.Random` instance. The CLI builds one
per invocation (seeded from OS entropy); tests pass a seeded one. Nothing
here is suitable for secrets.
"""

from __future__ import annotations

import random
import string

from core.domain.exit_codes import ExitCode
from core.domain.models import BooleanRequest, DigitsRequest, IntegerRequest, RandomRequest

DIGIT_ALPHABET = string.digits + string.ascii_lowercase
MIN_BASE = 2
MAX_BASE = len(DIGIT_ALPHABET)

_U128_MASK = (1 << 128) - 1


class InvalidBaseError(ValueError):
    """Raised when a digit base falls outside 2..36."""

    exit_code = ExitCode.INVALID_BASE


def check_base(base: int) -> int:
    if base == 0:
        raise InvalidBaseError("Numerical base was zero")
    if base < MIN_BASE:
        raise InvalidBaseError("Numerical base was below 2")
    if base > MAX_BASE:
        raise InvalidBaseError("Numerical base was above 36")
    return base


def random_boolean(rng: random.Random) -> bool:
    return rng.random() < 0.5


def random_integer(rng: random.Random, minimum: int, maximum: int) -> int:
    """Uniform draw from the inclusive range [minimum, maximum]."""

    return rng.randint(minimum, maximum)


def format_integer(value: int, *, hexadecimal: bool = False) -> str:
    """Render an integer; hex uses the 128-bit two's complement, upper case."""

    if hexadecimal:
        return f"0x{value & _U128_MASK:X}"
    return str(value)


def random_digits(rng: random.Random, length: int, base: int = 10) -> str:
    """Return `length` random digits in `base`.

    The base is validated before any randomness is drawn.
    """

    alphabet = DIGIT_ALPHABET[: check_base(base)]
    return "".join(rng.choice(alphabet) for _ in range(length))


def render(request: RandomRequest, rng: random.Random) -> str | None:
    """Produce the text to print for a request, or None when there is nothing to print.

    Raises `InvalidBaseError` for a digits request with a bad base.
    """

    if isinstance(request, BooleanRequest):
        return "true" if random_boolean(rng) else "false"

    if isinstance(request, IntegerRequest):
        value = random_integer(rng, request.minimum, request.maximum)
        return format_integer(value, hexadecimal=request.hexadecimal)

    if isinstance(request, DigitsRequest):
        if request.length == 0:
            return None
        return random_digits(rng, request.length, request.base)

    raise TypeError(f"Unsupported random request: {type(request).__name__}")
