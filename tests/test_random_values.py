"""Tests for random value generation."""

import random

import pytest
from pydantic import ValidationError

from core.domain.exit_codes import ExitCode
from core.domain.models import I128_MAX, I128_MIN, BooleanRequest, DigitsRequest, IntegerRequest
from core.services.random_values import (
    DIGIT_ALPHABET,
    InvalidBaseError,
    check_base,
    format_integer,
    random_digits,
    random_integer,
    render,
)


def _bound_pairs(count: int = 60) -> list[tuple[int, int]]:
    picker = random.Random(20240501)
    pairs = [(0, 0), (I128_MIN, I128_MIN), (I128_MAX, I128_MAX), (I128_MIN, I128_MAX), (-1, 1)]
    while len(pairs) < count:
        a = picker.randint(I128_MIN, I128_MAX)
        b = picker.randint(I128_MIN, I128_MAX)
        if picker.random() < 0.2:
            b = a
        pairs.append((min(a, b), max(a, b)))
    return pairs


class TestDigits:
    @pytest.mark.parametrize("base", range(2, 37))
    @pytest.mark.parametrize("length", [0, 1, 7, 64])
    def test_length_and_alphabet(self, base, length):
        text = random_digits(random.Random(base * 100 + length), length, base)
        assert len(text) == length
        allowed = set(DIGIT_ALPHABET[:base])
        assert set(text) <= allowed

    def test_base_36_uses_lowercase_letters(self):
        text = random_digits(random.Random(3), 2000, 36)
        assert set(text) == set("0123456789abcdefghijklmnopqrstuvwxyz")

    @pytest.mark.parametrize(
        "base, message",
        [
            (0, "Numerical base was zero"),
            (1, "Numerical base was below 2"),
            (-4, "Numerical base was below 2"),
            (37, "Numerical base was above 36"),
            (1000, "Numerical base was above 36"),
        ],
    )
    def test_invalid_base_rejected_without_consuming_randomness(self, base, message):
        rng = random.Random(11)
        before = rng.getstate()
        with pytest.raises(InvalidBaseError, match=message) as excinfo:
            random_digits(rng, 8, base)
        assert excinfo.value.exit_code is ExitCode.INVALID_BASE
        assert rng.getstate() == before

    def test_check_base_returns_valid_base(self):
        assert check_base(2) == 2
        assert check_base(36) == 36


class TestInteger:
    @pytest.mark.parametrize("minimum, maximum", _bound_pairs())
    def test_value_within_bounds(self, minimum, maximum):
        rng = random.Random(minimum ^ maximum)
        for _ in range(5):
            value = random_integer(rng, minimum, maximum)
            assert minimum <= value <= maximum

    def test_equal_bounds(self):
        assert random_integer(random.Random(), 42, 42) == 42

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "0x0"),
            (255, "0xFF"),
            (-1, "0x" + "F" * 32),
            (I128_MIN, "0x8" + "0" * 31),
            (I128_MAX, "0x7" + "F" * 31),
        ],
    )
    def test_hex_rendering(self, value, expected):
        assert format_integer(value, hexadecimal=True) == expected

    def test_decimal_rendering(self):
        assert format_integer(-17) == "-17"


class TestRequests:
    def test_integer_defaults_span_128_bits(self):
        request = IntegerRequest()
        assert request.minimum == I128_MIN
        assert request.maximum == I128_MAX

    def test_integer_rejects_inverted_bounds(self):
        with pytest.raises(ValidationError):
            IntegerRequest(minimum=5, maximum=4)

    def test_integer_rejects_out_of_range_bounds(self):
        with pytest.raises(ValidationError):
            IntegerRequest(maximum=I128_MAX + 1)

    def test_digits_rejects_negative_length(self):
        with pytest.raises(ValidationError):
            DigitsRequest(length=-1)


class TestRender:
    def test_boolean(self):
        seen = {render(BooleanRequest(), random.Random(seed)) for seed in range(40)}
        assert seen == {"true", "false"}

    def test_zero_length_is_a_no_op_even_with_bad_base(self):
        rng = random.Random(5)
        before = rng.getstate()
        assert render(DigitsRequest(length=0, base=0), rng) is None
        assert rng.getstate() == before

    def test_digits_default_base_ten(self):
        text = render(DigitsRequest(length=12), random.Random(9))
        assert text is not None and len(text) == 12 and text.isdigit()

    def test_integer_hex(self):
        assert render(IntegerRequest(minimum=-1, maximum=-1, hexadecimal=True), random.Random()) == "0x" + "F" * 32
