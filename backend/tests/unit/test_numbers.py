"""Tests for half-up rounding."""

import math

import pytest

from app.utils.numbers import round_half_up


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value, expected",
        [(18.5, 19), (0.5, 1), (2.5, 3), (2.4, 2), (-2.5, -2), (-2.6, -3)],
    )
    def test_integers(self, value, expected):
        result = round_half_up(value)
        assert result == expected
        assert isinstance(result, int)

    def test_one_decimal(self):
        assert round_half_up(12.25, 1) == 12.3
        assert round_half_up(33.333, 1) == 33.3

    def test_infinity_overflows(self):
        with pytest.raises(OverflowError):
            round_half_up(math.inf)
