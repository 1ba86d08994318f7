"""Tests for fr-FR formatting helpers."""

import pytest

from app.utils.formatting import format_currency, format_number, format_percent

NNBSP = "\u202f"
NBSP = "\u00a0"


class TestFormatNumber:
    @pytest.mark.parametrize(
        "value, decimals, expected",
        [
            (1234567.891, 2, f"1{NNBSP}234{NNBSP}567,89"),
            (999, 0, "999"),
            (1000, 0, f"1{NNBSP}000"),
            (0.5, 1, "0,5"),
            (-2500.4, 0, f"-2{NNBSP}500"),
            (-0.001, 0, "0"),
            (-0.0, 2, "0,00"),
        ],
    )
    def test_format(self, value, decimals, expected):
        assert format_number(value, decimals) == expected


class TestFormatCurrency:
    def test_euro(self):
        assert format_currency(125000) == f"125{NNBSP}000{NBSP}€"

    def test_dollar(self):
        assert format_currency(1500.5, "USD", 2) == f"1{NNBSP}500,50{NBSP}$US"

    def test_unknown_currency_uses_code(self):
        assert format_currency(10, "chf") == f"10{NBSP}CHF"

    def test_negative(self):
        assert format_currency(-42) == f"-42{NBSP}€"


class TestFormatPercent:
    def test_default(self):
        assert format_percent(12.34) == f"12,3{NBSP}%"

    def test_signed_positive(self):
        assert format_percent(9.89, 2, signed=True) == f"+9,89{NBSP}%"

    def test_signed_negative(self):
        assert format_percent(-3.456, 2, signed=True) == f"-3,46{NBSP}%"

    def test_signed_zero(self):
        assert format_percent(0.01, 1, signed=True) == f"0,0{NBSP}%"
