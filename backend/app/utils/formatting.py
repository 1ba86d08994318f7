"""fr-FR number, currency and percent formatting."""

from typing import Dict

NARROW_NBSP = "\u202f"  # thousands separator
NBSP = "\u00a0"  # before unit symbols

CURRENCY_SYMBOLS: Dict[str, str] = {
    "EUR": "€",
    "USD": "$US",
}


def _rounds_to_zero(value: float, decimals: int) -> bool:
    return round(abs(value), decimals) == 0


def format_number(value: float, decimals: int = 0) -> str:
    """``1234567.891, 2`` -> ``"1 234 567,89"`` (narrow no-break spaces)."""
    text = f"{abs(value):,.{decimals}f}".replace(",", NARROW_NBSP).replace(".", ",")
    if value < 0 and not _rounds_to_zero(value, decimals):
        return f"-{text}"
    return text


def format_currency(value: float, currency: str = "EUR", decimals: int = 0) -> str:
    code = currency.upper()
    symbol = CURRENCY_SYMBOLS.get(code, code)
    return f"{format_number(value, decimals)}{NBSP}{symbol}"


def format_percent(value: float, decimals: int = 1, signed: bool = False) -> str:
    text = format_number(value, decimals)
    if signed and value > 0 and not _rounds_to_zero(value, decimals):
        text = f"+{text}"
    return f"{text}{NBSP}%"
