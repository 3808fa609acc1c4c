"""Number formatting for risk badges, quotes and watchlist rows"""

import re

from trade_risk.errors import ValidationError

_ABBREVIATIONS = (
    (1_000_000_000_000, "T"),
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
)


def _trim(value: float, decimals: int = 2) -> str:
    # 1.50 -> "1.5", 2.00 -> "2"
    text = f"{value:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_currency(value: float, decimals: int = 2) -> str:
    """Format a number as dollars, e.g. 178.5 -> "$178.50"."""
    return f"${value:.{decimals}f}"


def format_percentage(value: float, decimals: int = 2) -> str:
    """Format a signed percentage, gains get a leading "+"."""
    sign = "+" if value > 0 else ""
    return f"{sign}{value:.{decimals}f}%"


def format_large_number(value: float) -> str:
    """
    Abbreviate large numbers with K, M, B or T

    1_500_000 -> "1.5M", 2_340_000_000 -> "2.34B"
    """
    for threshold, suffix in _ABBREVIATIONS:
        if value >= threshold:
            return f"{_trim(value / threshold)}{suffix}"
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_price(value: float) -> str:
    """Format a price with precision matching its magnitude."""
    if value < 1:
        return f"{value:.4f}"
    if value < 10:
        return f"{value:.3f}"
    return f"{value:.2f}"


def format_volume(value: float) -> str:
    return format_large_number(value)


def parse_currency(value: str) -> float:
    """
    Parse a currency string such as "$1,234.50" back to a number.

    Raises:
        ValidationError: If no number can be recovered from the string
    """
    cleaned = re.sub(r"[^0-9.\-]+", "", value)
    try:
        return float(cleaned)
    except ValueError:
        raise ValidationError(
            f"Cannot parse currency value {value!r}",
            field="currency",
            value=value,
        ) from None
