"""
Display formatting for prices, percentages and large numbers.
"""
from .numbers import (
    format_currency,
    format_percentage,
    format_large_number,
    format_price,
    format_volume,
    parse_currency,
)

__all__ = [
    "format_currency",
    "format_percentage",
    "format_large_number",
    "format_price",
    "format_volume",
    "parse_currency",
]
