"""
Validation module.

Guards for ticker symbols, prices and percentages shared by every
calculation in the engine.
"""

from .guards import (
    is_valid_ticker,
    sanitize_ticker,
    validate_ticker,
    parse_ticker,
    is_valid_price,
    is_valid_percentage,
    require_number,
    require_price,
    require_percentage,
    require_non_negative,
    require_finite_result,
)

__all__ = [
    "is_valid_ticker",
    "sanitize_ticker",
    "validate_ticker",
    "parse_ticker",
    "is_valid_price",
    "is_valid_percentage",
    "require_number",
    "require_price",
    "require_percentage",
    "require_non_negative",
    "require_finite_result",
]
