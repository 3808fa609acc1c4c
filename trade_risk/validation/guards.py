"""
Input guards for ticker symbols, prices and percentages.

The ``is_valid_*`` predicates answer "is this value acceptable" and return
False for bad values. They raise ValidationError only when called with
something that is not a value of the expected type at all (None, a string
where a number is mandatory, a bool), so callers can tell an invalid value
apart from an invalid call.

The ``require_*`` helpers are used by the calculation modules before any
arithmetic runs.
"""

import math
import re
from typing import Any, Optional

from trade_risk.config.defaults import ValidationParams
from trade_risk.errors import InvalidInputError, ValidationError

TICKER_PATTERN = re.compile(r"^[A-Z]{1,5}$")

_DEFAULTS = ValidationParams()
MIN_PERCENT = _DEFAULTS.min_percent
MAX_PERCENT = _DEFAULTS.max_percent


def _check_numeric(value: Any, field: str) -> float:
    # bool is an int subclass but never a meaningful price or percentage
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(
            f"{field} must be a number, got {type(value).__name__}",
            field=field,
            value=value,
        )
    return float(value)


def is_valid_ticker(ticker: str) -> bool:
    """
    Check ticker symbol format: 1-5 uppercase letters.

    No normalization happens here; run ``sanitize_ticker`` first.
    """
    if not isinstance(ticker, str):
        raise ValidationError(
            f"ticker must be a string, got {type(ticker).__name__}",
            field="ticker",
            value=ticker,
        )
    return TICKER_PATTERN.fullmatch(ticker) is not None


def sanitize_ticker(ticker: str) -> str:
    """Upper-case and trim raw ticker input."""
    if not isinstance(ticker, str):
        raise ValidationError(
            f"ticker must be a string, got {type(ticker).__name__}",
            field="ticker",
            value=ticker,
        )
    return ticker.upper().strip()


def validate_ticker(ticker: str) -> str:
    """
    Return the ticker unchanged if it is well formed.

    Raises:
        ValidationError: If the symbol does not match the ticker format
    """
    if not is_valid_ticker(ticker):
        raise ValidationError(
            f"Invalid ticker symbol: {ticker!r}",
            field="ticker",
            value=ticker,
        )
    return ticker


def parse_ticker(raw: str) -> str:
    """Sanitize raw user input and validate the resulting symbol."""
    return validate_ticker(sanitize_ticker(raw))


def is_valid_price(price: float) -> bool:
    """True iff price is positive and finite."""
    value = _check_numeric(price, "price")
    return math.isfinite(value) and value > 0


def is_valid_percentage(percent: float,
                        min_percent: float = MIN_PERCENT,
                        max_percent: float = MAX_PERCENT) -> bool:
    """True iff percent is finite and within the inclusive bounds."""
    value = _check_numeric(percent, "percent")
    return math.isfinite(value) and min_percent <= value <= max_percent


def require_number(value: Any, field: str) -> float:
    """
    Coerce a mandatory numeric argument to float.

    Raises:
        ValidationError: If value is not numeric or not finite
    """
    number = _check_numeric(value, field)
    if not math.isfinite(number):
        raise ValidationError(
            f"{field} must be finite, got {number}",
            field=field,
            value=value,
        )
    return number


def require_price(value: Any, field: str = "price") -> float:
    """Numeric guard followed by the price predicate."""
    price = require_number(value, field)
    if not is_valid_price(price):
        raise InvalidInputError(
            f"{field} must be greater than zero, got {price}",
            field=field,
            value=value,
        )
    return price


def require_percentage(value: Any, field: str = "percent",
                       min_percent: float = MIN_PERCENT,
                       max_percent: float = MAX_PERCENT) -> float:
    """Numeric guard followed by the percentage predicate."""
    percent = require_number(value, field)
    if not is_valid_percentage(percent, min_percent, max_percent):
        raise InvalidInputError(
            f"{field} must be between {min_percent} and {max_percent}, got {percent}",
            field=field,
            value=value,
        )
    return percent


def require_non_negative(value: Any, field: str) -> float:
    """Numeric guard that also rejects negative values."""
    number = require_number(value, field)
    if number < 0:
        raise InvalidInputError(
            f"{field} must not be negative, got {number}",
            field=field,
            value=value,
        )
    return number


def require_finite_result(value: float, operation: str,
                          operands: Optional[dict[str, float]] = None) -> float:
    """
    Reject a calculation outcome that overflowed or became NaN.

    Inputs are finite by the time this runs, so a non-finite result means
    the inputs are individually valid but their combination is out of range.

    Raises:
        InvalidInputError: If value is NaN or infinite
    """
    if not math.isfinite(value):
        raise InvalidInputError(
            f"{operation} result is not finite ({value})",
            field=operation,
            value=value,
            context={"operation": operation, "operands": operands or {}},
        )
    return value
