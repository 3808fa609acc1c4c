"""
Typed failure classification for the risk engine.

Every calculation either returns a finite number or raises one of these
errors, so callers never have to special-case NaN or infinity.
"""

from .calculation import (
    TradeRiskError,
    ValidationError,
    InvalidInputError,
    DivisionByZeroError,
)

__all__ = [
    "TradeRiskError",
    "ValidationError",
    "InvalidInputError",
    "DivisionByZeroError",
]
