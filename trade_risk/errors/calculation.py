"""
Calculation error classifications for the trade risk engine.

All of these are local, deterministic failures: retrying a call with the
same arguments reproduces the same error, so none of them is retried.
"""

from typing import Any, Optional, Dict


class TradeRiskError(Exception):
    """Base class for failures raised by risk and sizing calculations."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True

    @property
    def kind(self) -> str:
        """Short machine-readable error kind."""
        return type(self).__name__


class ValidationError(TradeRiskError):
    """Malformed or out-of-domain input, e.g. non-numeric or non-finite values."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class InvalidInputError(TradeRiskError):
    """Input of the right type that violates a precondition."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class DivisionByZeroError(TradeRiskError):
    """Mathematically undefined operation such as a zero base value."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 operands: Optional[Dict[str, float]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.operands = operands or {}
