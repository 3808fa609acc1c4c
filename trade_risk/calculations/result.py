"""
Tagged calculation results.

UI handlers and other callers that prefer not to catch exceptions can run
any calculation through ``safe_calculate`` and branch on ``success``.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from trade_risk.errors import TradeRiskError


@dataclass(frozen=True)
class CalculationResult:
    """Result of a risk engine calculation."""
    # Computed value (None if the calculation failed)
    value: Any = None
    success: bool = True
    error: Optional[TradeRiskError] = None

    @classmethod
    def ok(cls, value: Any) -> "CalculationResult":
        """Create successful result with the computed value."""
        return cls(value=value, success=True)

    @classmethod
    def failure(cls, error: TradeRiskError) -> "CalculationResult":
        """Create failed result carrying the typed error."""
        return cls(success=False, error=error)

    @property
    def error_kind(self) -> Optional[str]:
        return self.error.kind if self.error is not None else None

    @property
    def error_msg(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None

    def unwrap(self) -> Any:
        """Return the value, re-raising the captured error on failure."""
        if not self.success:
            raise self.error
        return self.value

    def value_or(self, default: Any) -> Any:
        return self.value if self.success else default


def safe_calculate(func: Callable[..., Any], *args: Any, **kwargs: Any) -> CalculationResult:
    """
    Run a calculation and capture typed failures.

    Only TradeRiskError subclasses are captured; anything else is a bug and
    propagates.
    """
    try:
        return CalculationResult.ok(func(*args, **kwargs))
    except TradeRiskError as e:
        return CalculationResult.failure(e)
