"""
Calculations module.

Pure price, risk/reward and position sizing math. Every function validates
its inputs before doing arithmetic and raises a typed error instead of
returning NaN or infinity.
"""

from .price import (
    percent_change,
    price_change,
    target_price_from_percent,
    stop_price_from_percent,
)
from .risk_reward import (
    risk_reward_ratio,
    risk_amount,
    reward_amount,
    position_size_from_risk,
)
from .position_size import (
    shares_from_dollars,
    dollars_from_shares,
    kelly_fraction,
)
from .result import CalculationResult, safe_calculate

__all__ = [
    # Price math
    "percent_change",
    "price_change",
    "target_price_from_percent",
    "stop_price_from_percent",
    # Risk/reward math
    "risk_reward_ratio",
    "risk_amount",
    "reward_amount",
    "position_size_from_risk",
    # Position sizing
    "shares_from_dollars",
    "dollars_from_shares",
    "kelly_fraction",
    # Results
    "CalculationResult",
    "safe_calculate",
]
