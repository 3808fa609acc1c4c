"""
Trade plan analysis module.

Direction handling, level ordering checks and plan-level risk/reward and
position sizing built on the pure calculations.
"""

from .analysis import (
    PlanViolation,
    PositionPlan,
    TradeDirection,
    check_plan_levels,
    direction_from_sentiment,
    entry_reference,
    parse_direction,
    plan_risk_reward,
    size_plan,
    with_computed_risk_reward,
)

__all__ = [
    "PlanViolation",
    "PositionPlan",
    "TradeDirection",
    "check_plan_levels",
    "direction_from_sentiment",
    "entry_reference",
    "parse_direction",
    "plan_risk_reward",
    "size_plan",
    "with_computed_risk_reward",
]
