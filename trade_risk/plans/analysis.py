"""
Trade plan level checks and plan-level risk figures.

Direction is never inferred from the price levels themselves. It is either
passed explicitly or derived from the sentiment of the accompanying AI
insight, and the level ordering is then checked against it:

    long:  stop < entry.min <= entry.max < targets[0] <= ... <= targets[-1]
    short: stop > entry.max >= entry.min > targets[0] >= ... >= targets[-1]
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Union

from trade_risk.calculations.position_size import dollars_from_shares
from trade_risk.calculations.risk_reward import (
    position_size_from_risk,
    reward_amount,
    risk_amount,
    risk_reward_ratio,
)
from trade_risk.config.validation import ENTRY_REFERENCE_MODES
from trade_risk.errors import InvalidInputError
from trade_risk.models.trade import Sentiment, TradePlan


class TradeDirection(str, Enum):
    """Side of a trade."""
    LONG = "long"
    SHORT = "short"


@dataclass(frozen=True)
class PlanViolation:
    """A broken level relationship in a trade plan."""
    field: str
    message: str
    value: Any


@dataclass(frozen=True)
class PositionPlan:
    """Share count and dollar figures for sizing a plan against an account."""
    shares: int
    entry_price: float
    position_value: float
    risk_amount: float
    reward_amounts: tuple[float, ...]
    risk_reward: float


def parse_direction(direction: Union[TradeDirection, str]) -> TradeDirection:
    """
    Coerce a direction value.

    Raises:
        InvalidInputError: For anything other than long or short
    """
    try:
        return TradeDirection(direction)
    except ValueError:
        raise InvalidInputError(
            f"Unknown trade direction {direction!r}",
            field="direction",
            value=direction,
        ) from None


def direction_from_sentiment(sentiment: Union[Sentiment, str]) -> TradeDirection:
    """
    Map an explicit sentiment to a trade direction.

    Raises:
        InvalidInputError: For a neutral or unknown sentiment
    """
    try:
        sentiment = Sentiment(sentiment)
    except ValueError:
        raise InvalidInputError(
            f"Unknown sentiment {sentiment!r}",
            field="sentiment",
            value=sentiment,
        ) from None

    if sentiment == Sentiment.BULLISH:
        return TradeDirection.LONG
    if sentiment == Sentiment.BEARISH:
        return TradeDirection.SHORT

    raise InvalidInputError(
        "Neutral sentiment does not imply a trade direction",
        field="sentiment",
        value=sentiment.value,
    )


def check_plan_levels(plan: TradePlan, direction: TradeDirection) -> list[PlanViolation]:
    """
    Check entry/target/stop ordering for the given direction.

    Returns:
        One PlanViolation per broken inequality, empty if the plan is consistent
    """
    violations = []
    direction = parse_direction(direction)
    long = direction == TradeDirection.LONG

    if long and not plan.stop < plan.entry.min:
        violations.append(PlanViolation(
            field="stop",
            message=f"Long stop must be below entry min {plan.entry.min}",
            value=plan.stop
        ))
    elif not long and not plan.stop > plan.entry.max:
        violations.append(PlanViolation(
            field="stop",
            message=f"Short stop must be above entry max {plan.entry.max}",
            value=plan.stop
        ))

    first = plan.first_target
    if long and not plan.entry.max < first:
        violations.append(PlanViolation(
            field="targets[0]",
            message=f"Long first target must be above entry max {plan.entry.max}",
            value=first
        ))
    elif not long and not plan.entry.min > first:
        violations.append(PlanViolation(
            field="targets[0]",
            message=f"Short first target must be below entry min {plan.entry.min}",
            value=first
        ))

    for index in range(1, len(plan.targets)):
        previous, current = plan.targets[index - 1], plan.targets[index]
        if long and current < previous:
            violations.append(PlanViolation(
                field=f"targets[{index}]",
                message=f"Long targets must not decrease ({current} < {previous})",
                value=current
            ))
        elif not long and current > previous:
            violations.append(PlanViolation(
                field=f"targets[{index}]",
                message=f"Short targets must not increase ({current} > {previous})",
                value=current
            ))

    return violations


def entry_reference(plan: TradePlan, mode: str = "midpoint") -> float:
    """Pick the entry price used for plan-level math."""
    if mode == "midpoint":
        return plan.entry.midpoint
    if mode == "min":
        return plan.entry.min
    if mode == "max":
        return plan.entry.max

    raise InvalidInputError(
        f"Entry reference must be one of {', '.join(ENTRY_REFERENCE_MODES)}",
        field="entry_reference",
        value=mode,
    )


def _target_at(plan: TradePlan, target_index: int) -> float:
    if not 0 <= target_index < len(plan.targets):
        raise InvalidInputError(
            f"Target index {target_index} out of range for {len(plan.targets)} targets",
            field="target_index",
            value=target_index,
        )
    return plan.targets[target_index]


def plan_risk_reward(plan: TradePlan, target_index: int = 0,
                     entry_mode: str = "midpoint") -> float:
    """Risk/reward ratio of a plan for one of its targets."""
    entry = entry_reference(plan, entry_mode)
    return risk_reward_ratio(entry, _target_at(plan, target_index), plan.stop)


def with_computed_risk_reward(plan: TradePlan, target_index: int = 0,
                              entry_mode: str = "midpoint",
                              decimals: int = 2) -> TradePlan:
    """Return a copy of the plan with risk_reward recomputed from its levels."""
    ratio = plan_risk_reward(plan, target_index, entry_mode)
    return replace(plan, risk_reward=round(ratio, decimals))


def size_plan(plan: TradePlan, account_size: float, risk_percent: float,
              entry_mode: str = "midpoint") -> PositionPlan:
    """
    Size a plan so that hitting the stop loses at most risk_percent of the account.

    Raises:
        DivisionByZeroError: If the reference entry equals the stop
        InvalidInputError: For a negative account size or risk percent
    """
    entry = entry_reference(plan, entry_mode)
    shares = position_size_from_risk(account_size, risk_percent, entry, plan.stop)

    return PositionPlan(
        shares=shares,
        entry_price=entry,
        position_value=dollars_from_shares(shares, entry),
        risk_amount=risk_amount(entry, plan.stop, shares),
        reward_amounts=tuple(reward_amount(entry, target, shares) for target in plan.targets),
        risk_reward=risk_reward_ratio(entry, plan.first_target, plan.stop),
    )
