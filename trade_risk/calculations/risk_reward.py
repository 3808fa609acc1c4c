"""Risk amount, reward amount, risk/reward ratio and risk-based position size"""

import math

from trade_risk.errors import DivisionByZeroError
from trade_risk.validation.guards import (
    require_finite_result,
    require_non_negative,
    require_number,
)


def _risk_per_share(entry: float, stop: float, operation: str) -> float:
    risk = abs(entry - stop)
    if risk == 0:
        raise DivisionByZeroError(
            f"{operation} is undefined when entry equals stop ({entry})",
            operation=operation,
            operands={"entry": entry, "stop": stop},
        )
    return require_finite_result(risk, operation, {"entry": entry, "stop": stop})


def risk_reward_ratio(entry: float, target: float, stop: float) -> float:
    """
    Calculate risk/reward ratio

    ratio = |target - entry| / |entry - stop|

    Args:
        entry: Entry price
        target: Profit-taking price
        stop: Loss-cutting price

    Returns:
        Reward distance divided by risk distance

    Raises:
        DivisionByZeroError: If entry equals stop
        InvalidInputError: If the ratio overflows
    """
    entry = require_number(entry, "entry")
    target = require_number(target, "target")
    stop = require_number(stop, "stop")

    risk = _risk_per_share(entry, stop, "risk_reward_ratio")
    return require_finite_result(abs(target - entry) / risk, "risk_reward_ratio",
                                 {"entry": entry, "target": target, "stop": stop})


def risk_amount(entry: float, stop: float, shares: float) -> float:
    """Dollar risk of a position: |entry - stop| * shares"""
    entry = require_number(entry, "entry")
    stop = require_number(stop, "stop")
    shares = require_non_negative(shares, "shares")
    return require_finite_result(abs(entry - stop) * shares, "risk_amount",
                                 {"entry": entry, "stop": stop, "shares": shares})


def reward_amount(entry: float, target: float, shares: float) -> float:
    """Dollar reward of a position: |target - entry| * shares"""
    entry = require_number(entry, "entry")
    target = require_number(target, "target")
    shares = require_non_negative(shares, "shares")
    return require_finite_result(abs(target - entry) * shares, "reward_amount",
                                 {"entry": entry, "target": target, "shares": shares})


def position_size_from_risk(account_size: float, risk_percent: float,
                            entry: float, stop: float) -> int:
    """
    Calculate share count from an account risk budget

    budget = account_size * risk_percent / 100
    shares = floor(budget / |entry - stop|)

    Fractional shares are floored so the position never exceeds the budget.

    Args:
        account_size: Account equity
        risk_percent: Percent of the account to risk on the trade
        entry: Entry price
        stop: Stop price

    Returns:
        Non-negative whole share count

    Raises:
        InvalidInputError: If account_size or risk_percent is negative, or the share
            count overflows
        DivisionByZeroError: If entry equals stop
    """
    account_size = require_non_negative(account_size, "account_size")
    risk_percent = require_non_negative(risk_percent, "risk_percent")
    entry = require_number(entry, "entry")
    stop = require_number(stop, "stop")

    risk_per_share = _risk_per_share(entry, stop, "position_size_from_risk")
    budget = account_size * (risk_percent / 100)
    shares = require_finite_result(budget / risk_per_share, "position_size_from_risk",
                                   {"account_size": account_size, "risk_percent": risk_percent,
                                    "entry": entry, "stop": stop})
    return math.floor(shares)
