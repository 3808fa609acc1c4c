"""Percent change, price change and percentage-derived target/stop prices"""

from trade_risk.errors import DivisionByZeroError
from trade_risk.validation.guards import (
    MAX_PERCENT,
    MIN_PERCENT,
    require_number,
    require_finite_result,
    require_percentage,
    require_price,
)


def percent_change(old_value: float, new_value: float) -> float:
    """
    Calculate percentage change

    change = (new - old) / old * 100

    Args:
        old_value: Base value
        new_value: Current value

    Returns:
        Percentage change

    Raises:
        DivisionByZeroError: If old_value is zero
        InvalidInputError: If the change overflows
    """
    old = require_number(old_value, "old_value")
    new = require_number(new_value, "new_value")

    if old == 0:
        raise DivisionByZeroError(
            "Percent change is undefined for a zero base value",
            operation="percent_change",
            operands={"old_value": old, "new_value": new},
        )

    return require_finite_result((new - old) / old * 100, "percent_change",
                                 {"old_value": old, "new_value": new})


def price_change(old_price: float, new_price: float) -> float:
    """Absolute price change, new - old."""
    old = require_number(old_price, "old_price")
    new = require_number(new_price, "new_price")
    return require_finite_result(new - old, "price_change", {"old_price": old, "new_price": new})


def target_price_from_percent(current_price: float, percent_gain: float,
                              min_percent: float = MIN_PERCENT,
                              max_percent: float = MAX_PERCENT) -> float:
    """
    Calculate target price from a percentage gain

    target = current * (1 + gain / 100)
    """
    price = require_price(current_price, "current_price")
    gain = require_percentage(percent_gain, "percent_gain", min_percent, max_percent)
    return require_finite_result(price * (1 + gain / 100), "target_price_from_percent",
                                 {"current_price": price, "percent_gain": gain})


def stop_price_from_percent(entry_price: float, percent_loss: float,
                            min_percent: float = MIN_PERCENT,
                            max_percent: float = MAX_PERCENT) -> float:
    """
    Calculate stop price from a percentage loss

    stop = entry * (1 - loss / 100)
    """
    price = require_price(entry_price, "entry_price")
    loss = require_percentage(percent_loss, "percent_loss", min_percent, max_percent)
    return require_finite_result(price * (1 - loss / 100), "stop_price_from_percent",
                                 {"entry_price": price, "percent_loss": loss})
