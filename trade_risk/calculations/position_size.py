"""Dollar/share conversions and Kelly criterion sizing"""

import math

from trade_risk.errors import DivisionByZeroError, InvalidInputError
from trade_risk.validation.guards import (
    require_finite_result,
    require_non_negative,
    require_number,
    require_price,
)


def shares_from_dollars(dollar_amount: float, price_per_share: float) -> int:
    """
    Calculate whole shares purchasable for a dollar amount

    shares = floor(dollars / price)
    """
    dollars = require_non_negative(dollar_amount, "dollar_amount")
    price = require_price(price_per_share, "price_per_share")
    shares = require_finite_result(dollars / price, "shares_from_dollars",
                                   {"dollar_amount": dollars, "price_per_share": price})
    return math.floor(shares)


def dollars_from_shares(shares: float, price_per_share: float) -> float:
    """Dollar value of a share count: shares * price"""
    shares = require_non_negative(shares, "shares")
    price = require_number(price_per_share, "price_per_share")
    return require_finite_result(shares * price, "dollars_from_shares",
                                 {"shares": shares, "price_per_share": price})


def kelly_fraction(win_rate: float, avg_win: float, avg_loss: float) -> float:
    """
    Calculate the Kelly criterion fraction of capital to risk

    b = avg_win / avg_loss, p = win_rate, q = 1 - p
    f = (b * p - q) / b

    The raw value is returned unclamped. A negative fraction means the
    inputs have no edge and the trade should not be taken; a fraction above
    1 means the inputs imply leverage. Capping is left to the caller.

    Args:
        win_rate: Probability of a winning trade, 0 to 1
        avg_win: Average size of a winning trade
        avg_loss: Average size of a losing trade

    Returns:
        Raw Kelly fraction

    Raises:
        InvalidInputError: If win_rate is outside [0, 1]
        DivisionByZeroError: If avg_loss or avg_win is zero
    """
    p = require_number(win_rate, "win_rate")
    avg_win = require_number(avg_win, "avg_win")
    avg_loss = require_number(avg_loss, "avg_loss")

    if not 0 <= p <= 1:
        raise InvalidInputError(
            f"win_rate must be between 0 and 1, got {p}",
            field="win_rate",
            value=win_rate,
        )

    if avg_loss == 0:
        raise DivisionByZeroError(
            "Kelly fraction is undefined for a zero average loss",
            operation="kelly_fraction",
            operands={"avg_win": avg_win, "avg_loss": avg_loss},
        )

    b = avg_win / avg_loss
    if b == 0:
        raise DivisionByZeroError(
            "Kelly fraction is undefined for a zero win/loss ratio",
            operation="kelly_fraction",
            operands={"avg_win": avg_win, "avg_loss": avg_loss},
        )

    q = 1 - p
    return require_finite_result((b * p - q) / b, "kelly_fraction",
                                 {"avg_win": avg_win, "avg_loss": avg_loss})
