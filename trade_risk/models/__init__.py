"""
Data models module.

Immutable data structures for trade plans, AI insights, tickers and
watchlists. Follows functional programming principles with frozen
dataclasses: updates return new copies.
"""

from .ticker import Ticker, TickerSearchResult
from .trade import (
    AIInsight,
    EntryRange,
    Playbook,
    Sentiment,
    Timeframe,
    TradePlan,
    TradeSetup,
)
from .watchlist import ColorFlag, Watchlist, WatchlistFolder, WatchlistStock

__all__ = [
    "Ticker",
    "TickerSearchResult",
    "AIInsight",
    "EntryRange",
    "Playbook",
    "Sentiment",
    "Timeframe",
    "TradePlan",
    "TradeSetup",
    "ColorFlag",
    "Watchlist",
    "WatchlistFolder",
    "WatchlistStock",
]
