"""Pytest configuration and shared fixtures."""

import pytest

from trade_risk.models import (
    AIInsight,
    ColorFlag,
    EntryRange,
    Playbook,
    Sentiment,
    Timeframe,
    TradePlan,
    TradeSetup,
    Watchlist,
    WatchlistFolder,
    WatchlistStock,
)


@pytest.fixture
def long_plan() -> TradePlan:
    """Swing long plan with consistent levels."""
    return TradePlan(
        setup="Pullback to Support",
        entry=EntryRange(min=175.00, max=177.00),
        targets=(182.00, 185.50),
        stop=172.50,
        risk_reward=3.4,
        confidence=78,
        time_horizon="1-3 weeks",
        playbook=Playbook(
            best_case="Bounce from 175 support, momentum back to ATH at 185.50",
            base_case="Rally to 182 resistance, consolidate before next leg",
            invalidation="Close below 172.50 or breakdown of uptrend channel",
        ),
    )


@pytest.fixture
def short_plan() -> TradePlan:
    """Intraday short plan with consistent levels."""
    return TradePlan(
        setup="Mean Reversion Fade",
        entry=EntryRange(min=241.00, max=243.00),
        targets=(238.50, 236.00),
        stop=245.50,
        risk_reward=2.1,
        confidence=65,
        time_horizon="Intraday",
        playbook=Playbook(
            best_case="Fade the gap up, revert to VWAP at 236",
            base_case="Scalp to 238.50 and reassess",
            invalidation="Break above 245.50 with momentum",
        ),
    )


@pytest.fixture
def bullish_insight() -> AIInsight:
    return AIInsight(
        sentiment=Sentiment.BULLISH,
        tldr=("Uptrend intact", "Support holding"),
        drivers=("Services growth",),
        risks=("Macro slowdown",),
        rating=7.8,
    )


@pytest.fixture
def long_setup(long_plan, bullish_insight) -> TradeSetup:
    return TradeSetup(
        ticker="AAPL",
        timeframe=Timeframe.SWING,
        plan=long_plan,
        insight=bullish_insight,
    )


@pytest.fixture
def sample_watchlist() -> Watchlist:
    """Two folders, the first holding two stocks."""
    stocks = (
        WatchlistStock(
            id="stock-example-1",
            symbol="AAPL",
            name="Apple Inc.",
            price=178.25,
            change=2.15,
            change_percent=1.22,
            color_flag=ColorFlag.GREEN,
            added_at=1_700_000_000_000,
        ),
        WatchlistStock(
            id="stock-example-2",
            symbol="TSLA",
            name="Tesla Inc.",
            price=242.84,
            change=-3.21,
            change_percent=-1.30,
            color_flag=ColorFlag.RED,
            added_at=1_700_000_100_000,
        ),
    )
    return Watchlist(folders=(
        WatchlistFolder(id="default", name="My Watchlist", stocks=stocks,
                        created_at=1_700_000_000_000, order=0),
        WatchlistFolder(id="tech", name="Tech", created_at=1_700_000_200_000, order=1),
    ))
