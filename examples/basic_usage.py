#!/usr/bin/env python3
"""
Basic Usage Example - Trade Risk Engine

This script demonstrates the basic usage of the trade risk engine. It shows
how to:
- Initialize the engine
- Build a trade setup
- Evaluate risk/reward and position size
- Handle typed failures instead of NaN or infinity

Run: python examples/basic_usage.py
"""

from trade_risk.engine import RiskEngine
from trade_risk.formatting import format_currency, format_percentage
from trade_risk.models import (
    AIInsight,
    EntryRange,
    Playbook,
    Sentiment,
    Timeframe,
    TradePlan,
    TradeSetup,
)


def create_sample_setup() -> TradeSetup:
    """Create a sample swing setup."""
    plan = TradePlan(
        setup="Pullback to Support",
        entry=EntryRange(min=175.00, max=177.00),
        targets=(182.00, 185.50),
        stop=172.50,
        risk_reward=0.0,
        confidence=78,
        time_horizon="1-3 weeks",
        playbook=Playbook(
            best_case="Bounce from 175 support, momentum back to ATH at 185.50",
            base_case="Rally to 182 resistance, consolidate before next leg",
            invalidation="Close below 172.50 or breakdown of uptrend channel",
        ),
    )
    insight = AIInsight(
        sentiment=Sentiment.BULLISH,
        tldr=("Uptrend intact", "Support holding"),
        drivers=("Services growth",),
        risks=("Macro slowdown",),
        rating=7.8,
    )
    return TradeSetup(ticker="AAPL", timeframe=Timeframe.SWING, plan=plan, insight=insight)


def main():
    """Main demonstration function."""
    print("🚀 Trade Risk Engine - Basic Usage Demo")
    print("=" * 60)

    engine = RiskEngine(setup_logging=True)
    setup = create_sample_setup()

    evaluation = engine.evaluate_setup(setup, account_size=25_000)
    if not evaluation.success:
        print(f"❌ Evaluation failed: {evaluation.error}")
        return

    position = evaluation.position
    print(f"📊 {evaluation.ticker} ({evaluation.timeframe.value}, {evaluation.direction.value})")
    print(f"  Consistent levels: {evaluation.is_consistent}")
    print(f"  Risk/Reward: {evaluation.risk_reward:.2f}")
    print(f"  Shares: {position.shares}")
    print(f"  Position value: {format_currency(position.position_value)}")
    print(f"  Risk: {format_currency(position.risk_amount)}")
    for index, reward in enumerate(position.reward_amounts, start=1):
        print(f"  Reward at target {index}: {format_currency(reward)}")

    change = engine.percent_change(175.0, 182.0)
    print(f"  Move to first target: {format_percentage(change.value)}")

    print("\n⚠️  Undefined calculations return typed failures:")
    ratio = engine.ratio(entry=100, target=110, stop=100)
    print(f"  ratio(100, 110, 100) -> {ratio.error_kind}: {ratio.error_msg}")

    kelly = engine.kelly(win_rate=0.6, avg_win=1.5, avg_loss=1.0)
    print(f"  Kelly fraction: {kelly.value:.3f}")


if __name__ == "__main__":
    main()
