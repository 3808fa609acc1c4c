"""Tests for plan direction, level checks and plan-level sizing"""

from dataclasses import replace

import pytest

from trade_risk.errors import DivisionByZeroError, InvalidInputError
from trade_risk.models import EntryRange, Sentiment
from trade_risk.plans import (
    TradeDirection,
    check_plan_levels,
    direction_from_sentiment,
    entry_reference,
    parse_direction,
    plan_risk_reward,
    size_plan,
    with_computed_risk_reward,
)


class TestDirectionFromSentiment:
    """Test direction mapping"""

    def test_bullish_is_long(self):
        assert direction_from_sentiment(Sentiment.BULLISH) == TradeDirection.LONG

    def test_bearish_is_short(self):
        assert direction_from_sentiment("bearish") == TradeDirection.SHORT

    def test_neutral_has_no_direction(self):
        with pytest.raises(InvalidInputError) as exc_info:
            direction_from_sentiment(Sentiment.NEUTRAL)
        assert exc_info.value.field == "sentiment"

    def test_unknown_sentiment(self):
        with pytest.raises(InvalidInputError):
            direction_from_sentiment("euphoric")


class TestParseDirection:
    """Test direction coercion"""

    def test_accepts_enum_and_value(self):
        assert parse_direction(TradeDirection.SHORT) == TradeDirection.SHORT
        assert parse_direction("long") == TradeDirection.LONG

    def test_unknown_direction(self):
        with pytest.raises(InvalidInputError) as exc_info:
            parse_direction("sideways")
        assert exc_info.value.field == "direction"
        assert exc_info.value.value == "sideways"

    def test_check_plan_levels_rejects_unknown_direction(self, long_plan):
        with pytest.raises(InvalidInputError):
            check_plan_levels(long_plan, "sideways")


class TestCheckPlanLevels:
    """Test level ordering for both directions"""

    def test_consistent_long_plan(self, long_plan):
        assert check_plan_levels(long_plan, TradeDirection.LONG) == []

    def test_consistent_short_plan(self, short_plan):
        assert check_plan_levels(short_plan, TradeDirection.SHORT) == []

    def test_long_plan_read_as_short(self, long_plan):
        violations = check_plan_levels(long_plan, TradeDirection.SHORT)
        fields = [v.field for v in violations]
        assert "stop" in fields
        assert "targets[0]" in fields
        assert "targets[1]" in fields

    def test_long_stop_inside_entry(self, long_plan):
        plan = replace(long_plan, stop=176.0)
        violations = check_plan_levels(plan, TradeDirection.LONG)
        assert len(violations) == 1
        assert violations[0].field == "stop"
        assert violations[0].value == 176.0

    def test_long_stop_equal_to_entry_min(self, long_plan):
        plan = replace(long_plan, stop=175.0)
        assert [v.field for v in check_plan_levels(plan, "long")] == ["stop"]

    def test_long_first_target_inside_entry(self, long_plan):
        plan = replace(long_plan, targets=(177.0, 185.5))
        assert [v.field for v in check_plan_levels(plan, TradeDirection.LONG)] == ["targets[0]"]

    def test_long_targets_decreasing(self, long_plan):
        plan = replace(long_plan, targets=(185.5, 182.0))
        assert [v.field for v in check_plan_levels(plan, TradeDirection.LONG)] == ["targets[1]"]

    def test_equal_targets_allowed(self, long_plan):
        plan = replace(long_plan, targets=(182.0, 182.0))
        assert check_plan_levels(plan, TradeDirection.LONG) == []

    def test_short_stop_below_entry(self, short_plan):
        plan = replace(short_plan, stop=242.0)
        assert [v.field for v in check_plan_levels(plan, TradeDirection.SHORT)] == ["stop"]


class TestPlanRiskReward:
    """Test plan-level ratio"""

    def test_entry_reference_modes(self, long_plan):
        assert entry_reference(long_plan) == 176.0
        assert entry_reference(long_plan, "min") == 175.0
        assert entry_reference(long_plan, "max") == 177.0
        with pytest.raises(InvalidInputError):
            entry_reference(long_plan, "vwap")

    def test_midpoint_ratio(self, long_plan):
        # |182 - 176| / |176 - 172.5|
        assert plan_risk_reward(long_plan) == pytest.approx(6 / 3.5)

    def test_second_target_with_min_entry(self, long_plan):
        # |185.5 - 175| / |175 - 172.5|
        assert plan_risk_reward(long_plan, 1, "min") == pytest.approx(4.2)

    def test_short_ratio(self, short_plan):
        # |238.5 - 242| / |242 - 245.5|
        assert plan_risk_reward(short_plan) == pytest.approx(1.0)

    def test_target_index_out_of_range(self, long_plan):
        with pytest.raises(InvalidInputError):
            plan_risk_reward(long_plan, 2)

    def test_stop_at_reference_entry(self, long_plan):
        plan = replace(long_plan, stop=176.0)
        with pytest.raises(DivisionByZeroError):
            plan_risk_reward(plan)

    def test_with_computed_risk_reward_returns_copy(self, long_plan):
        updated = with_computed_risk_reward(long_plan)
        assert updated.risk_reward == 1.71
        assert long_plan.risk_reward == 3.4
        assert updated.targets == long_plan.targets


class TestSizePlan:
    """Test sizing a plan against an account"""

    def test_size_long_plan(self, long_plan):
        position = size_plan(long_plan, 25_000, 1)
        # budget 250 / risk per share 3.5 = 71.4
        assert position.shares == 71
        assert position.entry_price == 176.0
        assert position.position_value == pytest.approx(12_496.0)
        assert position.risk_amount == pytest.approx(248.5)
        assert position.reward_amounts == pytest.approx((426.0, 674.5))
        assert position.risk_reward == pytest.approx(6 / 3.5)

    def test_risk_never_exceeds_budget(self, short_plan):
        position = size_plan(short_plan, 10_000, 2, entry_mode="max")
        assert position.risk_amount <= 200

    def test_zero_width_risk(self, long_plan):
        plan = replace(long_plan, entry=EntryRange(min=172.5, max=172.5))
        with pytest.raises(DivisionByZeroError):
            size_plan(plan, 25_000, 1)
