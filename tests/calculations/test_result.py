"""Tests for tagged calculation results"""

import pytest

from trade_risk.calculations import CalculationResult, percent_change, risk_reward_ratio, safe_calculate
from trade_risk.errors import DivisionByZeroError, InvalidInputError


class TestCalculationResult:
    """Test result construction and access"""

    def test_ok_result(self):
        result = CalculationResult.ok(2.0)
        assert result.success is True
        assert result.value == 2.0
        assert result.error is None
        assert result.error_kind is None
        assert result.unwrap() == 2.0

    def test_failure_result(self):
        error = InvalidInputError("bad", field="shares", value=-1)
        result = CalculationResult.failure(error)
        assert result.success is False
        assert result.value is None
        assert result.error_kind == "InvalidInputError"
        assert result.error_msg == "bad"
        assert result.value_or(0) == 0
        with pytest.raises(InvalidInputError):
            result.unwrap()


class TestSafeCalculate:
    """Test capturing typed failures"""

    def test_success(self):
        result = safe_calculate(risk_reward_ratio, 100, 110, 95)
        assert result.success is True
        assert result.value == pytest.approx(2.0)

    def test_keyword_arguments(self):
        result = safe_calculate(percent_change, old_value=50, new_value=75)
        assert result.value == pytest.approx(50.0)

    def test_captures_division_by_zero(self):
        result = safe_calculate(risk_reward_ratio, 100, 110, 100)
        assert result.success is False
        assert isinstance(result.error, DivisionByZeroError)
        assert result.error_kind == "DivisionByZeroError"

    def test_other_exceptions_propagate(self):
        def broken():
            raise KeyError("bug")

        with pytest.raises(KeyError):
            safe_calculate(broken)
