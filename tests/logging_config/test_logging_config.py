"""Tests for structlog configuration and calculation failure logging."""

from unittest.mock import Mock, patch

import pytest
import structlog

from trade_risk.config.defaults import LoggingParams
from trade_risk.errors import DivisionByZeroError, InvalidInputError
from trade_risk.logging import configure_logging, configure_logging_from_params, get_logger
from trade_risk.logging.config import get_calculation_logger, log_calculation_failure


class TestConfigureLogging:
    """Test logging configuration."""

    def test_configures_level_and_renderer(self):
        configure_logging(level="DEBUG", format_json=True)

        config = structlog.get_config()
        assert isinstance(config["processors"][-1], structlog.processors.JSONRenderer)

    def test_console_renderer_by_default(self):
        configure_logging(level="INFO")
        config = structlog.get_config()
        assert isinstance(config["processors"][-1], structlog.dev.ConsoleRenderer)

    def test_unknown_level_is_typed(self):
        with pytest.raises(InvalidInputError) as exc_info:
            configure_logging(level="LOUD")
        assert exc_info.value.field == "level"

    def test_get_logger(self):
        assert get_logger(__name__) is not None
        assert get_calculation_logger(__name__) is not None


class TestConfigureFromParams:
    """Test wiring the logging config section into structlog."""

    def test_from_frozen_params(self):
        configure_logging_from_params(LoggingParams(format_json=True))
        config = structlog.get_config()
        assert isinstance(config["processors"][-1], structlog.processors.JSONRenderer)

    def test_from_merged_mapping(self):
        with patch("trade_risk.logging.config.configure_logging") as configure:
            configure_logging_from_params({"level": "DEBUG"})
        configure.assert_called_once_with(level="DEBUG", format_json=False)

    def test_defaults_when_omitted(self):
        with patch("trade_risk.logging.config.configure_logging") as configure:
            configure_logging_from_params()
        configure.assert_called_once_with(level="INFO", format_json=False)


class TestLogCalculationFailure:
    """Test standardized failure logging."""

    def test_binds_operation_and_error(self):
        logger = Mock()
        error = DivisionByZeroError("undefined", operation="percent_change")

        log_calculation_failure(logger, "percent_change", error, {"old_value": 0})

        logger.bind.assert_called_once_with(
            operation="percent_change",
            error_kind="DivisionByZeroError",
            reason="undefined",
        )
        bound = logger.bind.return_value
        bound.bind.assert_called_once_with(inputs={"old_value": 0})
        bound.bind.return_value.warning.assert_called_once_with("Calculation failed")

    def test_without_inputs(self):
        logger = Mock()
        log_calculation_failure(logger, "kelly_fraction", DivisionByZeroError("zero"))
        logger.bind.return_value.warning.assert_called_once_with("Calculation failed")
