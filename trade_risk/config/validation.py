"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

ENTRY_REFERENCE_MODES = ("midpoint", "min", "max")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ConfigError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_validation_params(params: dict[str, Any]) -> list[ConfigError]:
        """Validate input guard parameters."""
        errors = []

        min_percent = params.get("min_percent")
        max_percent = params.get("max_percent")

        if "min_percent" in params and (not _is_number(min_percent) or min_percent < -100):
            errors.append(ConfigError(
                field="min_percent",
                message="Must be a number no lower than -100",
                value=min_percent
            ))

        if "max_percent" in params and (not _is_number(max_percent) or max_percent <= 0):
            errors.append(ConfigError(
                field="max_percent",
                message="Must be a positive number",
                value=max_percent
            ))

        if not errors and _is_number(min_percent) and _is_number(max_percent):
            if min_percent >= max_percent:
                errors.append(ConfigError(
                    field="min_percent",
                    message="Must be lower than max_percent",
                    value=min_percent
                ))

        return errors

    @staticmethod
    def validate_sizing_params(params: dict[str, Any]) -> list[ConfigError]:
        """Validate position sizing parameters."""
        errors = []

        if "default_risk_percent" in params:
            value = params["default_risk_percent"]
            if not _is_number(value) or value <= 0 or value > 100:
                errors.append(ConfigError(
                    field="default_risk_percent",
                    message="Must be a positive number no greater than 100",
                    value=value
                ))

        if "entry_reference" in params:
            value = params["entry_reference"]
            if value not in ENTRY_REFERENCE_MODES:
                errors.append(ConfigError(
                    field="entry_reference",
                    message=f"Must be one of {', '.join(ENTRY_REFERENCE_MODES)}",
                    value=value
                ))

        if "ratio_decimals" in params:
            value = params["ratio_decimals"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ConfigError(
                    field="ratio_decimals",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ConfigError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ConfigError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params and not isinstance(params["format_json"], bool):
            errors.append(ConfigError(
                field="format_json",
                message="Must be a boolean",
                value=params["format_json"]
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ConfigError]:
        """Validate complete configuration."""
        errors = []
        sections = (
            ("validation", ConfigValidator.validate_validation_params),
            ("sizing", ConfigValidator.validate_sizing_params),
            ("logging", ConfigValidator.validate_logging_params),
        )

        for section, validate in sections:
            if section not in config:
                continue
            if not isinstance(config[section], dict):
                errors.append(ConfigError(
                    field=section,
                    message="Must be a mapping",
                    value=config[section]
                ))
                continue
            errors.extend(validate(config[section]))

        return errors
