"""
Centralized logging configuration for the trade risk engine.

The pure calculation functions never log. The engine facade records failed
calculations and suspicious results through the calculation logger defined
here, bound to the ``risk_engine`` subsystem so its events can be filtered
as an audit trail. Output format and level come from the ``logging``
section of the merged configuration (see ``LoggingParams``).
"""
import logging
import sys
from typing import Any, Mapping, Optional, Union

import structlog
from structlog.types import FilteringBoundLogger

from trade_risk.config.defaults import LoggingParams
from trade_risk.config.validation import LOG_LEVELS
from trade_risk.errors import InvalidInputError


def _resolve_level(level: str) -> int:
    name = level.upper() if isinstance(level, str) else level
    if name not in LOG_LEVELS:
        raise InvalidInputError(
            f"Unknown log level {level!r}",
            field="level",
            value=level,
        )
    return logging.getLevelName(name)  # type: ignore[no-any-return]


def _build_processors(
    format_json: bool,
    include_timestamp: bool,
    include_caller: bool,
    extra_processors: Optional[list]
) -> list:
    processors: list = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.MODULE,
                        structlog.processors.CallsiteParameter.FUNC_NAME]
        ))

    processors.extend(extra_processors or [])

    # Renderer must come last
    if format_json:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    return processors


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog and the stdlib root logger it writes through.

    Safe to call more than once; later calls replace the level and renderer.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, render JSON lines; otherwise console output
        include_timestamp: Add a UTC ISO timestamp to every event
        include_caller: Add the calling module and function
        extra_processors: Processors inserted before the renderer

    Raises:
        InvalidInputError: If level is not a known level name
    """
    log_level = _resolve_level(level)

    logging.basicConfig(stream=sys.stdout, format="%(message)s")
    logging.getLogger().setLevel(log_level)

    structlog.configure(
        processors=_build_processors(format_json, include_timestamp,
                                     include_caller, extra_processors),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging_from_params(
    params: Union[LoggingParams, Mapping[str, Any], None] = None
) -> None:
    """
    Configure logging from the ``logging`` configuration section.

    Accepts the frozen defaults or the merged dictionary produced by
    ``ConfigLoader.merge_config``; missing keys fall back to the defaults.
    """
    defaults = LoggingParams()
    if params is None:
        params = defaults
    if isinstance(params, LoggingParams):
        level, format_json = params.level, params.format_json
    else:
        level = params.get("level", defaults.level)
        format_json = params.get("format_json", defaults.format_json)

    configure_logging(level=level, format_json=bool(format_json))


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_calculation_logger(name: str) -> FilteringBoundLogger:
    """Logger bound to the risk engine subsystem for calculation outcomes."""
    return get_logger(name).bind(
        subsystem="risk_engine",
        audit_trail=True
    )


def log_calculation_failure(
    logger: FilteringBoundLogger,
    operation: str,
    error: Exception,
    inputs: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a failed calculation with standardized format.

    Args:
        logger: Structlog logger instance
        operation: Name of the calculation that failed
        error: The typed failure raised by the calculation
        inputs: Arguments the calculation was called with
    """
    bound_logger = logger.bind(
        operation=operation,
        error_kind=type(error).__name__,
        reason=str(error),
    )

    if inputs:
        bound_logger = bound_logger.bind(inputs=inputs)

    bound_logger.warning("Calculation failed")
