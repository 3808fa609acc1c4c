"""
Risk engine facade.

Binds configuration to the pure calculations and returns tagged results
instead of raising, for callers such as UI handlers that render a badge or
a prompt depending on the outcome. The engine holds configuration only;
every call is independent and safe to run concurrently.
"""

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, Union

from .calculations.position_size import kelly_fraction
from .calculations.price import (
    percent_change,
    stop_price_from_percent,
    target_price_from_percent,
)
from .calculations.result import CalculationResult, safe_calculate
from .calculations.risk_reward import position_size_from_risk, risk_reward_ratio
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .errors import InvalidInputError, TradeRiskError
from .logging.config import (
    configure_logging_from_params,
    get_calculation_logger,
    get_logger,
    log_calculation_failure,
)
from .models.trade import Timeframe, TradePlan, TradeSetup
from .plans.analysis import (
    PlanViolation,
    PositionPlan,
    TradeDirection,
    check_plan_levels,
    direction_from_sentiment,
    parse_direction,
    plan_risk_reward,
    size_plan,
    with_computed_risk_reward,
)

logger = get_logger(__name__)
calculation_logger = get_calculation_logger(__name__)


@dataclass(frozen=True)
class SetupEvaluation:
    """Outcome of evaluating a trade setup against an account."""
    ticker: str
    timeframe: Timeframe
    direction: Optional[TradeDirection] = None
    violations: tuple[PlanViolation, ...] = ()
    risk_reward: Optional[float] = None
    position: Optional[PositionPlan] = None
    # Copy of the plan with risk_reward recomputed from its levels
    plan: Optional[TradePlan] = None
    success: bool = True
    error: Optional[TradeRiskError] = None

    @property
    def is_consistent(self) -> bool:
        """True when evaluation succeeded and the levels match the direction."""
        return self.success and not self.violations


class RiskEngine:
    """
    Configured entry point for the trade risk calculations.

    Configuration precedence: per-call overrides given at construction,
    then symbol-specific overrides, then global defaults.
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None,
                 overrides: Optional[dict[str, Any]] = None,
                 setup_logging: bool = False) -> None:
        """
        Initialize the risk engine.

        Configuration is read and validated here, once: the global merge
        and the merge for every symbol listed in ``symbols.yaml``.

        Args:
            config_dir: Directory holding ``symbols.yaml``
            overrides: Per-call overrides applied on top of every merge
            setup_logging: Configure structlog from the ``logging`` section

        Raises:
            InvalidInputError: If the symbol table or any merged configuration is invalid
        """
        self.logger = logger
        self.calculation_logger = calculation_logger

        self.config_loader = ConfigLoader.create(config_dir)
        self.overrides = overrides or {}
        self.config = self.config_loader.merge_config(overrides=self.overrides)
        self._symbol_configs = {
            symbol: self.config_loader.merge_config(symbol, self.overrides)
            for symbol in self.config_loader.symbols
        }

        error_msgs = [
            f"{err.field}: {err.message} (got: {err.value})"
            for err in ConfigValidator.validate_config(self.config)
        ]
        for symbol, errors in self.config_loader.validate_symbols(self.overrides).items():
            error_msgs.extend(
                f"{symbol}.{err.field}: {err.message} (got: {err.value})" for err in errors
            )
        if error_msgs:
            self.logger.error("Risk engine configuration invalid", errors=error_msgs)
            raise InvalidInputError(
                "Invalid risk engine configuration",
                field="config",
                value=error_msgs,
            )

        if setup_logging:
            configure_logging_from_params(self.config["logging"])

        self.logger.info(
            "Risk engine initialized",
            config_dir=str(self.config_loader.config_dir),
            symbols=list(self._symbol_configs),
        )

    def _config(self, symbol: Optional[str]) -> dict[str, Any]:
        return self._symbol_configs.get(symbol, self.config) if symbol else self.config

    def config_for(self, symbol: Optional[str] = None) -> dict[str, Any]:
        """Copy of the merged configuration for a symbol."""
        return copy.deepcopy(self._config(symbol))

    def _run(self, operation: str, func: Callable[..., Any], **inputs: Any) -> CalculationResult:
        result = safe_calculate(func, **inputs)
        if not result.success:
            log_calculation_failure(self.calculation_logger, operation, result.error, inputs)
        return result

    def percent_change(self, old_value: float, new_value: float) -> CalculationResult:
        return self._run("percent_change", percent_change,
                         old_value=old_value, new_value=new_value)

    def target_price(self, current_price: float, percent_gain: float,
                     symbol: Optional[str] = None) -> CalculationResult:
        bounds = self._config(symbol)["validation"]
        return self._run("target_price_from_percent", target_price_from_percent,
                         current_price=current_price, percent_gain=percent_gain,
                         min_percent=bounds["min_percent"], max_percent=bounds["max_percent"])

    def stop_price(self, entry_price: float, percent_loss: float,
                   symbol: Optional[str] = None) -> CalculationResult:
        bounds = self._config(symbol)["validation"]
        return self._run("stop_price_from_percent", stop_price_from_percent,
                         entry_price=entry_price, percent_loss=percent_loss,
                         min_percent=bounds["min_percent"], max_percent=bounds["max_percent"])

    def ratio(self, entry: float, target: float, stop: float) -> CalculationResult:
        return self._run("risk_reward_ratio", risk_reward_ratio,
                         entry=entry, target=target, stop=stop)

    def size(self, account_size: float, entry: float, stop: float,
             risk_percent: Optional[float] = None,
             symbol: Optional[str] = None) -> CalculationResult:
        """Share count for a risk budget; risk_percent defaults from config."""
        if risk_percent is None:
            risk_percent = self._config(symbol)["sizing"]["default_risk_percent"]
        return self._run("position_size_from_risk", position_size_from_risk,
                         account_size=account_size, risk_percent=risk_percent,
                         entry=entry, stop=stop)

    def kelly(self, win_rate: float, avg_win: float, avg_loss: float) -> CalculationResult:
        """
        Raw Kelly fraction.

        Values outside [0, 1] are returned unchanged but logged: below zero
        the inputs show no edge, above one they imply leverage.
        """
        result = self._run("kelly_fraction", kelly_fraction,
                           win_rate=win_rate, avg_win=avg_win, avg_loss=avg_loss)
        if result.success and not 0 <= result.value <= 1:
            self.calculation_logger.warning(
                "Kelly fraction outside [0, 1]",
                kelly=result.value,
                meaning="no edge" if result.value < 0 else "implies leverage",
            )
        return result

    def evaluate_setup(self, setup: TradeSetup, account_size: float,
                       risk_percent: Optional[float] = None,
                       direction: Optional[TradeDirection] = None) -> SetupEvaluation:
        """
        Evaluate a setup: direction, level consistency, risk/reward and size.

        Direction comes from the argument or else from the insight sentiment.
        Inconsistent levels are reported as violations, not failures; the
        figures are still computed so the caller can show both.
        """
        sizing = self._config(setup.ticker)["sizing"]
        entry_mode = sizing["entry_reference"]
        if risk_percent is None:
            risk_percent = sizing["default_risk_percent"]

        requested, direction = direction, None
        try:
            if requested is None:
                direction = direction_from_sentiment(setup.insight.sentiment)
            else:
                direction = parse_direction(requested)
            violations = tuple(check_plan_levels(setup.plan, direction))
            ratio = plan_risk_reward(setup.plan, 0, entry_mode)
            position = size_plan(setup.plan, account_size, risk_percent, entry_mode)
        except TradeRiskError as e:
            log_calculation_failure(
                self.calculation_logger, "evaluate_setup", e,
                {"ticker": setup.ticker, "timeframe": setup.timeframe.value,
                 "account_size": account_size, "risk_percent": risk_percent},
            )
            return SetupEvaluation(
                ticker=setup.ticker,
                timeframe=setup.timeframe,
                direction=direction,
                success=False,
                error=e,
            )

        if violations:
            self.calculation_logger.warning(
                "Plan levels inconsistent with direction",
                ticker=setup.ticker,
                direction=direction.value,
                violations=[f"{v.field}: {v.message}" for v in violations],
            )

        self.calculation_logger.debug(
            "Setup evaluated",
            ticker=setup.ticker,
            direction=direction.value,
            risk_reward=ratio,
            shares=position.shares,
        )

        return SetupEvaluation(
            ticker=setup.ticker,
            timeframe=setup.timeframe,
            direction=direction,
            violations=violations,
            risk_reward=ratio,
            position=position,
            plan=with_computed_risk_reward(setup.plan, 0, entry_mode, sizing["ratio_decimals"]),
        )
