"""
Trade plan data models.

A TradeSetup bundles a ticker, a timeframe, the TradePlan the risk math
operates on and the AIInsight produced by an external generator. Setups
are owned by the caller; the engine never keeps a reference to one.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from trade_risk.errors import InvalidInputError
from trade_risk.validation.guards import require_number, validate_ticker

from .fields import parse_enum, require_field, require_sequence


class Timeframe(str, Enum):
    """Holding period of a setup."""
    DAY = "day"
    SWING = "swing"
    POSITION = "position"


class Sentiment(str, Enum):
    """Directional view attached to an AI insight."""
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class EntryRange:
    """Planned purchase price range."""
    min: float
    max: float

    def __post_init__(self) -> None:
        low = require_number(self.min, "entry.min")
        high = require_number(self.max, "entry.max")
        if low > high:
            raise InvalidInputError(
                f"Entry range min {low} exceeds max {high}",
                field="entry",
                value={"min": low, "max": high},
            )

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2

    def to_dict(self) -> dict[str, float]:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class Playbook:
    """Narrative branches of a trade plan."""
    best_case: str
    base_case: str
    invalidation: str

    def to_dict(self) -> dict[str, str]:
        return {
            "bestCase": self.best_case,
            "baseCase": self.base_case,
            "invalidation": self.invalidation,
        }


@dataclass(frozen=True)
class TradePlan:
    """Entry/target/stop levels and narrative for a single setup."""
    setup: str
    entry: EntryRange
    targets: tuple[float, ...]
    stop: float
    risk_reward: float
    confidence: float
    time_horizon: str
    playbook: Playbook

    def __post_init__(self) -> None:
        # Accept a list of targets but store an immutable tuple
        object.__setattr__(self, "targets", require_sequence(self.targets, "targets"))
        if not self.targets:
            raise InvalidInputError("Trade plan needs at least one target", field="targets")
        for index, target in enumerate(self.targets):
            require_number(target, f"targets[{index}]")
        require_number(self.stop, "stop")

    @property
    def first_target(self) -> float:
        return self.targets[0]

    @property
    def final_target(self) -> float:
        return self.targets[-1]

    def to_dict(self) -> dict[str, Any]:
        return {
            "setup": self.setup,
            "entry": self.entry.to_dict(),
            "target": list(self.targets),
            "stop": self.stop,
            "riskReward": self.risk_reward,
            "confidence": self.confidence,
            "timeHorizon": self.time_horizon,
            "playbook": self.playbook.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TradePlan":
        entry = require_field(data, "entry", "TradePlan")
        playbook = require_field(data, "playbook", "TradePlan")
        return cls(
            setup=require_field(data, "setup", "TradePlan"),
            entry=EntryRange(
                min=require_field(entry, "min", "TradePlan.entry"),
                max=require_field(entry, "max", "TradePlan.entry"),
            ),
            targets=require_sequence(require_field(data, "target", "TradePlan"), "target"),
            stop=require_field(data, "stop", "TradePlan"),
            risk_reward=require_field(data, "riskReward", "TradePlan"),
            confidence=require_field(data, "confidence", "TradePlan"),
            time_horizon=require_field(data, "timeHorizon", "TradePlan"),
            playbook=Playbook(
                best_case=require_field(playbook, "bestCase", "TradePlan.playbook"),
                base_case=require_field(playbook, "baseCase", "TradePlan.playbook"),
                invalidation=require_field(playbook, "invalidation", "TradePlan.playbook"),
            ),
        )


@dataclass(frozen=True)
class AIInsight:
    """Descriptive AI commentary travelling with a setup. Not computed here."""
    sentiment: Sentiment
    tldr: tuple[str, ...] = field(default_factory=tuple)
    drivers: tuple[str, ...] = field(default_factory=tuple)
    risks: tuple[str, ...] = field(default_factory=tuple)
    rating: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "sentiment", parse_enum(Sentiment, self.sentiment, "sentiment"))
        for name in ("tldr", "drivers", "risks"):
            object.__setattr__(self, name, require_sequence(getattr(self, name), name))

    def to_dict(self) -> dict[str, Any]:
        return {
            "sentiment": self.sentiment.value,
            "tldr": list(self.tldr),
            "drivers": list(self.drivers),
            "risks": list(self.risks),
            "rating": self.rating,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AIInsight":
        return cls(
            sentiment=parse_enum(Sentiment, require_field(data, "sentiment", "AIInsight"), "sentiment"),
            tldr=data.get("tldr", ()),
            drivers=data.get("drivers", ()),
            risks=data.get("risks", ()),
            rating=data.get("rating", 0.0),
        )


@dataclass(frozen=True)
class TradeSetup:
    """A ticker, timeframe, plan and insight evaluated together."""
    ticker: str
    timeframe: Timeframe
    plan: TradePlan
    insight: AIInsight

    def __post_init__(self) -> None:
        validate_ticker(self.ticker)
        object.__setattr__(self, "timeframe", parse_enum(Timeframe, self.timeframe, "timeframe"))

    def to_dict(self) -> dict[str, Any]:
        return {
            "ticker": self.ticker,
            "timeframe": self.timeframe.value,
            "plan": self.plan.to_dict(),
            "insight": self.insight.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TradeSetup":
        return cls(
            ticker=require_field(data, "ticker", "TradeSetup"),
            timeframe=parse_enum(Timeframe, require_field(data, "timeframe", "TradeSetup"), "timeframe"),
            plan=TradePlan.from_dict(require_field(data, "plan", "TradeSetup")),
            insight=AIInsight.from_dict(require_field(data, "insight", "TradeSetup")),
        )
