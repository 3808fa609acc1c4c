"""
Ticker quote data models.

change_percent is expected to equal change / previous_price * 100 at the
source of truth. The quote provider owns that consistency; it is not
enforced here.
"""

from dataclasses import dataclass
from typing import Any, Optional

from trade_risk.validation.guards import validate_ticker

from .fields import require_field


@dataclass(frozen=True)
class Ticker:
    """Quote and reference data for a listed symbol."""
    symbol: str
    name: str
    exchange: str
    sector: str
    price: float
    change: float
    change_percent: float
    volume: float
    avg_volume: float
    market_cap: float
    float_shares: float
    short_interest: Optional[float] = None

    def __post_init__(self) -> None:
        validate_ticker(self.symbol)

    @property
    def previous_price(self) -> float:
        return self.price - self.change

    @property
    def relative_volume(self) -> Optional[float]:
        """Today's volume relative to average, None without an average."""
        if not self.avg_volume:
            return None
        return self.volume / self.avg_volume

    def to_dict(self) -> dict[str, Any]:
        data = {
            "symbol": self.symbol,
            "name": self.name,
            "exchange": self.exchange,
            "sector": self.sector,
            "price": self.price,
            "change": self.change,
            "changePercent": self.change_percent,
            "volume": self.volume,
            "avgVolume": self.avg_volume,
            "marketCap": self.market_cap,
            "float": self.float_shares,
        }
        if self.short_interest is not None:
            data["shortInterest"] = self.short_interest
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Ticker":
        return cls(
            symbol=require_field(data, "symbol", "Ticker"),
            name=require_field(data, "name", "Ticker"),
            exchange=require_field(data, "exchange", "Ticker"),
            sector=require_field(data, "sector", "Ticker"),
            price=require_field(data, "price", "Ticker"),
            change=require_field(data, "change", "Ticker"),
            change_percent=require_field(data, "changePercent", "Ticker"),
            volume=require_field(data, "volume", "Ticker"),
            avg_volume=require_field(data, "avgVolume", "Ticker"),
            market_cap=require_field(data, "marketCap", "Ticker"),
            float_shares=require_field(data, "float", "Ticker"),
            short_interest=data.get("shortInterest"),
        )


@dataclass(frozen=True)
class TickerSearchResult:
    """Lightweight symbol lookup hit."""
    symbol: str
    name: str
    exchange: str

    def to_dict(self) -> dict[str, str]:
        return {"symbol": self.symbol, "name": self.name, "exchange": self.exchange}
