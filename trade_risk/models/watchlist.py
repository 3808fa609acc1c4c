"""
Watchlist data models.

Watchlists are persisted by an external document store; these classes only
shape the documents. Timestamps are epoch milliseconds.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from trade_risk.errors import InvalidInputError

from .fields import parse_enum, require_field, require_sequence


class ColorFlag(str, Enum):
    """User-assigned visual tag on a watchlist entry."""
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"
    PINK = "pink"
    GRAY = "gray"
    NONE = "none"


@dataclass(frozen=True)
class WatchlistStock:
    """A symbol saved to a watchlist folder."""
    id: str
    symbol: str
    name: str
    price: float
    change: float
    change_percent: float
    color_flag: ColorFlag = ColorFlag.NONE
    added_at: int = 0
    notes: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "color_flag", parse_enum(ColorFlag, self.color_flag, "colorFlag"))

    def to_dict(self) -> dict[str, Any]:
        data = {
            "id": self.id,
            "symbol": self.symbol,
            "name": self.name,
            "price": self.price,
            "change": self.change,
            "changePercent": self.change_percent,
            "colorFlag": self.color_flag.value,
            "addedAt": self.added_at,
        }
        if self.notes is not None:
            data["notes"] = self.notes
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WatchlistStock":
        return cls(
            id=require_field(data, "id", "WatchlistStock"),
            symbol=require_field(data, "symbol", "WatchlistStock"),
            name=require_field(data, "name", "WatchlistStock"),
            price=require_field(data, "price", "WatchlistStock"),
            change=require_field(data, "change", "WatchlistStock"),
            change_percent=require_field(data, "changePercent", "WatchlistStock"),
            color_flag=parse_enum(ColorFlag, data.get("colorFlag", "none"), "colorFlag"),
            added_at=data.get("addedAt", 0),
            notes=data.get("notes"),
        )


@dataclass(frozen=True)
class WatchlistFolder:
    """Named, ordered group of watchlist stocks."""
    id: str
    name: str
    stocks: tuple[WatchlistStock, ...] = field(default_factory=tuple)
    created_at: int = 0
    order: float = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "stocks", require_sequence(self.stocks, "stocks"))

        # Stock ids must be unique within a folder
        seen = set()
        for stock in self.stocks:
            if stock.id in seen:
                raise InvalidInputError(
                    f"Duplicate stock id {stock.id!r} in folder {self.id!r}",
                    field="stocks",
                    value=stock.id,
                )
            seen.add(stock.id)

    def get_stock(self, stock_id: str) -> Optional[WatchlistStock]:
        for stock in self.stocks:
            if stock.id == stock_id:
                return stock
        return None

    def has_symbol(self, symbol: str) -> bool:
        return any(stock.symbol == symbol for stock in self.stocks)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "stocks": [stock.to_dict() for stock in self.stocks],
            "createdAt": self.created_at,
            "order": self.order,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WatchlistFolder":
        return cls(
            id=require_field(data, "id", "WatchlistFolder"),
            name=require_field(data, "name", "WatchlistFolder"),
            stocks=tuple(WatchlistStock.from_dict(s)
                         for s in require_sequence(data.get("stocks", ()), "stocks")),
            created_at=data.get("createdAt", 0),
            order=data.get("order", 0),
        )


@dataclass(frozen=True)
class Watchlist:
    """All folders of a user's watchlist."""
    folders: tuple[WatchlistFolder, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "folders", require_sequence(self.folders, "folders"))

    def to_dict(self) -> dict[str, Any]:
        return {"folders": [folder.to_dict() for folder in self.folders]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Watchlist":
        folders = require_sequence(require_field(data, "folders", "Watchlist"), "folders")
        return cls(folders=tuple(WatchlistFolder.from_dict(f) for f in folders))
