"""Default configuration parameters for the trade risk engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationParams:
    """Input guard parameters."""
    min_percent: float = -100.0                     # Cannot lose more than the whole basis
    max_percent: float = 1000.0                     # Display sanity bound


@dataclass(frozen=True)
class SizingParams:
    """Position sizing parameters."""
    default_risk_percent: float = 1.0               # % of account risked per trade
    entry_reference: str = "midpoint"               # midpoint | min | max of entry range
    ratio_decimals: int = 2                         # Rounding for stored risk/reward


@dataclass(frozen=True)
class WatchlistParams:
    """Watchlist shaping parameters."""
    default_folder_id: str = "default"
    default_folder_name: str = "My Watchlist"


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    validation: ValidationParams
    sizing: SizingParams
    watchlist: WatchlistParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        validation=ValidationParams(),
        sizing=SizingParams(),
        watchlist=WatchlistParams(),
        logging=LoggingParams(),
    )
