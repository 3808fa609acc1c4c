"""
Configuration loader with 3-tier parameter precedence.

``symbols.yaml`` is read once, when the loader is created. Merging a
symbol's configuration afterwards works from the cached table and never
touches the filesystem.
"""

import copy
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from trade_risk.errors import InvalidInputError

from .defaults import DefaultConfig, get_default_config
from .validation import ConfigError, ConfigValidator

DEFAULT_CONFIG_DIR = Path(__file__).parent.parent.parent / "config"
SYMBOLS_FILE = "symbols.yaml"


def read_symbol_table(config_dir: Path) -> dict[str, dict[str, Any]]:
    """
    Read per-symbol overrides from ``<config_dir>/symbols.yaml``.

    A missing or empty file yields an empty table.

    Raises:
        InvalidInputError: If the file is not a ``symbols:`` mapping of
            symbol to mapping
    """
    path = config_dir / SYMBOLS_FILE
    if not path.exists():
        return {}

    with open(path) as f:
        document = yaml.safe_load(f) or {}

    symbols = (document.get("symbols") or {}) if isinstance(document, dict) else None
    if not isinstance(symbols, dict):
        raise InvalidInputError(
            f"{path} must contain a 'symbols' mapping",
            field="symbols",
            value=str(path),
        )

    for symbol, overrides in symbols.items():
        if not isinstance(overrides, dict):
            raise InvalidInputError(
                f"Overrides for {symbol!r} in {path} must be a mapping",
                field=f"symbols.{symbol}",
                value=overrides,
            )

    return symbols


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


@dataclass(frozen=True)
class ConfigLoader:
    """Global defaults plus the cached per-symbol override table."""

    config_dir: Path
    defaults: DefaultConfig
    symbols: dict[str, dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def create(cls, config_dir: Optional[Union[str, Path]] = None) -> "ConfigLoader":
        """Create a loader, reading the symbol table from disk."""
        config_dir = DEFAULT_CONFIG_DIR if config_dir is None else Path(config_dir)
        return cls(
            config_dir=config_dir,
            defaults=get_default_config(),
            symbols=read_symbol_table(config_dir),
        )

    def load_symbol_config(self, symbol: str) -> dict[str, Any]:
        """Overrides configured for a symbol, empty if it has none."""
        return copy.deepcopy(self.symbols.get(symbol, {}))

    def merge_config(
        self,
        symbol: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Symbol-specific overrides
        3. Global defaults (lowest priority)
        """
        config = asdict(self.defaults)

        if symbol and symbol in self.symbols:
            config = _deep_merge(config, self.symbols[symbol])

        if overrides:
            config = _deep_merge(config, overrides)

        return config

    def validate_symbols(
        self,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, list[ConfigError]]:
        """Validate the merged configuration of every configured symbol."""
        invalid = {}
        for symbol in self.symbols:
            errors = ConfigValidator.validate_config(self.merge_config(symbol, overrides))
            if errors:
                invalid[symbol] = errors
        return invalid
