"""Unit tests for configuration management."""

from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from trade_risk.config.defaults import get_default_config
from trade_risk.config.loader import ConfigLoader
from trade_risk.config.validation import ConfigValidator
from trade_risk.errors import InvalidInputError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.validation.min_percent == -100.0
        assert config.validation.max_percent == 1000.0
        assert config.sizing.default_risk_percent == 1.0
        assert config.sizing.entry_reference == "midpoint"
        assert config.watchlist.default_folder_name == "My Watchlist"


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)
        assert loader.config_dir.name == "config"

    def test_merge_config_defaults_only(self) -> None:
        """Unknown symbols fall back to defaults."""
        config = ConfigLoader.create().merge_config("UNKNOWN")
        assert config["sizing"]["default_risk_percent"] == 1.0
        assert config["validation"]["max_percent"] == 1000.0

    def test_merge_config_symbol_overrides(self) -> None:
        """Symbol overrides from the bundled symbols.yaml."""
        config = ConfigLoader.create().merge_config("GME")
        assert config["sizing"]["default_risk_percent"] == 0.25
        assert config["sizing"]["entry_reference"] == "max"
        assert config["validation"]["max_percent"] == 5000.0
        # Untouched defaults remain
        assert config["validation"]["min_percent"] == -100.0

    def test_call_overrides_take_precedence(self) -> None:
        """Per-call overrides beat symbol overrides."""
        config = ConfigLoader.create().merge_config(
            "TSLA", {"sizing": {"default_risk_percent": 2.0}}
        )
        assert config["sizing"]["default_risk_percent"] == 2.0
        assert config["sizing"]["ratio_decimals"] == 2

    def test_custom_config_dir(self, tmp_path: Path) -> None:
        """Loader reads symbols.yaml from a custom directory."""
        (tmp_path / "symbols.yaml").write_text(
            "symbols:\n  AMD:\n    sizing:\n      default_risk_percent: 0.75\n"
        )
        loader = ConfigLoader.create(tmp_path)
        assert loader.merge_config("AMD")["sizing"]["default_risk_percent"] == 0.75
        assert loader.merge_config("NVDA")["sizing"]["default_risk_percent"] == 1.0

    def test_missing_symbols_file(self, tmp_path: Path) -> None:
        loader = ConfigLoader.create(tmp_path)
        assert loader.load_symbol_config("AAPL") == {}

    def test_empty_symbols_file(self, tmp_path: Path) -> None:
        (tmp_path / "symbols.yaml").write_text("")
        assert ConfigLoader.create(tmp_path).load_symbol_config("AAPL") == {}

    def test_symbol_table_read_once(self) -> None:
        """symbols.yaml is parsed at creation, not on every merge."""
        with patch("trade_risk.config.loader.yaml.safe_load", wraps=yaml.safe_load) as safe_load:
            loader = ConfigLoader.create()
            for _ in range(3):
                loader.merge_config("TSLA")
        assert safe_load.call_count == 1

    def test_merge_does_not_leak_into_cache(self) -> None:
        loader = ConfigLoader.create()
        config = loader.merge_config("GME")
        config["sizing"]["default_risk_percent"] = 99
        assert loader.merge_config("GME")["sizing"]["default_risk_percent"] == 0.25
        assert loader.symbols["GME"]["sizing"]["default_risk_percent"] == 0.25

    @pytest.mark.parametrize("content", [
        "- TSLA\n",
        "symbols:\n  - TSLA\n",
        "symbols:\n  TSLA: 0.5\n",
    ])
    def test_malformed_symbols_file(self, tmp_path: Path, content: str) -> None:
        (tmp_path / "symbols.yaml").write_text(content)
        with pytest.raises(InvalidInputError):
            ConfigLoader.create(tmp_path)

    def test_validate_symbols_reports_each_symbol(self, tmp_path: Path) -> None:
        (tmp_path / "symbols.yaml").write_text(
            "symbols:\n"
            "  AMD:\n    sizing:\n      default_risk_percent: 0.75\n"
            "  BAD:\n    sizing:\n      entry_reference: vwap\n"
        )
        invalid = ConfigLoader.create(tmp_path).validate_symbols()
        assert list(invalid) == ["BAD"]
        assert invalid["BAD"][0].field == "entry_reference"


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_defaults_are_valid(self) -> None:
        config = ConfigLoader.create().merge_config()
        assert ConfigValidator.validate_config(config) == []

    def test_bundled_symbol_configs_are_valid(self) -> None:
        loader = ConfigLoader.create()
        for symbol in ("TSLA", "GME"):
            assert ConfigValidator.validate_config(loader.merge_config(symbol)) == []

    def test_min_percent_below_total_loss(self) -> None:
        errors = ConfigValidator.validate_validation_params({"min_percent": -150})
        assert len(errors) == 1
        assert errors[0].field == "min_percent"

    def test_inverted_percent_bounds(self) -> None:
        errors = ConfigValidator.validate_validation_params(
            {"min_percent": 50, "max_percent": 10}
        )
        assert [e.field for e in errors] == ["min_percent"]

    @pytest.mark.parametrize("value", [0, -1, 101, "1", True])
    def test_invalid_default_risk_percent(self, value) -> None:
        errors = ConfigValidator.validate_sizing_params({"default_risk_percent": value})
        assert len(errors) == 1
        assert errors[0].field == "default_risk_percent"

    def test_invalid_entry_reference(self) -> None:
        errors = ConfigValidator.validate_sizing_params({"entry_reference": "vwap"})
        assert errors[0].field == "entry_reference"
        assert errors[0].value == "vwap"

    def test_invalid_logging_params(self) -> None:
        errors = ConfigValidator.validate_logging_params({"level": "LOUD", "format_json": "yes"})
        assert [e.field for e in errors] == ["level", "format_json"]

    def test_non_mapping_section(self) -> None:
        errors = ConfigValidator.validate_config({"sizing": "aggressive"})
        assert [e.field for e in errors] == ["sizing"]
