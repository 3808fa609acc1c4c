#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from trade_risk.config.loader import ConfigLoader
from trade_risk.config.validation import ConfigError, ConfigValidator
from trade_risk.errors import TradeRiskError


def report(label: str, errors: List[ConfigError]) -> bool:
    """Print validation errors for one merged configuration."""
    if not errors:
        print(f"✅ {label} configuration is valid")
        return True

    print(f"❌ {label}: {len(errors)} validation errors")
    for error in errors:
        print(f"  • {error.field}: {error.message} (value: {error.value})")
    return False


def main():
    """Main validation function."""
    print("🔍 Validating trade risk configuration...")

    try:
        loader = ConfigLoader.create()
    except TradeRiskError as e:
        print(f"❌ Cannot read symbol table: {e}")
        sys.exit(1)

    print(f"\n📊 Validating defaults...")
    all_valid = report("defaults", ConfigValidator.validate_config(loader.merge_config()))

    invalid = loader.validate_symbols()
    for symbol in loader.symbols:
        print(f"\n📊 Validating {symbol}...")
        all_valid = report(symbol, invalid.get(symbol, [])) and all_valid

    if all_valid:
        print(f"\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print(f"\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
