"""
Configuration management module.

Frozen defaults, YAML-backed per-symbol overrides and parameter validation.
"""
