"""
Dialect presets.

Named dialects loaded from YAML.

Usage:
    from simplecsv.core.dialects import get_dialect

    dialect = get_dialect("excel")
"""

from .registry import (
    DIALECTS_ENV_VAR,
    DialectPreset,
    DialectRegistry,
    get_dialect,
    get_registry,
    reset_registry,
)

__all__ = [
    "DIALECTS_ENV_VAR",
    "DialectPreset",
    "DialectRegistry",
    "get_dialect",
    "get_registry",
    "reset_registry",
]
