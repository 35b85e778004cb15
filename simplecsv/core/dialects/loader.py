"""
Dialect loader.

Loads named dialect presets from YAML files.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import yaml

from simplecsv.core.parser.errors import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

# Keys of a preset entry that are not Dialect fields
META_KEYS = frozenset({"base", "label"})


def load_dialect_entries(path: Path) -> dict[str, dict[str, Any]]:
    """
    Load raw dialect entries from a YAML file.

    YAML format:
    ```yaml
    dialects:
      excel-semicolon:
        base: excel
        label: "Excel with semicolons"
        separator: ";"
        trim_whitespace: true
    ```

    Args:
        path: YAML file

    Returns:
        Mapping of preset name to its raw settings

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the file is not a valid dialect file
    """
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Cannot read dialect file {path}: {e}", code="SCSV-CFG-005"
            ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Dialect file {path} must contain a mapping", code="SCSV-CFG-005"
        )

    entries = data.get("dialects") or {}
    if not isinstance(entries, dict):
        raise ConfigurationError(
            f"'dialects' in {path} must be a mapping of names to settings",
            code="SCSV-CFG-005",
        )

    result: dict[str, dict[str, Any]] = {}
    for name, settings in entries.items():
        if settings is None:
            settings = {}
        if not isinstance(settings, dict):
            raise ConfigurationError(
                f"Dialect '{name}' in {path} must be a mapping", code="SCSV-CFG-005"
            )
        result[str(name)] = settings

    logger.debug("Loaded %d dialect entries from %s", len(result), path)
    return result


def split_entry(settings: dict[str, Any]) -> tuple[str | None, str, dict[str, Any]]:
    """Split a raw entry into (base, label, dialect fields)."""
    base = settings.get("base")
    label = settings.get("label", "")
    fields = {k: v for k, v in settings.items() if k not in META_KEYS}
    return base, str(label), fields
