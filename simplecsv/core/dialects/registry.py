"""
Dialect Registry.

Central registry for named dialect presets.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from simplecsv.core.parser.errors import ConfigurationError
from simplecsv.core.parser.models import Dialect

from .loader import load_dialect_entries, split_entry

logger = logging.getLogger(__name__)

# Environment variable naming an extra YAML file with dialect presets
DIALECTS_ENV_VAR = "SIMPLECSV_DIALECTS"

BUILTIN_FILE = Path(__file__).parent / "builtin.yaml"


class DialectPreset(BaseModel, frozen=True):
    """A named, validated dialect."""

    name: str
    label: str = ""
    dialect: Dialect


class DialectRegistry:
    """
    Central registry for dialect presets.

    Loads presets from:
    1. The built-in YAML file
    2. The file named by SIMPLECSV_DIALECTS
    3. Files passed to load_file()
    """

    def __init__(self) -> None:
        self.presets: dict[str, DialectPreset] = {}
        self._loaded = False

    def register(self, name: str, dialect: Dialect, label: str = "") -> DialectPreset:
        """Register (or replace) a preset."""
        preset = DialectPreset(name=name, label=label, dialect=dialect)
        self.presets[name] = preset
        return preset

    def get(self, name: str) -> Dialect | None:
        """Get a preset's dialect by name."""
        preset = self.presets.get(name)
        return preset.dialect if preset is not None else None

    def names(self) -> list[str]:
        return sorted(self.presets)

    def load_file(self, path: Path | str) -> list[str]:
        """
        Load presets from a YAML file.

        Entries may inherit from presets already registered or from other
        entries of the same file via ``base``.

        Returns:
            Names of the presets loaded

        Raises:
            ConfigurationError: Malformed file, unknown base, or a preset
                that violates the dialect invariants
        """
        path = Path(path)
        entries = load_dialect_entries(path)
        loaded: list[str] = []
        for name in entries:
            if name not in loaded:
                self._resolve(name, entries, path, loaded, chain=())
        return loaded

    def _resolve(
        self,
        name: str,
        entries: dict[str, dict[str, Any]],
        path: Path,
        loaded: list[str],
        chain: tuple[str, ...],
    ) -> Dialect:
        if name in chain:
            cycle = " -> ".join((*chain, name))
            raise ConfigurationError(
                f"Dialect inheritance cycle in {path}: {cycle}", code="SCSV-CFG-005"
            )

        base_name, label, fields = split_entry(entries[name])

        base_data: dict[str, Any] = {}
        if base_name is not None:
            if base_name in entries and base_name not in loaded:
                base = self._resolve(base_name, entries, path, loaded, (*chain, name))
            else:
                base = self.get(base_name)
            if base is None:
                raise ConfigurationError(
                    f"Dialect '{name}' in {path} extends unknown dialect '{base_name}'",
                    code="SCSV-CFG-005",
                )
            base_data = base.model_dump()

        try:
            dialect = Dialect(**{**base_data, **fields})
        except ConfigurationError as e:
            raise ConfigurationError(f"Dialect '{name}' in {path}: {e.message}", code=e.code) from e
        except ValidationError as e:
            raise ConfigurationError(
                f"Dialect '{name}' in {path}: {e}", code="SCSV-CFG-005"
            ) from e

        self.register(name, dialect, label)
        loaded.append(name)
        return dialect

    def load_builtin(self) -> None:
        """Load built-in presets and the SIMPLECSV_DIALECTS file."""
        if self._loaded:
            return

        self.load_file(BUILTIN_FILE)

        extra = os.environ.get(DIALECTS_ENV_VAR)
        if extra:
            logger.debug("Loading dialects from %s=%s", DIALECTS_ENV_VAR, extra)
            self.load_file(extra)

        self._loaded = True


# Global registry instance
_registry: DialectRegistry | None = None


def get_registry() -> DialectRegistry:
    """Get the global dialect registry."""
    global _registry
    if _registry is None:
        # published only once loading succeeded
        registry = DialectRegistry()
        registry.load_builtin()
        _registry = registry
    return _registry


def reset_registry() -> None:
    """Reset the global registry (for testing)."""
    global _registry
    _registry = None


def get_dialect(name: str) -> Dialect:
    """
    Look up a preset by name.

    Raises:
        ConfigurationError: If no preset has that name
    """
    dialect = get_registry().get(name)
    if dialect is None:
        available = ", ".join(get_registry().names())
        raise ConfigurationError(
            f"Unknown dialect '{name}'. Available: {available}", code="SCSV-CFG-005"
        )
    return dialect
