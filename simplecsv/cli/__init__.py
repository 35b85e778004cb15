"""
CLI for simplecsv.

Command-line interface for tokenizing CSV files.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from simplecsv.cli.context import ExitCode, exit_code_for

if TYPE_CHECKING:
    from typer import Typer

    app: Typer


def __getattr__(name: str) -> Any:
    if name == "app":
        from simplecsv.cli.main import app as _app

        return _app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "ExitCode",
    "app",
    "exit_code_for",
]
