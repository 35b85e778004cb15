"""
Output adapters for CLI.

Provides different output formats: terminal, JSON.
"""

from simplecsv.cli.output.base import OutputAdapter, OutputFormat, get_output_adapter
from simplecsv.cli.output.json import JsonOutput
from simplecsv.cli.output.terminal import TerminalOutput

__all__ = [
    "JsonOutput",
    "OutputAdapter",
    "OutputFormat",
    "TerminalOutput",
    "get_output_adapter",
]
