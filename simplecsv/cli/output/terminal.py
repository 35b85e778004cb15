"""
Terminal output adapter.

Renders one line per record, fields shown as Python literals so that
embedded separators, quotes and line breaks stay visible.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from simplecsv.cli.output.base import OutputAdapter, OutputFormat

if TYPE_CHECKING:
    from simplecsv.core.parser.errors import ParserError


def _supports_unicode() -> bool:
    """Check if terminal supports Unicode."""
    try:
        "✖".encode(sys.stdout.encoding or "utf-8")
        return True
    except (UnicodeEncodeError, LookupError):
        return False


SEVERITY_COLORS = {
    "fatal": "bold red",
    "error": "red",
}

ERROR_SYMBOL_UNICODE = "✖"
ERROR_SYMBOL_ASCII = "X"


class TerminalOutput(OutputAdapter):
    """Terminal output with ANSI colors."""

    format = OutputFormat.TERMINAL

    def __init__(self, stream: TextIO | None = None, color: bool = True):
        super().__init__(stream=stream, color=color)
        self._use_color = color and self._is_tty()
        self._error_symbol = ERROR_SYMBOL_UNICODE if _supports_unicode() else ERROR_SYMBOL_ASCII

    def _is_tty(self) -> bool:
        """Check if output is a TTY."""
        return hasattr(self.stream, "isatty") and self.stream.isatty()

    def render_records(self, records: list[list[str]], first_record_no: int = 1) -> str:
        """Render records, one per line, prefixed with their number."""
        if not records:
            return self._style("No records.", "dim")

        width = len(str(first_record_no + len(records) - 1))
        lines: list[str] = []
        for offset, record in enumerate(records):
            number = self._style(f"{first_record_no + offset:>{width}}", "dim")
            fields = ", ".join(repr(f) for f in record)
            lines.append(f"{number}  [{fields}]")
        return "\n".join(lines)

    def render_error(self, error: ParserError) -> str:
        """Render an error report."""
        severity = error.severity.value
        color = SEVERITY_COLORS.get(severity, "red")
        symbol = self._style(self._error_symbol, color)
        code = self._style(error.code, "dim")
        return f"{symbol} {error.location}: {error.title} - {error.message} [{code}]"

    def _style(self, text: str, style: str) -> str:
        """Apply style to text if colors are enabled."""
        if not self._use_color:
            return text

        codes = {
            "bold": "\033[1m",
            "dim": "\033[2m",
            "red": "\033[31m",
            "bold red": "\033[1;31m",
        }
        reset = "\033[0m"

        code = codes.get(style, "")
        if code:
            return f"{code}{text}{reset}"
        return text
