"""
JSON output adapter.

Renders records as JSON for machine processing.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TextIO

from simplecsv.cli.output.base import OutputAdapter, OutputFormat

if TYPE_CHECKING:
    from simplecsv.core.parser.errors import ParserError


class JsonOutput(OutputAdapter):
    """JSON output adapter."""

    format = OutputFormat.JSON

    def __init__(self, stream: TextIO | None = None, color: bool = False, indent: int = 2):
        super().__init__(stream=stream, color=False)  # Never colorize JSON
        self.indent = indent

    def render_records(self, records: list[list[str]], first_record_no: int = 1) -> str:
        """Render records as JSON."""
        output: dict[str, Any] = {
            "first_record": first_record_no,
            "record_count": len(records),
            "records": records,
        }
        return json.dumps(output, indent=self.indent, ensure_ascii=False)

    def render_error(self, error: ParserError) -> str:
        """Render an error report as JSON."""
        output = {
            "error": {
                "code": error.code,
                "severity": error.severity.value,
                "title": error.title,
                "message": error.message,
                "location": error.location.model_dump(exclude_none=True),
            }
        }
        return json.dumps(output, indent=self.indent, ensure_ascii=False)
