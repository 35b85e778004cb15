"""
Parser error models.

This module defines the exceptions raised by the tokenizer and the
structured error reports they convert to. All errors use codes from the
SCSV-XXX-NNN taxonomy.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Severity(Enum):
    """Error severity levels."""

    FATAL = "fatal"  # Nothing can be parsed with this setup
    ERROR = "error"  # The current call failed, the parser stays usable


class Location(BaseModel, frozen=True):
    """Error location in the input."""

    file: str | None = None
    line_no: int | None = None
    record_no: int | None = None

    def __str__(self) -> str:
        """Format location for display."""
        parts = []
        if self.file:
            parts.append(self.file)
        if self.line_no is not None:
            parts.append(f"line {self.line_no}")
        if self.record_no is not None:
            parts.append(f"record {self.record_no}")
        return ", ".join(parts) if parts else "<unknown>"


class ParserError(BaseModel, frozen=True):
    """
    Structured parser error report.

    Error domains:
    - SCSV-CFG-*: Dialect configuration errors
    - SCSV-CSV-*: Tokenization errors
    - SCSV-ARG-*: Invalid arguments
    - SCSV-IO-*: Input errors
    """

    code: str = Field(
        pattern=r"^SCSV-[A-Z]{2,5}-\d{3}$",
        description="Error code, e.g., 'SCSV-CSV-001'",
    )
    severity: Severity
    title: str = Field(description="Short error title")
    message: str = Field(description="Detailed error message")
    location: Location = Field(
        default_factory=Location,
        description="Where the error occurred",
    )

    @classmethod
    def fatal(
        cls,
        code: str,
        title: str,
        message: str,
        *,
        location: Location | None = None,
    ) -> ParserError:
        """Create a FATAL severity error."""
        return cls(
            code=code,
            severity=Severity.FATAL,
            title=title,
            message=message,
            location=location or Location(),
        )

    @classmethod
    def error(
        cls,
        code: str,
        title: str,
        message: str,
        *,
        location: Location | None = None,
    ) -> ParserError:
        """Create an ERROR severity error."""
        return cls(
            code=code,
            severity=Severity.ERROR,
            title=title,
            message=message,
            location=location or Location(),
        )

    def __str__(self) -> str:
        """Format error for display."""
        return f"[{self.code}] {self.severity.value.upper()}: {self.title} - {self.message}"


# =============================================================================
# Exceptions
# =============================================================================


class CsvError(Exception):
    """Base class for all simplecsv errors."""

    code: str = "SCSV-CSV-000"
    title: str = "CSV error"
    severity: Severity = Severity.ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def location(self) -> Location:
        """Where the error occurred, as far as it is known."""
        return Location()

    def to_report(self, file: str | None = None) -> ParserError:
        """Convert the exception into a structured error report."""
        location = self.location()
        if file is not None:
            location = location.model_copy(update={"file": file})
        return ParserError(
            code=self.code,
            severity=self.severity,
            title=self.title,
            message=self.message,
            location=location,
        )


class ConfigurationError(CsvError):
    """Dialect invariant violated; the dialect is never created."""

    code = "SCSV-CFG-001"
    title = "Invalid dialect"
    severity = Severity.FATAL

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code


class UnterminatedQuotedFieldError(CsvError):
    """A record ended while a quoted field was still open."""

    code = "SCSV-CSV-001"
    title = "Unterminated quoted field"

    def __init__(
        self,
        message: str = "Un-terminated quoted field at end of CSV record",
        *,
        line_no: int | None = None,
        record_no: int | None = None,
    ) -> None:
        self.line_no = line_no
        self.record_no = record_no
        if line_no is not None:
            message = f"Line {line_no}: {message}"
        super().__init__(message)

    def location(self) -> Location:
        return Location(line_no=self.line_no, record_no=self.record_no)


class InvalidArgumentError(CsvError, ValueError):
    """Missing input or an out-of-range record index."""

    code = "SCSV-ARG-001"
    title = "Invalid argument"


# =============================================================================
# Error Codes Registry
# =============================================================================

ERROR_CODES: dict[str, str] = {
    # Configuration errors
    "SCSV-CFG-001": "Separator, quote and escape characters must be different",
    "SCSV-CFG-002": "Separator character must be defined",
    "SCSV-CFG-003": "Quote character required for always-quote output",
    "SCSV-CFG-004": "Control characters must be exactly one character long",
    "SCSV-CFG-005": "Unknown or malformed dialect definition",
    # CSV errors
    "SCSV-CSV-001": "Unexpected end of record in quoted field",
    # Argument errors
    "SCSV-ARG-001": "Missing input or non-positive record number",
    # Input errors
    "SCSV-IO-001": "Input could not be read",
}


def get_error_description(code: str) -> str | None:
    """Get the description for an error code."""
    return ERROR_CODES.get(code)
