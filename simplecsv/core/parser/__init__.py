"""
CSV Parser Core.

Public API for tokenizing delimited text.

Usage:
    from simplecsv.core.parser import Dialect, parse_line, parse_file

    parse_line('"a,b",c')                      # ['a,b', 'c']
    parse_line("a;b", Dialect(separator=";"))  # ['a', 'b']

    for record in parse_file("export.csv"):
        print(record)

API Functions:
    parse_line(line, dialect) -> list[str] | None
    parse_text(text, dialect) -> list[list[str]]
    parse_file(path, dialect, encoding) -> Iterator[list[str]]
    parse_nth_record(text, n, dialect) -> list[str] | None
    parse_first_record(text, dialect) -> list[str] | None
    detect_encoding(data) -> str
    detect_file_encoding(path) -> str
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .classifier import CharClass, classify, is_escape, is_quote
from .encoding import detect_encoding, detect_file_encoding
from .errors import (
    ConfigurationError,
    CsvError,
    InvalidArgumentError,
    Location,
    ParserError,
    Severity,
    UnterminatedQuotedFieldError,
)
from .fields import FieldAccumulator, normalize_field
from .models import Dialect, Record
from .reader import RecordReader, parse_first_record, parse_nth_record
from .source import PushbackReader
from .state import TRANSITIONS, Action, ParseState, Transition
from .tokenizer import LineTokenizer, StreamTokenizer, Tokenizer

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


def parse_line(line: str | None, dialect: Dialect | None = None) -> list[str] | None:
    """
    Parse a single record given as one string.

    Args:
        line: The record (LF and CR are treated as data)
        dialect: CSV dialect (defaults to Dialect())

    Returns:
        List of fields, or None if line is None
    """
    return LineTokenizer(dialect).parse(line)


def parse_text(text: str, dialect: Dialect | None = None) -> list[list[str]]:
    """
    Parse every record of a text.

    Records end at LF or CRLF outside quotes.

    Args:
        text: The full text
        dialect: CSV dialect (defaults to Dialect())

    Returns:
        List of records
    """
    if text is None:
        raise InvalidArgumentError("I cannot parse a None string")
    return list(StreamTokenizer(dialect).iter_records(text))


def parse_file(
    path: Path | str,
    dialect: Dialect | None = None,
    *,
    encoding: str | None = None,
    skip_records: int = 0,
) -> Iterator[list[str]]:
    """
    Stream the records of a CSV file.

    Args:
        path: Path to the file
        dialect: CSV dialect (defaults to Dialect())
        encoding: File encoding; detected from the first bytes if None
        skip_records: Number of leading records to skip

    Returns:
        Iterator yielding one list of fields per record

    Raises:
        FileNotFoundError: If file does not exist
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if encoding is None:
        encoding = detect_file_encoding(path)
        logger.debug("Detected encoding %s for %s", encoding, path)

    return _iter_file(path, encoding, dialect, skip_records)


def _iter_file(
    path: Path, encoding: str, dialect: Dialect | None, skip_records: int
) -> Iterator[list[str]]:
    # newline="" keeps CRLF intact for the tokenizer
    with path.open(encoding=encoding, errors="replace", newline="") as f:
        yield from RecordReader(f, dialect, skip_records=skip_records)


# =============================================================================
# Public API Exports
# =============================================================================

__all__ = [
    "TRANSITIONS",
    "Action",
    "CharClass",
    "ConfigurationError",
    "CsvError",
    # Models
    "Dialect",
    "FieldAccumulator",
    "InvalidArgumentError",
    "LineTokenizer",
    "Location",
    "ParseState",
    "ParserError",
    "PushbackReader",
    "Record",
    "RecordReader",
    "Severity",
    "StreamTokenizer",
    "Tokenizer",
    "Transition",
    "UnterminatedQuotedFieldError",
    "classify",
    "detect_encoding",
    "detect_file_encoding",
    "is_escape",
    "is_quote",
    "normalize_field",
    "parse_file",
    "parse_first_record",
    # Main functions
    "parse_line",
    "parse_nth_record",
    "parse_text",
]
