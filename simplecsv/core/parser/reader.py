"""
Record reader.

Thin convenience layer over StreamTokenizer: iterate records, skip
records, or fetch the Nth record of a text.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TextIO

from .errors import InvalidArgumentError, UnterminatedQuotedFieldError
from .source import PushbackReader
from .tokenizer import StreamTokenizer

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .models import Dialect

logger = logging.getLogger(__name__)


class RecordReader:
    """
    Reads records from a string, text stream or PushbackReader.

    Usage:
        with open("data.csv", encoding="utf-8", newline="") as f:
            for record in RecordReader(f, skip_records=1):
                ...
    """

    def __init__(
        self,
        source: str | TextIO | PushbackReader,
        dialect: Dialect | None = None,
        *,
        skip_records: int = 0,
        tokenizer: StreamTokenizer | None = None,
    ) -> None:
        if source is None:
            raise InvalidArgumentError("A source to read records from is required")
        if skip_records < 0:
            raise InvalidArgumentError(f"skip_records must not be negative: {skip_records}")

        self._source = source if isinstance(source, PushbackReader) else PushbackReader(source)
        self._tokenizer = tokenizer if tokenizer is not None else StreamTokenizer(dialect)
        self._records_read = 0
        self._pending_skip = skip_records

    @property
    def dialect(self) -> Dialect:
        return self._tokenizer.dialect

    @property
    def records_read(self) -> int:
        """Number of records consumed so far, skipped ones included."""
        return self._records_read

    @property
    def line_no(self) -> int:
        """Physical line the next record starts on."""
        return self._source.line_no

    def read_record(self) -> list[str] | None:
        """
        Read the next record.

        Returns:
            List of fields, or None at end of input

        Raises:
            UnterminatedQuotedFieldError: Input ended inside quotes
        """
        if self._pending_skip:
            count, self._pending_skip = self._pending_skip, 0
            self.skip(count)

        try:
            record = self._tokenizer.parse_next(self._source)
        except UnterminatedQuotedFieldError as e:
            e.record_no = self._records_read + 1
            raise
        if record is not None:
            self._records_read += 1
        return record

    def skip(self, count: int) -> int:
        """
        Skip up to ``count`` records.

        Returns:
            Number of records actually skipped
        """
        if count < 0:
            raise InvalidArgumentError(f"Cannot skip a negative number of records: {count}")

        skipped = 0
        while skipped < count and self._tokenizer.parse_next(self._source) is not None:
            skipped += 1
        self._records_read += skipped
        logger.debug("Skipped %d of %d requested records", skipped, count)
        return skipped

    def read_all(self) -> list[list[str]]:
        """Read every remaining record."""
        return list(self)

    def __iter__(self) -> Iterator[list[str]]:
        return self

    def __next__(self) -> list[str]:
        record = self.read_record()
        if record is None:
            logger.debug("End of input after %d records", self._records_read)
            raise StopIteration
        return record


def parse_nth_record(
    text: str | None,
    record_no: int,
    dialect: Dialect | None = None,
) -> list[str] | None:
    """
    Parse the Nth record of ``text``.

    Args:
        text: Text holding one or more records
        record_no: 1-based record number
        dialect: CSV dialect (defaults to Dialect())

    Returns:
        The record's fields, or None if text has fewer records

    Raises:
        InvalidArgumentError: If text is None or record_no <= 0
    """
    if text is None:
        raise InvalidArgumentError("I cannot parse a None string")
    if record_no <= 0:
        raise InvalidArgumentError(f"The record number must be greater than zero: {record_no}")

    reader = RecordReader(text, dialect)
    if reader.skip(record_no - 1) < record_no - 1:
        return None
    return reader.read_record()


def parse_first_record(text: str | None, dialect: Dialect | None = None) -> list[str] | None:
    """Parse the first record of ``text``."""
    return parse_nth_record(text, 1, dialect)
