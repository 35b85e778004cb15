"""
CSV tokenizer.

A character-level state machine splits delimited text into fields under a
configurable Dialect. Two variants share the same dispatch:

- LineTokenizer parses one string that is already a single record.
  LF and CR are ordinary data.
- StreamTokenizer reads from a PushbackReader and finds record boundaries
  itself: LF or CRLF outside quotes ends a record, so quoted fields may
  span several physical lines.

Both allocate their ParseState and FieldAccumulator per call by default,
which makes one instance safe to share between threads. With
``reuse_scratch=True`` a single scratch pair is kept on the instance; such
an instance must only be used by one thread at a time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from .classifier import CR, LF, CharClass, classify
from .errors import InvalidArgumentError, UnterminatedQuotedFieldError
from .fields import FieldAccumulator, normalize_field, unescape
from .models import Dialect
from .source import PushbackReader
from .state import Action, ParseState

if TYPE_CHECKING:
    from collections.abc import Iterator


class Tokenizer:
    """Dispatch core shared by the line and stream tokenizers."""

    # Whether LF/CR end a record
    record_boundaries: bool = False

    def __init__(self, dialect: Dialect | None = None, *, reuse_scratch: bool = False) -> None:
        self.dialect = dialect if dialect is not None else Dialect()
        self.reuse_scratch = reuse_scratch
        self._scratch: tuple[ParseState, FieldAccumulator] | None = (
            (ParseState(), FieldAccumulator()) if reuse_scratch else None
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.dialect!r}, reuse_scratch={self.reuse_scratch})"

    # -------------------------------------------------------------------------
    # Record scan
    # -------------------------------------------------------------------------

    def _acquire(self) -> tuple[ParseState, FieldAccumulator]:
        if self._scratch is None:
            return ParseState(), FieldAccumulator()
        state, field = self._scratch
        state.reset()
        field.clear()
        return state, field

    def _scan(self, source: PushbackReader, c: str, line_no: int | None = None) -> list[str]:
        """
        Scan one record, starting with the already consumed character ``c``.

        Args:
            source: Remaining input
            c: First character of the record ("" for an empty record)
            line_no: Line the record starts on, for error reports

        Returns:
            The record's fields (always at least one)

        Raises:
            UnterminatedQuotedFieldError: Record ended inside quotes and
                unbalanced quotes are not allowed
        """
        dialect = self.dialect
        doubled_quotes = dialect.allow_doubled_escaped_quotes
        state, field = self._acquire()
        fields: list[str] = []

        while c:
            char_class = classify(c, dialect, record_boundaries=self.record_boundaries)

            if (
                doubled_quotes
                and char_class is CharClass.QUOTE
                and state.in_quotes
                and source.consume_if(c)
            ):
                # "" inside quotes is one literal quote; quoting stays open
                field.append(c)
                state.escape_found(False)
                c = source.read()
                continue

            transition = state.lookup(char_class)
            action = transition.action

            # A CR not followed by LF is data
            if action is Action.END_RECORD and c == CR and not source.consume_if(LF):
                action = Action.LITERAL

            if action is Action.QUOTE:
                self._handle_quote(state, field)
            elif action is Action.ESCAPE:
                self._handle_escape(state, field)
            elif action is Action.LITERAL:
                self._handle_regular(state, field, c)
            elif action is Action.END_FIELD:
                fields.append(self._handle_end_of_token(state, field))
            else:
                break

            state.enter(transition)
            c = source.read()

        if state.in_quotes and not dialect.allow_unbalanced_quotes:
            raise UnterminatedQuotedFieldError(line_no=line_no)

        fields.append(self._handle_end_of_token(state, field))
        return fields

    # -------------------------------------------------------------------------
    # Character handlers (they see the state before the transition)
    # -------------------------------------------------------------------------

    def _handle_quote(self, state: ParseState, field: FieldAccumulator) -> None:
        quotechar = self.dialect.quotechar
        if self.dialect.strict_quotes:
            if state.in_quotes:
                if state.in_escape:
                    field.append(quotechar)
            elif not field:
                # first quote of the field; the closing one is added at field end
                field.append(quotechar)
        else:
            # outer quotes are kept while scanning and removed by normalize_field
            field.append(quotechar)

    def _handle_escape(self, state: ParseState, field: FieldAccumulator) -> None:
        dialect = self.dialect
        if dialect.retain_escape_chars and self._keeps_data(state):
            field.append(dialect.escapechar)

    def _handle_regular(self, state: ParseState, field: FieldAccumulator, c: str) -> None:
        if not self._keeps_data(state):
            return
        if state.in_escape and not self.dialect.retain_escape_chars:
            field.append(unescape(c))
        else:
            field.append(c)

    def _keeps_data(self, state: ParseState) -> bool:
        # strict mode drops everything outside quotes
        return not self.dialect.strict_quotes or state.in_quotes

    def _handle_end_of_token(self, state: ParseState, field: FieldAccumulator) -> str:
        dialect = self.dialect
        if dialect.strict_quotes and field:
            field.append(dialect.quotechar)
        token = normalize_field(field.getvalue(), dialect)
        state.escape_found(False)
        field.clear()
        return token


class LineTokenizer(Tokenizer):
    """Parses a single, already delimited record."""

    record_boundaries = False

    def parse(self, line: str | None) -> list[str] | None:
        """
        Parse one record.

        Args:
            line: Text of the record, without line terminator

        Returns:
            List of fields, or None if ``line`` is None

        Raises:
            UnterminatedQuotedFieldError: Quote left open (unless allowed)
        """
        if line is None:
            return None
        source = PushbackReader(line)
        return self._scan(source, source.read())


class StreamTokenizer(Tokenizer):
    """Pulls records one at a time from a character source."""

    record_boundaries = True

    def parse_next(self, source: PushbackReader) -> list[str] | None:
        """
        Parse the next record from ``source``.

        A record ends at LF or CRLF outside quotes, or at end of input.

        Args:
            source: Character source, positioned at the start of a record

        Returns:
            List of fields, or None when the source is exhausted

        Raises:
            InvalidArgumentError: If source is not a PushbackReader
            UnterminatedQuotedFieldError: Input ended inside quotes
        """
        if not isinstance(source, PushbackReader):
            raise InvalidArgumentError(
                f"parse_next() needs a PushbackReader, got {type(source).__name__}"
            )

        line_no = source.line_no
        c = source.read()
        if not c:
            return None
        return self._scan(source, c, line_no=line_no)

    def parse(self, text: str | None) -> list[str] | None:
        """Parse the first record of ``text``; None for None or empty text."""
        if text is None:
            return None
        return self.parse_next(PushbackReader(text))

    def iter_records(self, source: str | TextIO | PushbackReader) -> Iterator[list[str]]:
        """Yield every remaining record of ``source``."""
        reader = source if isinstance(source, PushbackReader) else PushbackReader(source)
        while True:
            record = self.parse_next(reader)
            if record is None:
                return
            yield record
