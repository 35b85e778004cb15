"""
Parser data models.

CRITICAL DESIGN DECISIONS:
- "No quote" and "no escape" are expressed as None, never as a sentinel
  character, so any character may appear in the data
- Dialect is frozen and validated once; it is the only state a tokenizer
  shares between calls in its default mode
"""

from __future__ import annotations

from pydantic import BaseModel, model_validator

from .errors import ConfigurationError

# A record is an ordered list of field strings, owned by the caller.
Record = list[str]


class Dialect(BaseModel, frozen=True, extra="forbid"):
    """
    CSV dialect: control characters plus parsing modes.

    Invariants (raised as ConfigurationError, never as a pydantic
    ValidationError):
    - separator is always defined
    - every defined control character is a single character
    - separator, quotechar and escapechar are pairwise distinct
    - always_quote_output requires a quotechar
    """

    separator: str | None = ","
    quotechar: str | None = '"'
    escapechar: str | None = "\\"

    # if true, characters outside the quotes are ignored
    strict_quotes: bool = False
    # if true, trim leading/trailing white space from fields
    trim_whitespace: bool = False
    # if true, a record may end inside an open quoted field
    allow_unbalanced_quotes: bool = False
    # if true, the quotes around a quoted field are kept
    retain_outer_quotes: bool = False
    # if true, escape characters are kept; if false they are removed
    retain_escape_chars: bool = False
    # if true, every emitted field is wrapped in quote characters
    always_quote_output: bool = False
    # if true, "" inside a quoted field stands for one literal quote
    allow_doubled_escaped_quotes: bool = False

    @model_validator(mode="after")
    def _check_invariants(self) -> Dialect:
        if self.separator is None or self.separator == "":
            raise ConfigurationError(
                "The separator character must be defined!", code="SCSV-CFG-002"
            )

        for name in ("separator", "quotechar", "escapechar"):
            value = getattr(self, name)
            if value is not None and len(value) != 1:
                raise ConfigurationError(
                    f"The {name} must be a single character, got {value!r}",
                    code="SCSV-CFG-004",
                )

        defined = [c for c in (self.separator, self.quotechar, self.escapechar) if c is not None]
        if len(set(defined)) != len(defined):
            raise ConfigurationError(
                "The separator, quote, and escape characters must be different!",
                code="SCSV-CFG-001",
            )

        if self.always_quote_output and self.quotechar is None:
            raise ConfigurationError(
                "The quote character must be defined to set always_quote_output=True!",
                code="SCSV-CFG-003",
            )

        return self

    def replace(self, **changes: object) -> Dialect:
        """Return a new, re-validated dialect with some fields changed."""
        data = self.model_dump()
        data.update(changes)
        return Dialect(**data)
