"""
Character classification.

Maps an incoming character to the class the tokenizer state machine
dispatches on. All functions are pure.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Dialect

LF = "\n"
CR = "\r"


class CharClass(Enum):
    """Class of a character as seen by the tokenizer."""

    QUOTE = auto()
    ESCAPE = auto()
    SEPARATOR = auto()
    TERMINATOR = auto()  # LF or CR, only when detecting record boundaries
    REGULAR = auto()


def is_quote(c: str, dialect: Dialect) -> bool:
    """True if ``c`` is the dialect's quote character (never when unset)."""
    return dialect.quotechar is not None and c == dialect.quotechar


def is_escape(c: str, dialect: Dialect) -> bool:
    """True if ``c`` is the dialect's escape character (never when unset)."""
    return dialect.escapechar is not None and c == dialect.escapechar


def classify(c: str, dialect: Dialect, *, record_boundaries: bool = False) -> CharClass:
    """
    Classify a single character.

    Args:
        c: The character
        dialect: Active dialect
        record_boundaries: Whether LF/CR may end a record (stream variant)

    Returns:
        CharClass of the character
    """
    if is_quote(c, dialect):
        return CharClass.QUOTE
    if is_escape(c, dialect):
        return CharClass.ESCAPE
    if c == dialect.separator:
        return CharClass.SEPARATOR
    if record_boundaries and c in (LF, CR):
        return CharClass.TERMINATOR
    return CharClass.REGULAR
