"""
Field accumulation and normalization.

Characters of the field being scanned are collected raw in a
FieldAccumulator; outer quotes are always kept while scanning. When the
field ends, normalize_field() applies the dialect's quote retention and
whitespace rules to produce the emitted string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Dialect

# Characters following an escape character, when escapes are not retained
ESCAPE_SEQUENCES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
}


class FieldAccumulator:
    """
    Growable buffer for the raw contents of one field.

    In strict-quote mode an empty buffer means no quote has been seen yet
    for the field.
    """

    def __init__(self) -> None:
        self._chars: list[str] = []

    def append(self, c: str) -> None:
        self._chars.append(c)

    def clear(self) -> None:
        self._chars.clear()

    def getvalue(self) -> str:
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def __bool__(self) -> bool:
        return bool(self._chars)

    def __repr__(self) -> str:
        return f"FieldAccumulator({self.getvalue()!r})"


def unescape(c: str) -> str:
    """Character produced by ``c`` when it follows a dropped escape."""
    return ESCAPE_SEQUENCES.get(c, c)


def strip_outer_quotes(text: str, quotechar: str | None) -> str:
    """
    Remove one pair of quotes if they are the first and last characters.

    No whitespace is skipped: ``' "a" '`` is returned unchanged.
    """
    if (
        quotechar is not None
        and len(text) >= 2
        and text[0] == quotechar
        and text[-1] == quotechar
    ):
        return text[1:-1]
    return text


def normalize_field(raw: str, dialect: Dialect) -> str:
    """
    Turn raw field contents into the emitted field.

    Args:
        raw: Field contents as scanned, outer quotes included
        dialect: Active dialect

    Returns:
        The final field string
    """
    trim = dialect.trim_whitespace

    if dialect.always_quote_output:
        text = raw.strip() if trim else raw
        return f"{dialect.quotechar}{text}{dialect.quotechar}"

    if dialect.retain_outer_quotes:
        return raw.strip() if trim else raw

    if trim:
        # trim, drop the quotes, then trim what was inside them
        return strip_outer_quotes(raw.strip(), dialect.quotechar).strip()

    return strip_outer_quotes(raw, dialect.quotechar)
