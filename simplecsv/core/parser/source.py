"""
Character source with one character of pushback.

The tokenizer needs a single character of lookahead (CR followed by LF,
doubled quotes). PushbackReader provides it on top of a string or any text
stream, independent of the stream's own buffering.
"""

from __future__ import annotations

from typing import TextIO

DEFAULT_CHUNK_SIZE = 8192


class PushbackReader:
    """
    Reads characters one at a time from a string or text stream.

    ``read()`` returns ``""`` at end of input, like ``TextIO.read(1)``.
    Read errors of the underlying stream propagate unchanged.

    Text files should be opened with ``newline=""`` so that CRLF reaches
    the tokenizer untranslated.
    """

    def __init__(self, source: str | TextIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if isinstance(source, str):
            self._stream: TextIO | None = None
            self._buffer = source
        else:
            self._stream = source
            self._buffer = ""
        self._chunk_size = chunk_size
        self._pos = 0
        self._pushback: str | None = None
        self._line_no = 1

    @property
    def line_no(self) -> int:
        """1-based number of the physical line the next character is on."""
        return self._line_no

    def read(self) -> str:
        """Consume and return the next character, or ``""`` at end of input."""
        if self._pushback is not None:
            c = self._pushback
            self._pushback = None
        else:
            if self._pos >= len(self._buffer) and not self._fill():
                return ""
            c = self._buffer[self._pos]
            self._pos += 1

        if c == "\n":
            self._line_no += 1
        return c

    def unread(self, c: str) -> None:
        """
        Push one character back so the next read() returns it.

        Raises:
            RuntimeError: If a character is already pushed back
        """
        if self._pushback is not None:
            raise RuntimeError("Pushback buffer is full (depth 1)")
        if c == "":
            return
        self._pushback = c
        if c == "\n":
            self._line_no -= 1

    def peek(self) -> str:
        """Return the next character without consuming it."""
        c = self.read()
        self.unread(c)
        return c

    def consume_if(self, expected: str) -> bool:
        """Consume the next character only if it equals ``expected``."""
        c = self.read()
        if c == expected:
            return True
        self.unread(c)
        return False

    def at_eof(self) -> bool:
        """True if no characters are left."""
        return self.peek() == ""

    def _fill(self) -> bool:
        if self._stream is None:
            return False
        chunk = self._stream.read(self._chunk_size)
        if not chunk:
            return False
        self._buffer = chunk
        self._pos = 0
        return True
