"""
CLI exit codes.

Maps library errors to process exit codes.
"""

from __future__ import annotations

from enum import IntEnum

from simplecsv.core.parser.errors import (
    ConfigurationError,
    CsvError,
    InvalidArgumentError,
)


class ExitCode(IntEnum):
    """CLI exit codes following Unix conventions."""

    SUCCESS = 0  # All records parsed
    ERROR = 1  # Malformed record (e.g. unterminated quoted field)
    FATAL = 2  # Input could not be read
    USAGE = 64  # Command line usage error
    CONFIG = 78  # Configuration error


def exit_code_for(error: BaseException) -> ExitCode:
    """Determine exit code for an error raised while parsing."""
    if isinstance(error, ConfigurationError):
        return ExitCode.CONFIG
    if isinstance(error, InvalidArgumentError):
        return ExitCode.USAGE
    if isinstance(error, CsvError):
        return ExitCode.ERROR
    return ExitCode.FATAL
