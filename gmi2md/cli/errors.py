"""Typed exception hierarchy for CLI-related errors.

This module defines all custom exceptions used by the CLI.
All exceptions inherit from CLIError base class for easy catching and
include descriptive messages with context to help with debugging.
"""

from typing import Optional

from gmi2md.errors import Gmi2mdError


class CLIError(Gmi2mdError):
    """Base exception for all CLI-related errors."""
    pass


class InputReadError(CLIError):
    """Raised when the input file cannot be read."""

    def __init__(self, file_path: str, reason: Optional[str] = None):
        message = f"Cannot read input file {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.reason = reason


class InputDecodeError(CLIError):
    """Raised when the input is not valid UTF-8."""

    def __init__(self, source: str, position: int, reason: str):
        super().__init__(
            f"Input from {source} is not valid UTF-8 at byte {position}: {reason}"
        )
        self.source = source
        self.position = position
        self.reason = reason
