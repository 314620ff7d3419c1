"""Command-line interface for Gemtext to Markdown conversion.

This package provides the `gmi2md` CLI tool that reads a Gemtext document
from a file or standard input and writes the converted Markdown to
standard output, with logging and error reporting on standard error.
"""

from .models import ExitCode
from .errors import (
    CLIError,
    InputDecodeError,
    InputReadError,
)

__all__ = [
    'ExitCode',
    'CLIError',
    'InputDecodeError',
    'InputReadError',
]
