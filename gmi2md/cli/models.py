"""Data models for CLI operations."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Conversion completed and output was written
    - GENERAL_ERROR (1): Unexpected failure during the run
    - INPUT_ERROR (2): Input file unreadable or input is not valid UTF-8

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    INPUT_ERROR = 2
