"""Pytest configuration and fixtures for integration tests.

Provides shared fixtures for integration tests that exercise the CLI
against real files on disk.
"""

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture(scope="function")
def temp_test_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for integration tests.

    Yields:
        Path to a fresh temporary directory, removed after the test
    """
    temp_dir = Path(tempfile.mkdtemp(prefix="gmi2md_test_"))
    yield temp_dir

    # Release log file handlers before removing the directory
    app_logger = logging.getLogger("gmi2md")
    for handler in app_logger.handlers:
        handler.close()
    app_logger.handlers.clear()

    shutil.rmtree(temp_dir, ignore_errors=True)
