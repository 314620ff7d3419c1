"""Root pytest configuration for all tests.

This conftest applies to all test types (unit and integration).
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_gmi2md_logger():
    """Detach handlers added by CLI runs so tests do not share log output."""
    yield
    app_logger = logging.getLogger("gmi2md")
    for handler in app_logger.handlers:
        handler.close()
    app_logger.handlers.clear()
    app_logger.setLevel(logging.NOTSET)
