"""Test fixtures for Gemtext conversion tests.

This module provides sample Gemtext documents paired with the exact
Markdown the converter is expected to produce.
"""

from .sample_gemtext import (
    SAMPLE_GEMTEXT_DOCUMENT,
    EXPECTED_MARKDOWN_DOCUMENT,
    SAMPLE_GEMTEXT_CATEGORY_COUNTS,
    SAMPLE_GEMTEXT_HEADING_TEXT,
    EXPECTED_MARKDOWN_HEADING_TEXT,
    SAMPLE_GEMTEXT_LINKS,
    EXPECTED_MARKDOWN_LINKS,
    SAMPLE_GEMTEXT_LINK_WHITESPACE,
    EXPECTED_MARKDOWN_LINK_WHITESPACE,
    SAMPLE_GEMTEXT_PREFORMATTED,
    EXPECTED_MARKDOWN_PREFORMATTED,
    SAMPLE_GEMTEXT_UNTERMINATED,
    EXPECTED_MARKDOWN_UNTERMINATED,
)

__all__ = [
    "SAMPLE_GEMTEXT_DOCUMENT",
    "EXPECTED_MARKDOWN_DOCUMENT",
    "SAMPLE_GEMTEXT_CATEGORY_COUNTS",
    "SAMPLE_GEMTEXT_HEADING_TEXT",
    "EXPECTED_MARKDOWN_HEADING_TEXT",
    "SAMPLE_GEMTEXT_LINKS",
    "EXPECTED_MARKDOWN_LINKS",
    "SAMPLE_GEMTEXT_LINK_WHITESPACE",
    "EXPECTED_MARKDOWN_LINK_WHITESPACE",
    "SAMPLE_GEMTEXT_PREFORMATTED",
    "EXPECTED_MARKDOWN_PREFORMATTED",
    "SAMPLE_GEMTEXT_UNTERMINATED",
    "EXPECTED_MARKDOWN_UNTERMINATED",
]
