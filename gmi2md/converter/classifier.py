"""Line classifier for Gemtext documents.

Maps a single right-trimmed line, plus the current preformatted-mode flag,
to a LineCategory. Rules are evaluated in order and the first match wins;
PARAGRAPH is the unconditional default so every line gets a category.
"""

import re
from typing import Callable, Tuple

from .models import LineCategory

FENCE_DELIMITER = "```"
LINK_PREFIX = "=>"
LIST_PREFIX = "* "
QUOTE_PREFIX = ">"

# One to three '#' followed by a single space
HEADING_PATTERN = re.compile(r"^#{1,3} ")


def _is_blank(line: str) -> bool:
    return line == ""


def _is_heading(line: str) -> bool:
    return HEADING_PATTERN.match(line) is not None


def _is_link(line: str) -> bool:
    return line.startswith(LINK_PREFIX)


def _is_list(line: str) -> bool:
    return line.startswith(LIST_PREFIX)


def _is_quote(line: str) -> bool:
    return line.startswith(QUOTE_PREFIX)


# Checked in order outside preformatted blocks
CLASSIFICATION_RULES: Tuple[Tuple[Callable[[str], bool], LineCategory], ...] = (
    (_is_blank, LineCategory.BLANK),
    (_is_heading, LineCategory.HEADING),
    (_is_link, LineCategory.LINK),
    (_is_list, LineCategory.LIST),
    (_is_quote, LineCategory.QUOTE),
)


def is_fence(trimmed_line: str) -> bool:
    """Return True if the line is exactly the preformatted fence delimiter."""
    return trimmed_line == FENCE_DELIMITER


def classify(trimmed_line: str, inside_preformatted: bool) -> LineCategory:
    """Classify a Gemtext line.

    Args:
        trimmed_line: The input line with trailing whitespace removed
        inside_preformatted: Whether a preformatted block is currently open

    Returns:
        The LineCategory for the line. Never raises.

    Examples:
        >>> classify("# Title", False)
        <LineCategory.HEADING: 'heading'>
        >>> classify("# Title", True)
        <LineCategory.PREFORMATTED: 'preformatted'>
        >>> classify("```", True)
        <LineCategory.FENCE_TOGGLE: 'fence_toggle'>
    """
    if is_fence(trimmed_line):
        return LineCategory.FENCE_TOGGLE

    # Inside a block, content is passed through without pattern matching
    if inside_preformatted:
        return LineCategory.PREFORMATTED

    for predicate, category in CLASSIFICATION_RULES:
        if predicate(trimmed_line):
            return category

    return LineCategory.PARAGRAPH
