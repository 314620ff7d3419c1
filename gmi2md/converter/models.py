"""Data models for Gemtext conversion.

This module defines the data structures shared by the classifier, renderer,
spacing policy and converter. All models use dataclasses, except the closed
set of line categories which is an Enum.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class LineCategory(Enum):
    """Categories a Gemtext line can be classified into."""

    BLANK = "blank"
    HEADING = "heading"
    LINK = "link"
    LIST = "list"
    QUOTE = "quote"
    PARAGRAPH = "paragraph"
    PREFORMATTED = "preformatted"
    FENCE_TOGGLE = "fence_toggle"


@dataclass
class ConversionState:
    """Mutable state threaded through a single conversion.

    Owned by the caller of GemtextConverter.process_line (normally
    GemtextConverter.convert_document) and discarded when the conversion ends.

    Attributes:
        inside_preformatted: True between an opening and a closing fence line
        previous_category: Category of the previous input line (BLANK at start)
        line_number: Number of input lines processed so far
    """
    inside_preformatted: bool = False
    previous_category: LineCategory = LineCategory.BLANK
    line_number: int = 0


@dataclass
class RenderedLine:
    """A classified line and its Markdown text, before spacing is applied."""
    category: LineCategory
    text: str


@dataclass
class SpacingDecision:
    """What the spacing policy wants emitted around the current line.

    Attributes:
        insert_blank_before: Emit an empty line before the current line
        prepend_break_marker: Prefix the current line with the break marker
    """
    insert_blank_before: bool = False
    prepend_break_marker: bool = False


@dataclass
class ConversionResult:
    """Result of Gemtext to Markdown conversion.

    Contains the converted markdown content along with metadata
    and warnings about suspicious input encountered during conversion.

    Attributes:
        markdown: Converted markdown content
        metadata: Conversion statistics (line_count, category_counts)
        warnings: List of warnings about the input (e.g. unterminated fences)
    """
    markdown: str
    metadata: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
