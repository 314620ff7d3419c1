"""Gemtext to Markdown converter.

This module provides the GemtextConverter which drives the classifier,
renderer and spacing policy over every line of a Gemtext document.
"""

import logging
from collections import Counter
from typing import List

from .classifier import classify
from .models import ConversionResult, ConversionState, LineCategory, RenderedLine
from .renderer import render
from .spacing import SpacingPolicy

logger = logging.getLogger(__name__)

BREAK_MARKER = "<br>"


class GemtextConverter:
    """Converts Gemtext documents to Markdown.

    The converter itself holds only constructor-time options. All per-document
    state lives in a ConversionState created for each call, so one instance
    can convert any number of documents.

    Attributes:
        br_enabled: Join consecutive links with the break marker
        separator: Break marker text prepended to joined link lines
        spacing: SpacingPolicy built from br_enabled

    Example:
        >>> converter = GemtextConverter()
        >>> converter.convert("# Title\\nSome text")
        '# Title\\n\\nSome text'
    """

    def __init__(self, br_enabled: bool = True, separator: str = BREAK_MARKER):
        """Initialize GemtextConverter.

        Args:
            br_enabled: Use break markers between consecutive links instead
                of blank lines
            separator: Break marker text (defaults to "<br>")
        """
        self.br_enabled = br_enabled
        self.separator = separator
        self.spacing = SpacingPolicy(br_enabled=br_enabled)

    def convert(self, text: str) -> str:
        """Convert a Gemtext document to Markdown.

        Args:
            text: Complete Gemtext document

        Returns:
            Markdown text. Lines are joined with "\\n"; a trailing newline in
            the input is preserved as a trailing newline in the output.
        """
        return self.convert_document(text).markdown

    def convert_document(self, text: str) -> ConversionResult:
        """Convert a Gemtext document and collect conversion statistics.

        Args:
            text: Complete Gemtext document

        Returns:
            ConversionResult with the markdown, per-category line counts
            and warnings about the input
        """
        state = ConversionState()
        output: List[str] = []
        counts: Counter = Counter()
        fence_opened_at = 0

        for line in text.split("\n"):
            was_inside = state.inside_preformatted
            output.extend(self.process_line(line, state))
            counts[state.previous_category.value] += 1

            if state.inside_preformatted and not was_inside:
                fence_opened_at = state.line_number

        warnings = []
        if state.inside_preformatted:
            message = f"Unterminated preformatted block (opened at line {fence_opened_at})"
            logger.warning(message)
            warnings.append(message)

        logger.info(f"Converted {state.line_number} line(s) to {len(output)} markdown line(s)")

        return ConversionResult(
            markdown="\n".join(output),
            metadata={
                "line_count": state.line_number,
                "category_counts": dict(counts),
            },
            warnings=warnings,
        )

    def process_line(self, line: str, state: ConversionState) -> List[str]:
        """Convert one input line and advance the conversion state.

        Args:
            line: Raw input line without its line terminator
            state: Conversion state for the current document (updated in place)

        Returns:
            Output lines contributed by this input line: an optional empty
            line inserted by the spacing policy, followed by the rendered line
        """
        state.line_number += 1
        rendered = self._render_line(line, state)

        decision = self.spacing.decide(rendered.category, state.previous_category)
        logger.debug(
            f"Line {state.line_number}: {rendered.category.value} "
            f"(after {state.previous_category.value})"
        )

        emitted = []
        if decision.insert_blank_before:
            emitted.append("")

        text = rendered.text
        if decision.prepend_break_marker:
            text = self.separator + text
        emitted.append(text)

        state.previous_category = rendered.category
        return emitted

    def _render_line(self, line: str, state: ConversionState) -> RenderedLine:
        """Classify and render a line, toggling preformatted mode on fences."""
        trimmed = line.rstrip()
        category = classify(trimmed, state.inside_preformatted)

        # Toggle before rendering so the fence renders with the new state
        if category is LineCategory.FENCE_TOGGLE:
            state.inside_preformatted = not state.inside_preformatted

        text = render(category, trimmed, line, state.inside_preformatted)
        return RenderedLine(category=category, text=text)
