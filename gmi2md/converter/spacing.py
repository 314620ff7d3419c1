"""Spacing policy between consecutive output lines.

Markdown merges adjacent text lines into one paragraph, so some category
transitions need an empty line in between, and consecutive links need an
inline break marker to stay on separate lines.
"""

from typing import FrozenSet

from .models import LineCategory, SpacingDecision

BASE_BLANK_COMPATIBLE: FrozenSet[LineCategory] = frozenset({
    LineCategory.FENCE_TOGGLE,
    LineCategory.HEADING,
    LineCategory.PARAGRAPH,
})

# Predecessors after which a link line gets the break marker
BREAK_PREDECESSORS: FrozenSet[LineCategory] = frozenset({
    LineCategory.LINK,
    LineCategory.PARAGRAPH,
})


class SpacingPolicy:
    """Decides blank-line and break-marker insertions for a line transition.

    When break markers are enabled, consecutive links are joined with the
    marker. When they are disabled, LINK joins the blank-compatible set so
    consecutive links are separated by empty lines instead.

    Attributes:
        br_enabled: Whether inline break markers are used
        blank_compatible: Categories that get an empty line between them

    Example:
        >>> policy = SpacingPolicy(br_enabled=True)
        >>> policy.decide(LineCategory.PARAGRAPH, LineCategory.HEADING)
        SpacingDecision(insert_blank_before=True, prepend_break_marker=False)
    """

    def __init__(self, br_enabled: bool = True):
        """Initialize spacing policy.

        Args:
            br_enabled: Use inline break markers between consecutive links
        """
        self.br_enabled = br_enabled
        if br_enabled:
            self.blank_compatible = BASE_BLANK_COMPATIBLE
        else:
            self.blank_compatible = BASE_BLANK_COMPATIBLE | {LineCategory.LINK}

    def decide(self, current: LineCategory, previous: LineCategory) -> SpacingDecision:
        """Decide insertions for the transition previous -> current.

        The two checks are evaluated independently, blank line first.

        Args:
            current: Category of the line about to be emitted
            previous: Category of the line emitted before it

        Returns:
            SpacingDecision for the current line
        """
        decision = SpacingDecision()

        if (
            previous is not LineCategory.BLANK
            and current is not LineCategory.BLANK
            and previous in self.blank_compatible
            and current in self.blank_compatible
        ):
            decision.insert_blank_before = True

        if (
            self.br_enabled
            and current is LineCategory.LINK
            and previous in BREAK_PREDECESSORS
        ):
            decision.prepend_break_marker = True

        return decision


def decide(
    current: LineCategory,
    previous: LineCategory,
    br_enabled: bool = True,
) -> SpacingDecision:
    """Decide insertions for one transition without keeping a policy around."""
    return SpacingPolicy(br_enabled=br_enabled).decide(current, previous)
