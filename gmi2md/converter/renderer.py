"""Line renderer for Gemtext documents.

Turns a classified line into its Markdown text. Nothing is HTML-escaped:
text lines are emitted verbatim, preformatted content is passed through
untouched and only link lines are rewritten.
"""

import re

from .classifier import FENCE_DELIMITER, LINK_PREFIX
from .models import LineCategory

AUTOLINK_SCHEME_PREFIX = "http"

WHITESPACE_PATTERN = re.compile(r"\s+")


def render_link(trimmed_line: str) -> str:
    """Rewrite a Gemtext link line as a Markdown link.

    A bare http(s) URL without a title becomes an autolink; anything else
    becomes an inline link whose title defaults to the URL.

    Args:
        trimmed_line: Link line (starting with '=>') without trailing whitespace

    Returns:
        Markdown link text

    Examples:
        >>> render_link("=> http://example.com")
        '<http://example.com>'
        >>> render_link("=> http://example.com Example Site")
        '[Example Site](http://example.com)'
        >>> render_link("=> /local/path")
        '[/local/path](/local/path)'
    """
    link = trimmed_line[len(LINK_PREFIX):].strip()

    if link.startswith(AUTOLINK_SCHEME_PREFIX) and not WHITESPACE_PATTERN.search(link):
        return f"<{link}>"

    parts = WHITESPACE_PATTERN.split(link, maxsplit=1)
    url = parts[0]
    title = parts[1] if len(parts) > 1 else url

    return f"[{title}]({url})"


def render(
    category: LineCategory,
    trimmed_line: str,
    original_line: str,
    inside_preformatted: bool = False,
) -> str:
    """Render a classified line as Markdown.

    Args:
        category: Category assigned by the classifier
        trimmed_line: The line with trailing whitespace removed
        original_line: The line exactly as it appeared in the input
        inside_preformatted: Preformatted state after any fence toggle on this
            line. For a fence line, True means the block is being opened.

    Returns:
        Markdown text for the line (without spacing insertions)
    """
    if category is LineCategory.BLANK:
        return ""

    if category is LineCategory.FENCE_TOGGLE:
        # Opening fence keeps the raw line, closing fence is the bare delimiter
        return original_line if inside_preformatted else FENCE_DELIMITER

    if category is LineCategory.PREFORMATTED:
        return original_line

    if category is LineCategory.LINK:
        return render_link(trimmed_line)

    return trimmed_line
