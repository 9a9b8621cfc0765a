"""Text sanitization helpers for matched-text display."""

import html

import nh3

from socialsearch.core.constants import ELLIPSIS


def strip_tags(value: str | None) -> str:
    """Remove all HTML tags (and script/style content) and return plain text.

    nh3 escapes text on output; entities are unescaped again so callers
    measure and slice the text a reader sees.

    Args:
        value: Raw string that may contain HTML.

    Returns:
        Plain text; empty string for None.
    """
    if not value:
        return ""
    return html.unescape(nh3.clean(value, tags=set(), attributes={}))


def truncate(value: str, limit: int, ellipsis: str = ELLIPSIS) -> str:
    """Cut value to limit characters and append ellipsis when it was longer.

    Args:
        value: Text to bound.
        limit: Maximum characters kept before the ellipsis.
        ellipsis: Marker appended on truncation.

    Returns:
        value unchanged when len(value) <= limit, else value[:limit] + ellipsis.
    """
    if len(value) <= limit:
        return value
    return value[:limit] + ellipsis
