"""Highlight extraction: bounded excerpts with the query marked for rendering.

Input HTML is stripped before matching, so the engine's own markers are
removed when an excerpt is highlighted again and the output is stable.
The plain-text length of every excerpt (ellipses included) is at most
max_length.

Multi-match mode keeps one window of +/- context_radius around every
occurrence, merges windows that touch, and keeps them in order of
occurrence while the rendered excerpt still fits; a window that does not
fit is skipped and later, smaller windows may still be kept. When no window
fits at all, a single-match excerpt centred on the first occurrence is used.
"""

import html
import re

from socialsearch.core.constants import ELLIPSIS, HIGHLIGHT_CLOSE, HIGHLIGHT_OPEN
from socialsearch.shared.utils.sanitization import strip_tags, truncate

DEFAULT_CONTEXT_RADIUS = 30
DEFAULT_MAX_LENGTH = 300

Window = tuple[int, int]


def _pattern(query: str) -> re.Pattern[str]:
    return re.compile(re.escape(query), re.IGNORECASE)


def mark_matches(text: str, query: str) -> str:
    """HTML-escape text and wrap every case-insensitive occurrence of query.

    Args:
        text: Plain text (not HTML).
        query: Literal search string; blank means nothing is marked.

    Returns:
        Escaped text with matches wrapped in HIGHLIGHT_OPEN / HIGHLIGHT_CLOSE.
    """
    needle = (query or "").strip()
    if not needle:
        return html.escape(text)
    parts: list[str] = []
    last = 0
    for match in _pattern(needle).finditer(text):
        parts.append(html.escape(text[last : match.start()]))
        parts.append(HIGHLIGHT_OPEN + html.escape(match.group(0)) + HIGHLIGHT_CLOSE)
        last = match.end()
    parts.append(html.escape(text[last:]))
    return "".join(parts)


def _render(text: str, windows: list[Window]) -> str:
    excerpt = ELLIPSIS.join(text[start:end] for start, end in windows)
    if windows[0][0] > 0:
        excerpt = ELLIPSIS + excerpt
    if windows[-1][1] < len(text):
        excerpt += ELLIPSIS
    return excerpt


def _rendered_length(text_length: int, windows: list[Window]) -> int:
    length = sum(end - start for start, end in windows)
    length += len(ELLIPSIS) * (len(windows) - 1)
    if windows[0][0] > 0:
        length += len(ELLIPSIS)
    if windows[-1][1] < text_length:
        length += len(ELLIPSIS)
    return length


def _single_window(text_length: int, match: Window, max_length: int) -> Window:
    """Window of max_length minus both ellipses, centred on the match."""
    size = max(max_length - 2 * len(ELLIPSIS), 1)
    match_start, match_end = match
    if match_end - match_start >= size:
        return match_start, match_start + size
    pad = (size - (match_end - match_start)) // 2
    start = max(0, match_start - pad)
    end = min(text_length, start + size)
    return max(0, end - size), end


def _merged_windows(text_length: int, matches: list[Window], radius: int) -> list[Window]:
    windows: list[Window] = []
    for match_start, match_end in matches:
        start = max(0, match_start - radius)
        end = min(text_length, match_end + radius)
        if windows and start <= windows[-1][1]:
            windows[-1] = (windows[-1][0], max(end, windows[-1][1]))
        else:
            windows.append((start, end))
    return windows


def _multi_windows(
    text_length: int, matches: list[Window], radius: int, max_length: int
) -> list[Window]:
    windows = _merged_windows(text_length, matches, radius)
    selected: list[Window] = []
    for window in windows:
        candidate = selected + [window]
        if _rendered_length(text_length, candidate) <= max_length:
            selected = candidate
    if not selected:
        selected = [_single_window(text_length, matches[0], max_length)]
    return selected


def extract_highlight(
    text: str | None,
    query: str | None,
    context_radius: int = DEFAULT_CONTEXT_RADIUS,
    max_length: int = DEFAULT_MAX_LENGTH,
    multi_match: bool = False,
) -> str:
    """Return a bounded excerpt of text with occurrences of query marked.

    Never raises for a blank or missing query or for "not found": the
    bounded text is returned unmarked. Output is always rendering-safe, so
    even unmarked text is tag-stripped and HTML-escaped ("a & b" becomes
    "a &amp; b") rather than returned byte-for-byte.

    Args:
        text: Source text; HTML is stripped first.
        query: Literal search string (case-insensitive).
        context_radius: Characters kept on each side of a match in multi-match mode.
        max_length: Upper bound on the plain-text length of the excerpt.
        multi_match: Excerpt around every match instead of only the first.

    Returns:
        Escaped excerpt; matches wrapped in HIGHLIGHT_OPEN / HIGHLIGHT_CLOSE.
    """
    plain = strip_tags(text)
    needle = (query or "").strip()
    if len(plain) <= max_length:
        return mark_matches(plain, needle)

    matches = [m.span() for m in _pattern(needle).finditer(plain)] if needle else []
    if not matches:
        return mark_matches(truncate(plain, max_length - len(ELLIPSIS)), needle)

    if multi_match:
        windows = _multi_windows(len(plain), matches, context_radius, max_length)
    else:
        windows = [_single_window(len(plain), matches[0], max_length)]
    return mark_matches(_render(plain, windows), needle)
