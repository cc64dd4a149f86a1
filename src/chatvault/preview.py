"""Preview strings for imported chats: summary and suggested title."""

from __future__ import annotations

import re
from collections.abc import Sequence

from chatvault.models.segment import Segment

_MARKDOWN_CHARS_RE = re.compile(r"[#*`_]")

DEFAULT_SUMMARY_LENGTH = 200
DEFAULT_TITLE_WORDS = 5


def truncate_text(text: str, max_length: int) -> str:
    """Cut *text* to *max_length* characters, appending ``"..."`` if cut."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def generate_summary(
    segments: Sequence[Segment],
    max_length: int = DEFAULT_SUMMARY_LENGTH,
) -> str:
    """Build a short preview from the first two segments.

    Markdown emphasis, heading and code markers are removed before the
    text is truncated to *max_length* characters.
    """
    summary = " ".join(segment.text for segment in segments[:2])
    summary = _MARKDOWN_CHARS_RE.sub("", summary)
    return truncate_text(summary, max_length)


def suggest_title(
    segments: Sequence[Segment],
    max_words: int = DEFAULT_TITLE_WORDS,
) -> str:
    """Suggest a chat title from the first words of the first segment."""
    if not segments:
        return ""
    words = segments[0].text.split()
    title = " ".join(words[:max_words])
    return title + "..." if len(words) > max_words else title
