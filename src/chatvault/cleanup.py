"""Text cleanup and segment consolidation helpers.

Trailing artifacts are removed once per call: a single page-number line
and a single ``Claude`` signature line.
"""

from __future__ import annotations

from collections.abc import Iterable

from chatvault.models.segment import Segment
from chatvault.patterns import (
    CLAUDE_SIGNATURE_RE,
    EXCESS_NEWLINES_RE,
    LONE_RETRY_RE,
    NOISY_HEADER_RES,
    SHOW_ITEMS_RE,
    TRAILING_NUMBER_RE,
)


def normalize_newlines(text: str) -> str:
    """Convert ``\\r\\n`` and lone ``\\r`` line endings to ``\\n``."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def clean_text(text: str) -> str:
    """Remove copy-paste artifacts from a segment's text.

    Strips a trailing page-number line and a trailing ``Claude``
    signature line, collapses runs of three or more newlines to a single
    blank line, and trims the result.

    Args:
        text: Raw segment text.

    Returns:
        The cleaned text (possibly empty).
    """
    cleaned = text.strip()
    # At most one number line and one signature, in either order.
    cleaned, numbers = TRAILING_NUMBER_RE.subn("", cleaned, count=1)
    cleaned = CLAUDE_SIGNATURE_RE.sub("", cleaned, count=1).rstrip()
    if not numbers:
        cleaned = TRAILING_NUMBER_RE.sub("", cleaned, count=1)
    cleaned = EXCESS_NEWLINES_RE.sub("\n\n", cleaned)
    return cleaned.strip()


def clean_noisy_user_text(text: str) -> str:
    """Clean a user turn taken from a noisy (code-hosting) export.

    Removes leading ``Content not accessible`` and ``GITHUB`` header
    lines, the first lone ``Retry`` line and a trailing
    ``Show N Item(s)`` label before applying :func:`clean_text`.
    """
    cleaned = text.strip()
    stripped_header = True
    while stripped_header:
        stripped_header = False
        for header_re in NOISY_HEADER_RES:
            remainder = header_re.sub("", cleaned, count=1)
            if remainder != cleaned:
                cleaned = remainder.lstrip()
                stripped_header = True
    cleaned = LONE_RETRY_RE.sub("", cleaned, count=1)
    cleaned = SHOW_ITEMS_RE.sub("", cleaned)
    return clean_text(cleaned)


def consolidate_segments(segments: Iterable[Segment]) -> list[Segment]:
    """Merge adjacent same-speaker segments and drop empty ones.

    Merged texts are joined with a blank line.  The result never holds
    two consecutive segments with the same speaker.
    """
    merged: list[Segment] = []
    for segment in segments:
        text = segment.text.strip()
        if not text:
            continue
        if merged and merged[-1].speaker == segment.speaker:
            merged[-1] = Segment(segment.speaker, f"{merged[-1].text}\n\n{text}")
        else:
            merged.append(Segment(segment.speaker, text))
    return merged
