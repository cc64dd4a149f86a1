"""Marker-based transcript segmenter.

Handles transcripts copied from a chat UI where every AI turn is
introduced by a line holding only the ``Edit`` marker.  The text before
the first marker is the opening user turn; each later chunk holds an AI
answer, optionally followed by the next user turn.

Two export sub-formats are recognised, once per document:

- **simple** -- the next user turn follows a run of three or more
  newlines inside the chunk.
- **noisy** -- code-hosting flavoured exports (see
  :data:`~chatvault.patterns.NOISY_FORMAT_SIGNALS`); the next user turn
  starts at the earliest :data:`~chatvault.patterns.USER_QUERY_PATTERNS`
  match and carries extra header noise.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Literal

from chatvault.cleanup import (
    clean_noisy_user_text,
    clean_text,
    consolidate_segments,
    normalize_newlines,
)
from chatvault.models.segment import Segment
from chatvault.patterns import (
    MARKER_LINE_RE,
    NOISY_FORMAT_SIGNALS,
    TURN_GAP_RE,
    USER_QUERY_PATTERNS,
)

logger = logging.getLogger(__name__)

ExportFormat = Literal["simple", "noisy"]


def has_marker(text: str) -> bool:
    """Whether *text* contains at least one standalone ``Edit`` line."""
    return MARKER_LINE_RE.search(normalize_newlines(text)) is not None


def detect_format(text: str) -> ExportFormat:
    """Classify the whole document as the ``"simple"`` or ``"noisy"`` format."""
    if any(signal in text for signal in NOISY_FORMAT_SIGNALS):
        return "noisy"
    return "simple"


def find_user_query_start(chunk: str) -> tuple[int, str] | None:
    """Locate the earliest user-query signal in a noisy-format chunk.

    Returns:
        ``(offset, pattern_name)`` of the earliest match, or ``None``.
        Ties go to the pattern listed first.
    """
    best: tuple[int, str] | None = None
    for name, pattern in USER_QUERY_PATTERNS:
        match = pattern.search(chunk)
        if match and (best is None or match.start() < best[0]):
            best = (match.start(), name)
    return best


def _split_simple(chunk: str) -> tuple[str, str]:
    gap = TURN_GAP_RE.search(chunk)
    if gap is None or gap.start() == 0:
        return chunk, ""
    return chunk[: gap.start()], chunk[gap.end():]


def _split_noisy(chunk: str) -> tuple[str, str]:
    found = find_user_query_start(chunk)
    if found is None or found[0] == 0:
        return chunk, ""
    offset, name = found
    logger.debug("User query detected by %r at offset %d", name, offset)
    return chunk[:offset], chunk[offset:]


_SPLITTERS: dict[str, Callable[[str], tuple[str, str]]] = {
    "simple": _split_simple,
    "noisy": _split_noisy,
}


def parse_marked(text: str) -> list[Segment]:
    """Segment a transcript on standalone ``Edit`` marker lines.

    Args:
        text: The raw transcript text.

    Returns:
        Consolidated segments in source order: no two neighbours share a
        speaker and no segment is empty.  A document without markers is
        returned as a single ``user`` segment; blank input gives ``[]``.
    """
    if not text or not text.strip():
        return []

    normalized = normalize_newlines(text)
    export_format = detect_format(normalized)
    clean_user: Callable[[str], str] = (
        clean_noisy_user_text if export_format == "noisy" else clean_text
    )

    parts = MARKER_LINE_RE.split(normalized)
    if len(parts) == 1:
        logger.debug("No marker lines found; returning whole input")
        return consolidate_segments([Segment("user", clean_user(normalized))]) or [
            Segment("user", text.strip())
        ]

    split_chunk = _SPLITTERS[export_format]
    raw: list[Segment] = [Segment("user", clean_user(parts[0]))]
    for part in parts[1:]:
        chunk = part.strip()
        if not chunk:
            continue
        ai_text, user_text = split_chunk(chunk)
        raw.append(Segment("assistant", clean_text(ai_text)))
        if user_text.strip():
            raw.append(Segment("user", clean_user(user_text)))

    segments = consolidate_segments(raw)
    logger.debug(
        "Marker segmenter (%s format) produced %d segment(s) from %d marker(s)",
        export_format,
        len(segments),
        len(parts) - 1,
    )
    if not segments:
        return [Segment("user", text.strip())]
    return segments
