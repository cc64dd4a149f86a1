"""Strategy selection for transcript segmentation.

The caller-facing entry points are :func:`segment_transcript` (string in,
segments out) and :func:`segment_transcript_file`.  Both pick between the
prefix-pattern parser and the marker-based segmenter with
:func:`select_strategy`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from chatvault.marker_parser import has_marker, parse_marked
from chatvault.models.segment import STRATEGIES, Segment, SegmentationResult
from chatvault.prefix_parser import parse_prefixed

logger = logging.getLogger(__name__)

# Strategy name -> parser taking (text, provider).
PARSERS: dict[str, Callable[[str, str], list[Segment]]] = {
    "prefix": parse_prefixed,
    "marker": lambda text, _provider: parse_marked(text),
}


def select_strategy(text: str, provider: str = "other", strategy: str = "auto") -> str:
    """Decide which parser handles *text*.

    Args:
        text: The raw transcript text.
        provider: Provider hint.  It does not influence the choice; it is
            accepted so callers can pass their full input through.
        strategy: ``"auto"`` to sniff the content, or ``"prefix"`` /
            ``"marker"`` to force a parser.

    Returns:
        ``"marker"`` or ``"prefix"``.

    Raises:
        ValueError: If *strategy* is not a known strategy name.
    """
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown strategy: {strategy!r}")
    if strategy != "auto":
        return strategy
    return "marker" if has_marker(text) else "prefix"


def segment_transcript(
    text: str,
    provider: str = "other",
    strategy: str = "auto",
) -> list[Segment]:
    """Split a transcript into speaker-attributed segments.

    Never raises for any text input.  Blank text yields an empty list,
    which callers should treat as "nothing to import".

    Args:
        text: The raw transcript text.
        provider: Provider hint (``"chatgpt"``, ``"claude"``, ``"grok"``
            or ``"other"``).
        strategy: ``"auto"``, ``"prefix"`` or ``"marker"``.

    Returns:
        Segments in chronological order.
    """
    chosen = select_strategy(text, provider, strategy)
    logger.debug("Segmenting with %s strategy (provider=%s)", chosen, provider)
    return PARSERS[chosen](text, provider)


def segment_transcript_file(
    file_path: str | Path,
    provider: str = "other",
    strategy: str = "auto",
) -> SegmentationResult:
    """Segment a UTF-8 transcript file.

    Args:
        file_path: Path to the transcript file.
        provider: Provider hint.
        strategy: ``"auto"``, ``"prefix"`` or ``"marker"``.

    Returns:
        A :class:`SegmentationResult` with ``source`` set to the string
        form of *file_path*.

    Raises:
        FileNotFoundError: If *file_path* does not exist.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Transcript file not found: {path}")

    text = path.read_text(encoding="utf-8")
    chosen = select_strategy(text, provider, strategy)
    segments = PARSERS[chosen](text, provider)
    logger.info("Segmented %s into %d segment(s) using %s strategy", path, len(segments), chosen)
    return SegmentationResult(
        segments=segments,
        strategy=chosen,
        provider=provider,
        source=str(path),
    )
