"""Console output for the chatvault CLI.

:func:`format_segmentation` renders segmented transcripts and
:func:`format_comparison` renders a :class:`StrategyComparison` report.
The ``print_*`` wrappers write the formatted text to stdout.
"""

from __future__ import annotations

import json
import sys

from chatvault.compare import StrategyComparison
from chatvault.models.segment import Segment, SegmentationResult

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_BANNER_WIDTH = 60
_SEPARATOR = "=" * _BANNER_WIDTH
_PREVIEW_LENGTH = 50


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def format_segmentation(result: SegmentationResult) -> str:
    """Render a :class:`SegmentationResult` for the console.

    Shows the source, strategy and provider, one preview line per
    segment, and per-speaker counts.
    """
    lines: list[str] = [_SEPARATOR, "  CHATVAULT TRANSCRIPT SEGMENTS", _SEPARATOR]
    lines.append(f"  File: {result.source}")
    lines.append(f"  Provider: {result.provider}")
    lines.append(f"  Strategy: {result.strategy}")
    lines.append("")

    if result.is_empty:
        lines.append("  Nothing to import: the transcript is empty.")
    else:
        _append_segments(lines, result.segments)
        lines.append("")
        user_count = sum(1 for s in result.segments if s.speaker == "user")
        lines.append(f"  Total segments: {len(result.segments)}")
        lines.append(f"  User messages: {user_count}")
        lines.append(f"  Assistant messages: {len(result.segments) - user_count}")

    lines.append(_SEPARATOR)
    return "\n".join(lines)


def format_segmentation_json(result: SegmentationResult) -> str:
    """Render the segments as a JSON array of ``{"role", "content"}``."""
    return json.dumps([s.to_dict() for s in result.segments], indent=2, ensure_ascii=False)


def format_comparison(comparison: StrategyComparison) -> str:
    """Render both strategies' outputs and their agreement."""
    lines: list[str] = [_SEPARATOR, "  CHATVAULT PARSER COMPARISON", _SEPARATOR]
    lines.append(f"  Provider: {comparison.provider}")
    lines.append(f"  Automatic selection: {comparison.selected}")

    lines.append("")
    lines.append(f"--- prefix parser ({len(comparison.prefix_segments)} segments) ---")
    _append_segments(lines, comparison.prefix_segments)

    lines.append("")
    lines.append(f"--- marker segmenter ({len(comparison.marker_segments)} segments) ---")
    _append_segments(lines, comparison.marker_segments)

    lines.append("")
    lines.append("--- agreement ---")
    for item in comparison.agreements:
        marker = "=" if item.speaker_match else "x"
        lines.append(
            f"  [{item.index}] {marker} {item.prefix_speaker or '-'} / "
            f"{item.marker_speaker or '-'}  similarity {item.similarity:.0f}"
        )
    lines.append(f"  Overall agreement: {comparison.agreement:.1f}%")
    lines.append(f"  Speaker mismatches: {comparison.speaker_mismatches}")
    lines.append(_SEPARATOR)
    return "\n".join(lines)


def print_segmentation(result: SegmentationResult, as_json: bool = False) -> None:
    """Print a segmentation result to stdout."""
    text = format_segmentation_json(result) if as_json else format_segmentation(result)
    sys.stdout.write(text + "\n")


def print_comparison(comparison: StrategyComparison) -> None:
    """Print a comparison report to stdout."""
    sys.stdout.write(format_comparison(comparison) + "\n")


# ---------------------------------------------------------------------------
# Internal formatters
# ---------------------------------------------------------------------------


def _preview(text: str) -> str:
    flat = " ".join(text.split())
    if len(flat) > _PREVIEW_LENGTH:
        return flat[:_PREVIEW_LENGTH] + "..."
    return flat


def _append_segments(lines: list[str], segments: list[Segment]) -> None:
    if not segments:
        lines.append("  (no segments)")
        return
    for idx, segment in enumerate(segments, start=1):
        lines.append(f"  [{idx}] {segment.speaker.upper()}: {_preview(segment.text)}")
