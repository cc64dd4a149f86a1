"""Side-by-side comparison of the two segmentation strategies.

Runs the prefix-pattern parser and the marker-based segmenter over the
same text and pairs their segments by position.  Text similarity is the
normalized edit-distance score of :func:`rapidfuzz.fuzz.ratio`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import zip_longest

from rapidfuzz.fuzz import ratio

from chatvault.marker_parser import parse_marked
from chatvault.models.segment import Segment
from chatvault.prefix_parser import parse_prefixed
from chatvault.segmenter import select_strategy


@dataclass(frozen=True)
class SegmentAgreement:
    """How the two strategies agree at one segment position.

    Attributes:
        index: 0-based position in the segment lists.
        prefix_speaker: Speaker from the prefix parser, or ``None`` when
            it produced fewer segments.
        marker_speaker: Speaker from the marker segmenter, or ``None``.
        similarity: Text similarity from 0 to 100.
    """

    index: int
    prefix_speaker: str | None
    marker_speaker: str | None
    similarity: float

    @property
    def speaker_match(self) -> bool:
        """Whether both strategies assigned the same speaker."""
        return self.prefix_speaker is not None and self.prefix_speaker == self.marker_speaker


@dataclass(frozen=True)
class StrategyComparison:
    """Outputs of both strategies plus per-position agreement.

    Attributes:
        provider: Provider hint used for the prefix parser.
        selected: Strategy that automatic selection would choose.
        prefix_segments: Prefix parser output.
        marker_segments: Marker segmenter output.
        agreements: One entry per position of the longer output.
    """

    provider: str
    selected: str
    prefix_segments: list[Segment] = field(default_factory=list)
    marker_segments: list[Segment] = field(default_factory=list)
    agreements: list[SegmentAgreement] = field(default_factory=list)

    @property
    def agreement(self) -> float:
        """Mean similarity over all positions (100.0 when both are empty)."""
        if not self.agreements:
            return 100.0
        return sum(a.similarity for a in self.agreements) / len(self.agreements)

    @property
    def speaker_mismatches(self) -> int:
        """Number of positions where the speakers differ."""
        return sum(1 for a in self.agreements if not a.speaker_match)


def compare_strategies(text: str, provider: str = "other") -> StrategyComparison:
    """Run both strategies over *text* and measure how much they agree.

    Args:
        text: The raw transcript text.
        provider: Provider hint passed to the prefix parser.

    Returns:
        A :class:`StrategyComparison`.
    """
    prefix_segments = parse_prefixed(text, provider)
    marker_segments = parse_marked(text)

    agreements: list[SegmentAgreement] = []
    for idx, (ours, theirs) in enumerate(zip_longest(prefix_segments, marker_segments)):
        if ours is None or theirs is None:
            similarity = 0.0
        else:
            similarity = float(ratio(ours.text, theirs.text))
        agreements.append(
            SegmentAgreement(
                index=idx,
                prefix_speaker=ours.speaker if ours else None,
                marker_speaker=theirs.speaker if theirs else None,
                similarity=similarity,
            )
        )

    return StrategyComparison(
        provider=provider,
        selected=select_strategy(text, provider),
        prefix_segments=prefix_segments,
        marker_segments=marker_segments,
        agreements=agreements,
    )
