"""Segment data models produced by the transcript segmenters.

These are plain frozen dataclasses shared by both parsing strategies, so
the prefix parser and the marker segmenter return the same result shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

Speaker = Literal["user", "assistant"]
Provider = Literal["chatgpt", "claude", "grok", "other"]
Strategy = Literal["auto", "prefix", "marker"]

PROVIDERS: tuple[str, ...] = ("chatgpt", "claude", "grok", "other")
STRATEGIES: tuple[str, ...] = ("auto", "prefix", "marker")


@dataclass(frozen=True)
class Segment:
    """A single speaker-attributed span of transcript text.

    Attributes:
        speaker: ``"user"`` or ``"assistant"``.
        text: Trimmed segment content.  Never empty.
    """

    speaker: Speaker
    text: str

    def to_dict(self) -> dict[str, str]:
        """Return the segment as a ``{"role", "content"}`` mapping."""
        return {"role": self.speaker, "content": self.text}


@dataclass(frozen=True)
class SegmentationResult:
    """Segments of one transcript together with how they were obtained.

    Attributes:
        segments: Segments in chronological order.
        strategy: The strategy that actually ran (``"prefix"`` or
            ``"marker"``).
        provider: Provider hint the caller supplied.
        source: File path of the transcript, or ``"<string>"``.
    """

    segments: list[Segment] = field(default_factory=list)
    strategy: str = "prefix"
    provider: str = "other"
    source: str = "<string>"

    @property
    def speakers(self) -> list[str]:
        """Speakers in order of first appearance, without duplicates."""
        return list(dict.fromkeys(s.speaker for s in self.segments))

    @property
    def is_empty(self) -> bool:
        """Whether nothing could be segmented (blank input)."""
        return not self.segments
