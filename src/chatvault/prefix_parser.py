"""Prefix-pattern transcript parser.

Splits text into user/assistant segments by recognising speaker prefixes
such as ``User:`` or ``ChatGPT:`` at the start of a line.  The prefix
vocabulary is chosen from the provider hint; unknown providers are
auto-detected against a broad vocabulary.

Fallback chain when no prefixes apply:

1. alternating paragraphs (blank-line separated), starting with ``user``;
2. the whole trimmed input as a single ``user`` segment.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chatvault.cleanup import normalize_newlines
from chatvault.models.segment import Segment, Speaker
from chatvault.patterns import GENERIC_VOCABULARY, PrefixVocabulary, vocabulary_for

logger = logging.getLogger(__name__)


@dataclass
class _TurnAccumulator:
    """Open-role state of the line scanner.

    Attributes:
        open_role: Speaker of the turn being collected, or ``None`` before
            the first prefix.
        buffer: Lines collected for the open turn.
        segments: Finished segments.
        orphan_lines: Non-blank lines seen before any role opened.
    """

    open_role: Speaker | None = None
    buffer: list[str] = field(default_factory=list)
    segments: list[Segment] = field(default_factory=list)
    orphan_lines: int = 0

    def flush(self) -> None:
        """Close the open turn, keeping it only if it has content."""
        if self.open_role is not None:
            content = "\n".join(self.buffer).strip()
            if content:
                self.segments.append(Segment(self.open_role, content))
        self.buffer = []

    def open(self, role: Speaker, first_line: str) -> None:
        self.flush()
        self.open_role = role
        self.buffer = [first_line]

    def append(self, line: str) -> None:
        if self.open_role is None:
            if line.strip():
                self.orphan_lines += 1
            return
        self.buffer.append(line)


def _match_prefix(line: str, vocabulary: PrefixVocabulary) -> tuple[Speaker, str] | None:
    """Return ``(role, remainder)`` if *line* starts with a known prefix."""
    stripped = line.lstrip()
    match = vocabulary.user_re.match(stripped)
    if match:
        return "user", stripped[match.end():]
    match = vocabulary.assistant_re.match(stripped)
    if match:
        return "assistant", stripped[match.end():]
    return None


def detect_generic_prefixes(lines: list[str]) -> bool:
    """Whether both a broad user prefix and a broad assistant prefix occur."""
    user_seen = False
    assistant_seen = False
    for line in lines:
        matched = _match_prefix(line, GENERIC_VOCABULARY)
        if matched is None:
            continue
        if matched[0] == "user":
            user_seen = True
        else:
            assistant_seen = True
        if user_seen and assistant_seen:
            return True
    return False


def scan_prefixed_lines(lines: list[str], vocabulary: PrefixVocabulary) -> list[Segment]:
    """Run the line-by-line prefix scan over *lines*.

    A prefix line closes the open turn (even when the role repeats) and
    opens a new one with the rest of the line.  Other lines are appended
    verbatim to the open turn; lines before the first prefix are dropped.
    """
    state = _TurnAccumulator()
    for line in lines:
        matched = _match_prefix(line, vocabulary)
        if matched is None:
            state.append(line)
        else:
            state.open(*matched)
    state.flush()

    if state.orphan_lines and state.segments:
        logger.warning(
            "Dropped %d line(s) before the first speaker prefix",
            state.orphan_lines,
        )
    return state.segments


def split_paragraphs(lines: list[str]) -> list[Segment]:
    """Assign alternating roles, starting with ``user``, to paragraphs.

    A paragraph is a run of non-blank lines; runs are separated by one or
    more blank lines.
    """
    paragraphs: list[str] = []
    current: list[str] = []
    for line in lines:
        if line.strip():
            current.append(line)
        elif current:
            paragraphs.append("\n".join(current).strip())
            current = []
    if current:
        paragraphs.append("\n".join(current).strip())

    roles: tuple[Speaker, Speaker] = ("user", "assistant")
    return [Segment(roles[idx % 2], text) for idx, text in enumerate(paragraphs)]


def parse_prefixed(text: str, provider: str = "other") -> list[Segment]:
    """Segment a transcript by speaker-name prefixes.

    Args:
        text: The raw transcript text.
        provider: Provider hint.  ``"chatgpt"`` and ``"claude"`` select a
            fixed vocabulary; anything else triggers auto-detection.

    Returns:
        Segments in source order.  Empty only when *text* is blank.
    """
    if not text or not text.strip():
        return []

    lines = normalize_newlines(text).split("\n")

    vocabulary = vocabulary_for(provider)
    if vocabulary is None and detect_generic_prefixes(lines):
        vocabulary = GENERIC_VOCABULARY

    segments: list[Segment] = []
    if vocabulary is not None:
        segments = scan_prefixed_lines(lines, vocabulary)
        logger.debug("Prefix scan (%s) produced %d segment(s)", provider, len(segments))

    if not segments:
        segments = split_paragraphs(lines)
        logger.debug("Paragraph fallback produced %d segment(s)", len(segments))

    if not segments:
        segments = [Segment("user", text.strip())]
        logger.debug("Whole-input fallback used")

    return segments
