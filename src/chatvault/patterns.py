"""Pattern table for transcript segmentation.

Every speaker prefix, turn marker, format signal and cleanup expression
used by the segmenters is declared here, so provider vocabularies and
export sub-formats are data rather than control flow.

Tables:
    :data:`PROVIDER_VOCABULARIES` -- prefix vocabularies per provider.
    :data:`GENERIC_VOCABULARY` -- broad vocabulary for auto-detection.
    :data:`NOISY_FORMAT_SIGNALS` -- substrings that select the noisy
        export sub-format of the marker segmenter.
    :data:`USER_QUERY_PATTERNS` -- named patterns that start a new user
        turn inside a noisy-format AI chunk, in priority order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field


def _prefix_regex(names: tuple[str, ...]) -> re.Pattern[str]:
    """Compile a case-insensitive ``^(name1|name2):`` prefix pattern."""
    alternatives = "|".join(re.escape(name) for name in names)
    return re.compile(rf"^(?:{alternatives}):[ \t]*", re.IGNORECASE)


@dataclass(frozen=True)
class PrefixVocabulary:
    """Speaker names recognised as line prefixes for one provider.

    Attributes:
        user: Names that open a user turn (e.g. ``"User"``).
        assistant: Names that open an assistant turn (e.g. ``"ChatGPT"``).
    """

    user: tuple[str, ...]
    assistant: tuple[str, ...]
    user_re: re.Pattern[str] = field(init=False, repr=False, compare=False)
    assistant_re: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "user_re", _prefix_regex(self.user))
        object.__setattr__(self, "assistant_re", _prefix_regex(self.assistant))


# ---------------------------------------------------------------------------
# Prefix-pattern parser
# ---------------------------------------------------------------------------

PROVIDER_VOCABULARIES: dict[str, PrefixVocabulary] = {
    "chatgpt": PrefixVocabulary(
        user=("User", "You"),
        assistant=("ChatGPT", "Assistant", "AI"),
    ),
    "claude": PrefixVocabulary(
        user=("Human", "You"),
        assistant=("Claude", "Assistant", "AI"),
    ),
}

GENERIC_VOCABULARY = PrefixVocabulary(
    user=("User", "You", "Human", "I"),
    assistant=("Assistant", "AI", "ChatGPT", "Claude", "Grok"),
)

# ---------------------------------------------------------------------------
# Marker-based segmenter
# ---------------------------------------------------------------------------

# A line holding nothing but the marker token.  Case-sensitive.
MARKER_LINE_RE = re.compile(r"^[ \t]*Edit[ \t]*$", re.MULTILINE)

NOISY_FORMAT_SIGNALS: tuple[str, ...] = (
    "GITHUB",
    "Interactive artifact",
    "Architecture",
)

# Blank-line run separating an AI answer from the next user turn.
TURN_GAP_RE = re.compile(r"\n{3,}")

USER_QUERY_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("retry", re.compile(r"^Retry[ \t]*$", re.MULTILINE)),
    ("error_notice", re.compile(r"^An error occurred", re.MULTILINE | re.IGNORECASE)),
    ("repo_path", re.compile(r"^[\w-]+/[\w-]+[ \t]*$", re.MULTILINE)),
    ("so_based_on_this", re.compile(r"^so based on this", re.MULTILINE | re.IGNORECASE)),
    ("fix_error_request", re.compile(r"\n\s*Can you fix this error", re.IGNORECASE)),
)

# ---------------------------------------------------------------------------
# Cleanup
# ---------------------------------------------------------------------------

TRAILING_NUMBER_RE = re.compile(r"\n+\s*\d+\s*$")
CLAUDE_SIGNATURE_RE = re.compile(r"\n[ \t]*Claude\s*$")
EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")

NOISY_HEADER_RES: tuple[re.Pattern[str], ...] = (
    re.compile(r"^Content not accessible[ \t]*(?:\n|$)", re.IGNORECASE),
    re.compile(r"^GITHUB[ \t]*(?:\n|$)", re.IGNORECASE),
)
LONE_RETRY_RE = re.compile(r"^Retry[ \t]*$", re.MULTILINE | re.IGNORECASE)
SHOW_ITEMS_RE = re.compile(r"Show \d+ Items?\s*$", re.IGNORECASE)


def vocabulary_for(provider: str) -> PrefixVocabulary | None:
    """Return the fixed vocabulary for *provider*, or ``None``.

    ``None`` means the provider has no dedicated vocabulary and the
    caller should auto-detect with :data:`GENERIC_VOCABULARY`.
    """
    return PROVIDER_VOCABULARIES.get(provider.strip().lower())
