"""Build chat-import payloads from raw transcript text.

:func:`build_chat_import` is the glue between the segmenter and the
storage layer: it segments the text, derives a title and summary, and
stamps every message with the import time.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, timezone

from chatvault.exceptions import EmptyTranscriptError
from chatvault.models.chat_import import ChatImport, ImportedMessage
from chatvault.models.segment import PROVIDERS
from chatvault.preview import DEFAULT_SUMMARY_LENGTH, generate_summary, suggest_title
from chatvault.segmenter import segment_transcript

logger = logging.getLogger(__name__)


def build_chat_import(
    raw_text: str,
    provider: str = "other",
    title: str | None = None,
    tags: Iterable[str] = (),
    strategy: str = "auto",
    summary_max_length: int = DEFAULT_SUMMARY_LENGTH,
    now: datetime | None = None,
    source: str = "<string>",
) -> ChatImport:
    """Segment *raw_text* and wrap the result as a :class:`ChatImport`.

    Args:
        raw_text: Pasted or uploaded transcript text.
        provider: Provider hint; values outside the known set are stored
            as ``"other"``.
        title: Chat title.  When ``None`` or blank, a title is suggested
            from the first message.
        tags: Tag names; trimmed and de-duplicated by the model.
        strategy: Segmentation strategy (``"auto"``, ``"prefix"`` or
            ``"marker"``).
        summary_max_length: Maximum summary length before truncation.
        now: Timestamp for every message.  Defaults to the current UTC
            time.
        source: Label used in error messages and logs.

    Returns:
        A validated :class:`ChatImport`.

    Raises:
        EmptyTranscriptError: If the text yields no segments.
    """
    segments = segment_transcript(raw_text, provider, strategy)
    if not segments:
        raise EmptyTranscriptError(source=source)

    timestamp = now or datetime.now(timezone.utc)
    stored_provider = provider if provider in PROVIDERS else "other"
    chosen_title = title.strip() if title and title.strip() else suggest_title(segments)

    chat = ChatImport(
        title=chosen_title,
        summary=generate_summary(segments, summary_max_length),
        provider=stored_provider,
        tags=list(tags),
        messages=[
            ImportedMessage(role=segment.speaker, content=segment.text, timestamp=timestamp)
            for segment in segments
        ],
    )
    logger.info(
        "Prepared import %r from %s with %d message(s)",
        chat.title,
        source,
        chat.message_count,
    )
    return chat
