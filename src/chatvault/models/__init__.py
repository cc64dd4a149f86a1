"""Data models for chatvault."""

from __future__ import annotations

from chatvault.models.chat_import import ChatImport, ImportedMessage
from chatvault.models.segment import (
    PROVIDERS,
    STRATEGIES,
    Provider,
    Segment,
    SegmentationResult,
    Speaker,
    Strategy,
)

__all__ = [
    "PROVIDERS",
    "STRATEGIES",
    "ChatImport",
    "ImportedMessage",
    "Provider",
    "Segment",
    "SegmentationResult",
    "Speaker",
    "Strategy",
]
