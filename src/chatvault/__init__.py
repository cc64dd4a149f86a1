"""chatvault: LLM chat transcript segmentation.

Splits pasted or uploaded chat transcripts into ordered user/assistant
messages, ready to be archived.
"""

from __future__ import annotations

from chatvault.compare import StrategyComparison, compare_strategies
from chatvault.exceptions import ChatVaultError, EmptyTranscriptError
from chatvault.importer import build_chat_import
from chatvault.marker_parser import detect_format, parse_marked
from chatvault.models.chat_import import ChatImport, ImportedMessage
from chatvault.models.segment import Segment, SegmentationResult
from chatvault.prefix_parser import parse_prefixed
from chatvault.preview import generate_summary, suggest_title
from chatvault.segmenter import segment_transcript, segment_transcript_file, select_strategy

__version__ = "0.1.0"

__all__ = [
    "ChatImport",
    "ChatVaultError",
    "EmptyTranscriptError",
    "ImportedMessage",
    "Segment",
    "SegmentationResult",
    "StrategyComparison",
    "build_chat_import",
    "compare_strategies",
    "detect_format",
    "generate_summary",
    "parse_marked",
    "parse_prefixed",
    "segment_transcript",
    "segment_transcript_file",
    "select_strategy",
    "suggest_title",
]
