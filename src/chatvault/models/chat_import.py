"""Pydantic models for the chat-import payload.

A :class:`ChatImport` is what the import intake hands to the storage
layer: chat metadata plus one :class:`ImportedMessage` per segment.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class ImportedMessage(BaseModel):
    """A single message record derived from a segment.

    Attributes:
        role: ``"user"`` or ``"assistant"``.
        content: Message text.
        timestamp: Import time stamped on every message of one import.
    """

    role: Literal["user", "assistant"]
    content: str = Field(min_length=1)
    timestamp: datetime


class ChatImport(BaseModel):
    """A complete chat ready to be stored.

    Attributes:
        title: Chat title, either user supplied or suggested from the
            first message.
        summary: Short preview built from the first two messages.
        provider: Provider hint the transcript was imported with.
        tags: Trimmed, de-duplicated tag names.
        messages: Messages in chronological order (never empty).
    """

    title: str
    summary: str = ""
    provider: Literal["chatgpt", "claude", "grok", "other"] = "other"
    tags: list[str] = Field(default_factory=list)
    messages: list[ImportedMessage] = Field(min_length=1)

    @field_validator("tags")
    @classmethod
    def _normalise_tags(cls, value: list[str]) -> list[str]:
        """Strip tags, drop blank ones and keep the first of any duplicate."""
        cleaned = (tag.strip() for tag in value)
        return list(dict.fromkeys(tag for tag in cleaned if tag))

    @property
    def message_count(self) -> int:
        """Number of messages in the import."""
        return len(self.messages)
