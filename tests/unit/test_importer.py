"""Unit tests for the chat-import payload builder."""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from chatvault.exceptions import ChatVaultError, EmptyTranscriptError
from chatvault.importer import build_chat_import
from chatvault.models.chat_import import ChatImport, ImportedMessage

_NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


class TestBuildChatImport:
    """Tests for build_chat_import."""

    def test_builds_messages_from_segments(self) -> None:
        """Each segment becomes a message with the shared timestamp."""
        chat = build_chat_import("User: hi\nChatGPT: hello", "chatgpt", title="Greeting", now=_NOW)

        assert chat.title == "Greeting"
        assert chat.provider == "chatgpt"
        assert [(m.role, m.content) for m in chat.messages] == [
            ("user", "hi"),
            ("assistant", "hello"),
        ]
        assert all(m.timestamp == _NOW for m in chat.messages)
        assert chat.message_count == 2

    def test_title_suggested_when_missing(self) -> None:
        """A blank title is replaced by the first words of the first message."""
        chat = build_chat_import(
            "Human: How do I write a good unit test?\nClaude: Start small.",
            "claude",
            title="   ",
            now=_NOW,
        )

        assert chat.title == "How do I write a..."

    def test_summary_from_first_two_messages(self) -> None:
        """The summary joins the first two messages."""
        chat = build_chat_import("User: **hi**\nChatGPT: hello", "chatgpt", now=_NOW)

        assert chat.summary == "hi hello"

    def test_summary_length_is_configurable(self) -> None:
        """summary_max_length bounds the summary."""
        chat = build_chat_import("abcdefghij", summary_max_length=4, now=_NOW)

        assert chat.summary == "abcd..."

    def test_tags_are_normalised(self) -> None:
        """Tags are trimmed, blanks dropped and duplicates removed."""
        chat = build_chat_import("hello", tags=[" python ", "", "python", "ai"], now=_NOW)

        assert chat.tags == ["python", "ai"]

    def test_unknown_provider_stored_as_other(self) -> None:
        """Providers outside the known set are stored as 'other'."""
        chat = build_chat_import("hello", provider="gemini", now=_NOW)

        assert chat.provider == "other"

    def test_default_timestamp_is_utc_now(self) -> None:
        """Without 'now' the current UTC time is used."""
        before = datetime.now(timezone.utc)

        chat = build_chat_import("hello")

        assert chat.messages[0].timestamp >= before
        assert chat.messages[0].timestamp.tzinfo is not None

    def test_forced_strategy(self) -> None:
        """The strategy argument is passed to the segmenter."""
        chat = build_chat_import("Q\nEdit\nA", strategy="prefix", now=_NOW)

        assert [m.content for m in chat.messages] == ["Q\nEdit\nA"]

    @pytest.mark.parametrize("text", ["", "   ", "\n\n"])
    def test_blank_text_raises_empty_transcript(self, text: str) -> None:
        """Nothing to import is reported with EmptyTranscriptError."""
        with pytest.raises(EmptyTranscriptError, match="Could not parse any messages") as exc_info:
            build_chat_import(text, source="paste")

        assert exc_info.value.source == "paste"
        assert isinstance(exc_info.value, ChatVaultError)

    def test_payload_serialises_to_json(self) -> None:
        """The payload round-trips through JSON."""
        chat = build_chat_import("User: hi\nChatGPT: hello", "chatgpt", now=_NOW)

        payload = json.loads(chat.model_dump_json())

        assert payload["messages"][0] == {
            "role": "user",
            "content": "hi",
            "timestamp": "2026-10-18T12:00:00Z",
        }


class TestChatImportModel:
    """Validation rules of the pydantic models."""

    def test_messages_must_not_be_empty(self) -> None:
        """A chat needs at least one message."""
        with pytest.raises(ValidationError):
            ChatImport(title="t", messages=[])

    def test_message_content_must_not_be_empty(self) -> None:
        """Messages cannot be blank."""
        with pytest.raises(ValidationError):
            ImportedMessage(role="user", content="", timestamp=_NOW)

    def test_invalid_role_rejected(self) -> None:
        """Only user and assistant roles are allowed."""
        with pytest.raises(ValidationError):
            ImportedMessage(role="system", content="x", timestamp=_NOW)
