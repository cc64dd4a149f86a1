"""Custom exceptions for chatvault.

The segmenters themselves never raise; these errors belong to the code
that turns segments into an import.
"""

from __future__ import annotations


class ChatVaultError(Exception):
    """Base class for chatvault errors."""


class EmptyTranscriptError(ChatVaultError):
    """Raised when a transcript yields no segments to import.

    This is a user-facing condition (blank or whitespace-only input), not
    an internal failure.

    Attributes:
        source: Label of the transcript origin (e.g. a file path).
    """

    def __init__(
        self,
        message: str = "Could not parse any messages from the provided content.",
        source: str = "<string>",
    ) -> None:
        super().__init__(message)
        self.source = source
