"""Configuration loading for chatvault.

Reads optional settings from environment variables (with .env support via
python-dotenv).  Every setting has a default; invalid values are reported
together in a single :class:`ConfigError`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from chatvault.models.segment import PROVIDERS
from chatvault.preview import DEFAULT_SUMMARY_LENGTH


class ConfigError(Exception):
    """Raised when configuration values are invalid."""


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        log_level: Logging level (default ``"INFO"``).
        default_provider: Provider hint used when the caller gives none
            (default ``"other"``).
        summary_max_length: Maximum length of generated chat summaries
            (default ``200``).
    """

    log_level: str = "INFO"
    default_provider: str = "other"
    summary_max_length: int = DEFAULT_SUMMARY_LENGTH


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Calls :func:`dotenv.load_dotenv` so a ``.env`` file in the project root
    is picked up automatically.

    Environment variables:
        ``LOG_LEVEL``, ``CHATVAULT_PROVIDER``, ``CHATVAULT_SUMMARY_LENGTH``.
        Unset or blank variables fall back to the :class:`Settings`
        defaults.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        ConfigError: If any variable holds an invalid value.  The message
            names **all** offending variables.
    """
    load_dotenv()

    values: dict[str, object] = {}
    invalid: list[str] = []

    log_level = os.environ.get("LOG_LEVEL", "").strip()
    if log_level:
        if isinstance(logging.getLevelName(log_level.upper()), int):
            values["log_level"] = log_level.upper()
        else:
            invalid.append(f"LOG_LEVEL={log_level!r}")

    provider = os.environ.get("CHATVAULT_PROVIDER", "").strip().lower()
    if provider:
        if provider in PROVIDERS:
            values["default_provider"] = provider
        else:
            invalid.append(f"CHATVAULT_PROVIDER={provider!r}")

    summary_length = os.environ.get("CHATVAULT_SUMMARY_LENGTH", "").strip()
    if summary_length:
        if summary_length.isdigit() and int(summary_length) > 0:
            values["summary_max_length"] = int(summary_length)
        else:
            invalid.append(f"CHATVAULT_SUMMARY_LENGTH={summary_length!r}")

    if invalid:
        raise ConfigError(f"Invalid environment variables: {', '.join(invalid)}")

    return Settings(**values)  # type: ignore[arg-type]
