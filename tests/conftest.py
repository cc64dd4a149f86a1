"""Shared fixtures for chatvault tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

_CONFIG_VARS = ("LOG_LEVEL", "CHATVAULT_PROVIDER", "CHATVAULT_SUMMARY_LENGTH")

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all chatvault-related environment variables.

    Patches ``load_dotenv`` so a real ``.env`` file cannot re-inject values
    that the test explicitly removed.
    """
    monkeypatch.setattr("chatvault.config.load_dotenv", lambda *_a, **_kw: None)
    for key in _CONFIG_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def monkeypatch_env(clean_env: None, monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set every chatvault environment variable to a valid value.

    Returns the dict of variables so tests can inspect or override values.
    """
    env_vars = {
        "LOG_LEVEL": "WARNING",
        "CHATVAULT_PROVIDER": "chatgpt",
        "CHATVAULT_SUMMARY_LENGTH": "80",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture()
def fixtures_dir() -> Path:
    """Directory holding the transcript fixture files."""
    return FIXTURES_DIR


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Generator[None, None, None]:
    """Reset the root logger after each test to prevent handler leaks."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
