"""Tests for chatvault package structure and imports."""

from __future__ import annotations

import re
import subprocess
import sys


def test_package_is_importable() -> None:
    """``import chatvault`` must succeed without errors."""
    import chatvault  # noqa: F401


def test_package_has_version() -> None:
    """``chatvault.__version__`` must be defined."""
    import chatvault

    assert hasattr(chatvault, "__version__")
    assert chatvault.__version__ == "0.1.0"


def test_package_version_is_semver() -> None:
    """Version string must match semantic versioning format."""
    import chatvault

    assert re.match(r"^\d+\.\d+\.\d+$", chatvault.__version__)


def test_top_level_exports() -> None:
    """The segmentation entry points are re-exported at package level."""
    import chatvault

    for name in chatvault.__all__:
        assert hasattr(chatvault, name)
    assert "segment_transcript" in chatvault.__all__


def test_main_module_help() -> None:
    """``python -m chatvault --help`` must run and exit cleanly."""
    result = subprocess.run(
        [sys.executable, "-m", "chatvault", "--help"],
        capture_output=True,
        text=True,
        timeout=10,
    )
    assert result.returncode == 0
    assert "usage" in result.stdout.lower()
    assert "Traceback" not in result.stderr


def test_config_module_importable() -> None:
    """Core config exports must be importable."""
    from chatvault.config import ConfigError, load_settings  # noqa: F401


def test_logging_module_importable() -> None:
    """Core logging exports must be importable."""
    from chatvault.log import get_logger, setup_logging  # noqa: F401
