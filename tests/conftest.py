"""Shared test fixtures."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

SAMPLE_LINES = [
    "2024-01-15 ERROR: Connection failed",
    "2024-01-15 INFO: Server started",
    "2024-01-15 DEBUG: Processing request",
    "2024-01-15 ERROR: Timeout occurred",
    "2024-01-15 INFO: Request completed",
    "2024-01-15 WARN: High memory usage",
]


@pytest.fixture
def sample_text_file(tmp_path: Path) -> Path:
    """Create a temporary text file with sample content."""
    text_file = tmp_path / "app.log"
    text_file.write_text("\n".join(SAMPLE_LINES) + "\n")
    return text_file


@pytest.fixture
def filter_file(tmp_path: Path) -> Path:
    """Create a filter file with a blank line between two filters."""
    path = tmp_path / "filters.txt"
    path.write_text("+foo\n\n-bar\n")
    return path


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config directory at a temporary location."""
    d = tmp_path / "config"
    monkeypatch.setenv("LINESIEVE_CONFIG_DIR", str(d))
    return d


@pytest.fixture(autouse=True)
def _reset_linesieve_logger() -> Iterator[None]:
    """Drop handlers installed by configure_logging between tests."""
    yield
    logger = logging.getLogger("linesieve")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
