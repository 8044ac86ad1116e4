"""Shared test fixtures for fool.

Provides an initialized repository in a temporary directory, a fixed
clock, and a helper for writing working-directory files.
"""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from fool.models.config import RepoConfig
from fool.repo import Repo

FIXED_NOW = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
FIXED_TIMESTAMP = "2026-01-02T03:04:05Z"


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def repo(tmp_path: Path, fixed_clock) -> Repo:
    """Freshly initialized repository rooted at tmp_path."""
    return Repo.init(tmp_path, clock=fixed_clock)


@pytest.fixture
def config(tmp_path: Path) -> RepoConfig:
    """Config whose marker directory exists, for driving stores directly."""
    cfg = RepoConfig(root=tmp_path)
    cfg.repo_dir.mkdir()
    return cfg


@pytest.fixture
def write_file(tmp_path: Path):
    """Write a file relative to tmp_path, creating parent directories."""

    def _write(rel: str, content: str | bytes = "") -> Path:
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_bytes(content)
        return path

    return _write
