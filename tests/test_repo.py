"""Tests for Repo construction and end-to-end scenarios."""

from __future__ import annotations

from pathlib import Path

import pytest

from fool import Repo
from fool.exceptions import (
    RepositoryExistsError,
    RepositoryIOError,
    RepositoryNotInitializedError,
)


class TestInit:
    def test_creates_marker_directory(self, tmp_path: Path) -> None:
        repo = Repo.init(tmp_path)
        assert (tmp_path / ".fool").is_dir()
        assert repo.repo_dir == tmp_path / ".fool"

    def test_second_init_leaves_state_alone(self, tmp_path: Path) -> None:
        repo = Repo.init(tmp_path)
        (tmp_path / "a.txt").write_text("a")
        repo.add("a.txt")

        with pytest.raises(RepositoryExistsError):
            Repo.init(tmp_path)
        assert repo.staged() == ["a.txt"]

    def test_init_failure(self, tmp_path: Path) -> None:
        with pytest.raises(RepositoryIOError):
            Repo.init(tmp_path / "missing" / "deeper")

    def test_custom_marker_dir(self, tmp_path: Path) -> None:
        repo = Repo.init(tmp_path, marker_dir=".other")
        assert (tmp_path / ".other").is_dir()
        assert Repo.open(tmp_path, marker_dir=".other").config == repo.config


class TestOpen:
    def test_uninitialized(self, tmp_path: Path) -> None:
        with pytest.raises(RepositoryNotInitializedError):
            Repo.open(tmp_path)

    def test_open_existing(self, tmp_path: Path) -> None:
        Repo.init(tmp_path)
        assert Repo.open(tmp_path).root == tmp_path


class TestScenario:
    def test_add_commit_status_cycle(self, tmp_path: Path, fixed_clock) -> None:
        repo = Repo.init(tmp_path, clock=fixed_clock)
        (tmp_path / "foo.txt").write_text("hello")

        repo.add("foo.txt")
        assert "foo.txt" in repo.config.index_path.read_text()

        result = repo.commit("m1")
        assert result.committed_count == 1
        assert repo.config.index_path.read_text().strip() == ""
        assert "m1" in repo.config.log_path.read_text()
        assert repo.status().is_clean

        (tmp_path / "foo.txt").write_text("hello again")
        assert repo.status().modified == ["foo.txt"]
