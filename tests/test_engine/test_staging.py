"""Tests for the staging engine: add, duplicate detection, path normalization."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest
from hypothesis import given, settings

from fool.exceptions import AlreadyStagedError, InvalidPathError, PathNotFoundError
from fool.repo import Repo
from tests.strategies import distinct_file_names


class TestAdd:
    def test_add_existing_file(self, repo: Repo, write_file) -> None:
        write_file("foo.txt", "hello")
        assert repo.add("foo.txt") == "foo.txt"
        assert repo.staged() == ["foo.txt"]
        assert repo.config.index_path.read_text() == "foo.txt\n"

    def test_missing_file(self, repo: Repo) -> None:
        with pytest.raises(PathNotFoundError) as exc_info:
            repo.add("nope.txt")
        assert exc_info.value.path == "nope.txt"
        assert not repo.config.index_path.exists()

    def test_already_staged_leaves_index_unchanged(self, repo: Repo, write_file) -> None:
        write_file("foo.txt", "hello")
        repo.add("foo.txt")
        before = repo.config.index_path.read_text()

        with pytest.raises(AlreadyStagedError):
            repo.add("foo.txt")
        assert repo.config.index_path.read_text() == before

    def test_equivalent_spellings_are_duplicates(self, repo: Repo, write_file) -> None:
        write_file("foo.txt")
        repo.add("foo.txt")
        with pytest.raises(AlreadyStagedError):
            repo.add("./foo.txt")

    def test_nested_path(self, repo: Repo, write_file) -> None:
        write_file("dir/x.txt", "x")
        assert repo.add("dir/x.txt") == "dir/x.txt"

    def test_relative_to_base(self, repo: Repo, write_file, tmp_path: Path) -> None:
        write_file("dir/x.txt", "x")
        assert repo.add("x.txt", base=tmp_path / "dir") == "dir/x.txt"

    def test_absolute_path_inside_root(self, repo: Repo, write_file) -> None:
        path = write_file("abs.txt")
        assert repo.add(str(path)) == "abs.txt"


class TestInvalidPaths:
    def test_outside_repository(self, tmp_path: Path) -> None:
        root = tmp_path / "proj"
        root.mkdir()
        (tmp_path / "other.txt").write_text("x")
        repo = Repo.init(root)
        with pytest.raises(InvalidPathError, match="outside"):
            repo.add("../other.txt")

    def test_marker_directory(self, repo: Repo) -> None:
        with pytest.raises(InvalidPathError, match="metadata"):
            repo.add(".fool")

    def test_repository_root(self, repo: Repo) -> None:
        with pytest.raises(InvalidPathError, match="root"):
            repo.add(".")

    def test_line_break(self, repo: Repo, write_file) -> None:
        write_file("a\nb.txt")
        with pytest.raises(InvalidPathError, match="line break"):
            repo.add("a\nb.txt")


class TestAddMany:
    def test_outcomes_in_given_order(self, repo: Repo, write_file) -> None:
        write_file("a.txt")
        write_file("b.txt")
        outcomes = repo.add_many(["a.txt", "missing.txt", "a.txt", "b.txt"])

        assert [o.path for o in outcomes] == ["a.txt", "missing.txt", "a.txt", "b.txt"]
        assert outcomes[0].ok and outcomes[0].staged_as == "a.txt"
        assert isinstance(outcomes[1].error, PathNotFoundError)
        assert isinstance(outcomes[2].error, AlreadyStagedError)
        assert outcomes[3].ok
        assert repo.staged() == ["a.txt", "b.txt"]

    @settings(max_examples=25, deadline=None)
    @given(distinct_file_names)
    def test_distinct_adds_stage_each_once(self, names: list[str]) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in names:
                (root / name).write_text(name)
            repo = Repo.init(root)

            outcomes = repo.add_many(names)

            assert all(o.ok for o in outcomes)
            assert repo.staged() == names

            again = repo.add_many(names)
            assert all(isinstance(o.error, AlreadyStagedError) for o in again)
            assert repo.staged() == names
