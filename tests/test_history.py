"""Tests for log reading and last-commit state."""

from __future__ import annotations

from fool.operations.history import HeadState, head_state
from fool.repo import Repo
from fool.storage.files import FileLogStore


class TestHistory:
    def test_no_commits(self, repo: Repo) -> None:
        assert repo.head() is None
        assert repo.log() == []
        assert repo.log_entries() == []
        assert head_state(FileLogStore(repo.config)) == HeadState()

    def test_newest_first(self, repo: Repo, write_file) -> None:
        write_file("a.txt", "a")
        repo.add("a.txt")
        first = repo.commit("first").record
        write_file("b.txt", "b")
        repo.add("b.txt")
        second = repo.commit("second").record

        assert [r.commit_id for r in repo.log()] == [second.commit_id, first.commit_id]
        assert repo.log(limit=1) == [second]
        entries = repo.log_entries()
        assert entries[0].startswith(f"commit {second.commit_id}")
        assert entries[1].startswith(f"commit {first.commit_id}")

    def test_head_state(self, repo: Repo, write_file) -> None:
        write_file("a.txt", "a")
        write_file("b c.txt", "b")
        repo.add("a.txt")
        repo.add("b c.txt")
        record = repo.commit("m").record

        state = head_state(FileLogStore(repo.config))
        assert state.has_commits
        assert state.commit_id == record.commit_id
        assert state.files == frozenset({"a.txt", "b c.txt"})

    def test_reads_legacy_log(self, repo: Repo) -> None:
        repo.config.log_path.write_text(
            "commit 0badc0de\n"
            "Date: 2025-05-01T10:00:00Z\n"
            "Message: old style\n"
            "Files: [a.txt b.txt]\n"
            "\n"
        )
        head = repo.head()
        assert head is not None
        assert head.commit_id == "0badc0de"
        assert head.files == ("a.txt", "b.txt")

    def test_damaged_older_entry_does_not_hide_head(self, repo: Repo, write_file) -> None:
        write_file("a.txt", "a")
        repo.add("a.txt")
        record = repo.commit("m").record
        log_path = repo.config.log_path
        log_path.write_text("garbage older entry\n\n" + log_path.read_text())

        assert repo.head() == record
        info = repo.status()
        assert info.head_id == record.commit_id
        assert info.is_clean

        write_file("a.txt", "changed")
        assert repo.status().modified == ["a.txt"]
