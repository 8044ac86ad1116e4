"""Filesystem implementations of the fool storage interfaces.

All stores operate on paths taken from a RepoConfig, so several
repositories can coexist in one process.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from fool.storage.codec import (
    ENTRY_SEPARATOR,
    decode_index,
    decode_log_entry,
    encode_index,
    encode_log_entry,
    split_log_entries,
)
from fool.storage.repositories import IndexStore, LogStore, SnapshotStore

if TYPE_CHECKING:
    from fool.models.commit import CommitRecord
    from fool.models.config import RepoConfig

logger = logging.getLogger(__name__)

META_FILENAME = "meta.txt"


def _replace_text(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` so readers see either old or new content."""
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}_", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except Exception:
        Path(tmp).unlink(missing_ok=True)
        raise


class FileIndexStore(IndexStore):
    """Staging index kept as newline-separated text in ``.fool/index``."""

    def __init__(self, config: RepoConfig) -> None:
        self._path = config.index_path

    def read(self) -> list[str]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        return decode_index(text)

    def write(self, paths: list[str]) -> None:
        _replace_text(self._path, encode_index(paths))
        logger.debug("Wrote index with %d path(s)", len(paths))


class FileLogStore(LogStore):
    """Commit log kept as blank-line-separated blocks in ``.fool/log``."""

    def __init__(self, config: RepoConfig) -> None:
        self._path = config.log_path

    def read_entries(self) -> list[str]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        return split_log_entries(text)

    def read_records(self) -> list[CommitRecord]:
        return [decode_log_entry(block) for block in self.read_entries()]

    def append(self, record: CommitRecord) -> None:
        with open(self._path, "a", encoding="utf-8", newline="\n") as f:
            f.write(encode_log_entry(record) + ENTRY_SEPARATOR)
        logger.debug("Appended commit %s to log", record.commit_id)


class FileSnapshotStore(SnapshotStore):
    """Snapshot trees under ``.fool/objects/<commit_id>/``."""

    def __init__(self, config: RepoConfig) -> None:
        self._objects_dir = config.objects_dir

    def commit_dir(self, commit_id: str) -> Path:
        return self._objects_dir / commit_id

    def write_file(self, commit_id: str, path: str, data: bytes) -> None:
        dest = self.commit_dir(commit_id) / path
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(data)

    def read_file(self, commit_id: str, path: str) -> bytes:
        return (self.commit_dir(commit_id) / path).read_bytes()

    def write_meta(self, record: CommitRecord) -> None:
        meta_dir = self.commit_dir(record.commit_id)
        meta_dir.mkdir(parents=True, exist_ok=True)
        _replace_text(meta_dir / META_FILENAME, encode_log_entry(record) + "\n")

    def read_meta(self, commit_id: str) -> CommitRecord | None:
        try:
            text = (self.commit_dir(commit_id) / META_FILENAME).read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        return decode_log_entry(text)
