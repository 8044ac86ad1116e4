"""Status computation: reconcile staged, committed and working-directory files."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fool.operations.history import head_state

if TYPE_CHECKING:
    from fool.models.config import RepoConfig
    from fool.storage.repositories import IndexStore, LogStore, SnapshotStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatusInfo:
    """Working-directory status returned by Repo.status().

    Attributes:
        head_id: Last commit id, or "" if there are no commits.
        staged: Every path in the staging index.
        untracked: Top-level files neither staged nor in the last commit.
        modified: Last-commit files, not staged, whose bytes differ from the
            snapshot.
    """

    head_id: str = ""
    staged: list[str] = field(default_factory=list)
    untracked: list[str] = field(default_factory=list)
    modified: list[str] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return not (self.staged or self.untracked or self.modified)

    def __str__(self) -> str:
        head = self.head_id or "None"
        return (
            f"{head} | {len(self.staged)} staged, "
            f"{len(self.untracked)} untracked, {len(self.modified)} modified"
        )


def working_files(config: RepoConfig) -> list[str]:
    """Names of regular files directly under the repository root.

    Directories, the marker directory and ignored names are skipped.
    """
    names = []
    with os.scandir(config.root) as it:
        for entry in it:
            if config.is_ignored(entry.name) or entry.is_dir():
                continue
            names.append(entry.name)
    return names


def _differs_from_snapshot(
    config: RepoConfig, snapshot_store: SnapshotStore, commit_id: str, path: str
) -> bool:
    """True only when both sides are readable and their bytes differ."""
    try:
        current = (config.root / path).read_bytes()
        committed = snapshot_store.read_file(commit_id, path)
    except OSError as e:
        logger.debug("Cannot compare %s against %s: %s", path, commit_id, e)
        return False
    return current != committed


def compute_status(
    config: RepoConfig,
    index_store: IndexStore,
    log_store: LogStore,
    snapshot_store: SnapshotStore,
) -> StatusInfo:
    """Classify files as staged, untracked or modified.

    Files that are committed and unchanged are not listed.  Each group is
    sorted.
    """
    staged = set(index_store.read())
    head = head_state(log_store)

    untracked = [
        name for name in working_files(config)
        if name not in staged and name not in head.files
    ]

    modified = []
    if head.has_commits:
        for path in head.files:
            if path in staged:
                continue
            if _differs_from_snapshot(config, snapshot_store, head.commit_id, path):
                modified.append(path)

    return StatusInfo(
        head_id=head.commit_id,
        staged=sorted(staged),
        untracked=sorted(untracked),
        modified=sorted(modified),
    )
