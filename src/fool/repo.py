"""Repo -- the public handle for a fool repository.

A Repo is built once from a root path and carries every store and engine
the operations need; nothing is process-global.

    repo = Repo.init("project")
    repo.add("notes.txt")
    repo.commit("first draft")
    repo.status()
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Iterable

from fool.engine.commit import CommitEngine
from fool.engine.staging import StagingEngine
from fool.exceptions import (
    RepositoryExistsError,
    RepositoryIOError,
    RepositoryNotInitializedError,
)
from fool.models.config import DEFAULT_MARKER_DIR, RepoConfig
from fool.operations.history import log_entries, log_records, read_head
from fool.operations.status import compute_status
from fool.storage.files import FileIndexStore, FileLogStore, FileSnapshotStore

if TYPE_CHECKING:
    from fool.engine.staging import AddOutcome
    from fool.models.commit import CommitRecord, CommitResult
    from fool.operations.status import StatusInfo

logger = logging.getLogger(__name__)


class Repo:
    """A fool repository rooted at a working directory.

    Use :meth:`init` to create one and :meth:`open` to attach to an existing
    one.  The constructor does not check that the repository exists.
    """

    def __init__(
        self,
        config: RepoConfig,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._config = config
        self._index = FileIndexStore(config)
        self._log = FileLogStore(config)
        self._snapshots = FileSnapshotStore(config)
        self._staging = StagingEngine(config, self._index)
        self._commit_engine = CommitEngine(
            config,
            self._index,
            self._log,
            self._snapshots,
            clock=clock,
        )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @staticmethod
    def _make_config(
        root: str | os.PathLike[str], marker_dir: str, config: RepoConfig | None
    ) -> RepoConfig:
        if config is not None:
            return config
        return RepoConfig(root=Path(root), marker_dir=marker_dir)

    @classmethod
    def init(
        cls,
        root: str | os.PathLike[str] = ".",
        *,
        marker_dir: str = DEFAULT_MARKER_DIR,
        config: RepoConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> Repo:
        """Create the marker directory under ``root`` and return the handle.

        Raises:
            RepositoryExistsError: The marker directory already exists.
            RepositoryIOError: The directory could not be created.
        """
        config = cls._make_config(root, marker_dir, config)
        if config.repo_dir.exists():
            raise RepositoryExistsError(str(config.root))
        try:
            config.repo_dir.mkdir()
        except OSError as e:
            raise RepositoryIOError("initializing repository", e) from e
        logger.info("Initialized repository in %s", config.repo_dir)
        return cls(config, clock=clock)

    @classmethod
    def open(
        cls,
        root: str | os.PathLike[str] = ".",
        *,
        marker_dir: str = DEFAULT_MARKER_DIR,
        config: RepoConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> Repo:
        """Attach to an existing repository.

        Raises:
            RepositoryNotInitializedError: No marker directory under ``root``.
        """
        config = cls._make_config(root, marker_dir, config)
        if not config.repo_dir.is_dir():
            raise RepositoryNotInitializedError(str(config.root))
        return cls(config, clock=clock)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> RepoConfig:
        return self._config

    @property
    def root(self) -> Path:
        return self._config.root

    @property
    def repo_dir(self) -> Path:
        return self._config.repo_dir

    # ------------------------------------------------------------------
    # Staging
    # ------------------------------------------------------------------

    def add(self, path: str | os.PathLike[str], *, base: Path | None = None) -> str:
        """Stage one path.  See :meth:`StagingEngine.add`."""
        return self._staging.add(path, base)

    def add_many(
        self, paths: Iterable[str | os.PathLike[str]], *, base: Path | None = None
    ) -> list[AddOutcome]:
        """Stage several paths, reporting each outcome independently."""
        return self._staging.add_many(paths, base)

    def staged(self) -> list[str]:
        """Currently staged paths, in the order they were added."""
        return self._index.read()

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------

    def commit(self, message: str) -> CommitResult:
        """Commit the staged files.  See :meth:`CommitEngine.create_commit`.

        Raises:
            ValueError: ``message`` is empty.
        """
        if not message:
            raise ValueError("Commit message must not be empty")
        return self._commit_engine.create_commit(message)

    # ------------------------------------------------------------------
    # History and status
    # ------------------------------------------------------------------

    def head(self) -> CommitRecord | None:
        """The most recent commit, or None."""
        return read_head(self._log)

    def log(self, limit: int | None = None) -> list[CommitRecord]:
        """Commit records, newest first."""
        return log_records(self._log, limit=limit)

    def log_entries(self) -> list[str]:
        """Raw log blocks, newest first, exactly as stored."""
        return log_entries(self._log)

    def read_meta(self, commit_id: str) -> CommitRecord | None:
        """Metadata stored in the snapshot directory of ``commit_id``."""
        return self._snapshots.read_meta(commit_id)

    def status(self) -> StatusInfo:
        """Staged, untracked and modified files relative to the last commit."""
        return compute_status(self._config, self._index, self._log, self._snapshots)

    def __repr__(self) -> str:
        return f"Repo({str(self._config.root)!r})"
