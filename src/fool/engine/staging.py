"""Staging engine for fool.

Maintains the staging index: an ordered, duplicate-free list of
repository-relative paths that the next commit will snapshot.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, Iterable

from fool.exceptions import (
    AlreadyStagedError,
    FoolError,
    InvalidPathError,
    PathNotFoundError,
    RepositoryIOError,
)

if TYPE_CHECKING:
    from fool.models.config import RepoConfig
    from fool.storage.repositories import IndexStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddOutcome:
    """Result of staging one path in a multi-path add.

    Attributes:
        path: The path as the caller gave it.
        staged_as: Repository-relative path written to the index, or None.
        error: The error that prevented staging, or None on success.
    """

    path: str
    staged_as: str | None = None
    error: FoolError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class StagingEngine:
    """Adds paths to the staging index.

    Each add reads the whole index, checks for the path, and rewrites the
    index in full.  There is no multi-path transaction: ``add_many`` is a
    sequence of independent adds.
    """

    def __init__(self, config: RepoConfig, index_store: IndexStore) -> None:
        self._config = config
        self._index = index_store

    def normalize(self, path: str | os.PathLike[str], base: Path | None = None) -> str:
        """Turn ``path`` into the repository-relative POSIX form stored in the index.

        Relative paths are resolved against ``base`` (default: repository root).

        Raises:
            InvalidPathError: If the path escapes the repository, points into
                the marker directory, or cannot be stored as one index line.
        """
        raw = os.fspath(path)
        if "\n" in raw or "\r" in raw:
            raise InvalidPathError(raw, "path contains a line break")

        root = os.path.abspath(self._config.root)
        full = os.path.abspath(os.path.join(base if base is not None else root, raw))
        rel = os.path.relpath(full, root)
        parts = PurePosixPath(Path(rel).as_posix()).parts

        if rel == os.curdir:
            raise InvalidPathError(raw, "path is the repository root")
        if parts[0] == os.pardir:
            raise InvalidPathError(raw, "path is outside the repository")
        if parts[0] == self._config.marker_dir:
            raise InvalidPathError(raw, "path is inside the repository metadata directory")
        return PurePosixPath(*parts).as_posix()

    def add(self, path: str | os.PathLike[str], base: Path | None = None) -> str:
        """Stage a single path.

        Returns:
            The repository-relative path added to the index.

        Raises:
            PathNotFoundError: If the path does not exist on disk.
            InvalidPathError: If the path cannot be tracked.
            AlreadyStagedError: If the path is already staged (index untouched).
            RepositoryIOError: If the index cannot be rewritten.
        """
        raw = os.fspath(path)
        full = Path(base if base is not None else self._config.root) / raw
        if not full.exists():
            raise PathNotFoundError(raw)

        rel = self.normalize(raw, base)
        staged = self._index.read()
        if rel in staged:
            raise AlreadyStagedError(raw)

        staged.append(rel)
        try:
            self._index.write(staged)
        except OSError as e:
            raise RepositoryIOError("updating index", e) from e
        logger.debug("Staged %s", rel)
        return rel

    def add_many(
        self, paths: Iterable[str | os.PathLike[str]], base: Path | None = None
    ) -> list[AddOutcome]:
        """Stage each path in order, collecting a per-path outcome."""
        outcomes = []
        for path in paths:
            raw = os.fspath(path)
            try:
                rel = self.add(raw, base)
            except FoolError as e:
                outcomes.append(AddOutcome(path=raw, error=e))
            else:
                outcomes.append(AddOutcome(path=raw, staged_as=rel))
        return outcomes
