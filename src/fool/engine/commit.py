"""Commit engine for fool.

Turns the staging index into a commit: snapshot copies of each staged file,
a metadata file, a log entry, and finally an empty index.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable

from fool.engine.hashing import commit_id as compute_commit_id
from fool.engine.hashing import file_digest, utc_timestamp
from fool.exceptions import EmptyIndexError, NoFilesCommittedError, RepositoryIOError
from fool.models.commit import CommitRecord, CommitResult

if TYPE_CHECKING:
    from fool.models.config import RepoConfig
    from fool.storage.repositories import IndexStore, LogStore, SnapshotStore

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CommitEngine:
    """Creates commits from the staging index.

    Per-file failures (unreadable source, unwritable snapshot copy) skip that
    file with a warning; the commit goes ahead with whatever was copied.
    The three bookkeeping writes happen strictly in this order:

    1. ``meta.txt`` in the snapshot directory
    2. log append
    3. index clear

    so the log never names a commit without metadata.  A failure between 2
    and 3 leaves the index populated; the next commit simply snapshots those
    files again.
    """

    def __init__(
        self,
        config: RepoConfig,
        index_store: IndexStore,
        log_store: LogStore,
        snapshot_store: SnapshotStore,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._config = config
        self._index = index_store
        self._log = log_store
        self._snapshots = snapshot_store
        self._clock = clock or _utc_now

    def create_commit(self, message: str) -> CommitResult:
        """Commit every staged file.

        Args:
            message: Commit message.  Callers are responsible for rejecting
                empty messages.

        Returns:
            CommitResult with the appended record and any skipped paths.

        Raises:
            EmptyIndexError: Nothing is staged.
            NoFilesCommittedError: Every staged file was skipped.
            RepositoryIOError: Writing metadata, log or index failed.
        """
        staged = self._index.read()
        if not staged:
            raise EmptyIndexError()

        timestamp = utc_timestamp(self._clock())

        # 1. Read sources
        contents: list[tuple[str, bytes]] = []
        for path in staged:
            try:
                data = (self._config.root / path).read_bytes()
            except OSError as e:
                logger.warning("Could not read '%s', skipping: %s", path, e)
                continue
            contents.append((path, data))

        # 2. Derive id
        c_id = compute_commit_id(
            timestamp, message, [(path, file_digest(data)) for path, data in contents]
        )

        # 3. Materialize snapshot
        committed: list[str] = []
        for path, data in contents:
            try:
                self._snapshots.write_file(c_id, path, data)
            except OSError as e:
                logger.warning("Could not write '%s' into snapshot %s, skipping: %s", path, c_id, e)
                continue
            committed.append(path)

        skipped = [path for path in staged if path not in committed]
        if not committed:
            raise NoFilesCommittedError(skipped)

        record = CommitRecord(
            commit_id=c_id, timestamp=timestamp, message=message, files=committed
        )

        # 4. Bookkeeping, in order
        try:
            self._snapshots.write_meta(record)
        except OSError as e:
            raise RepositoryIOError("writing commit metadata", e) from e
        try:
            self._log.append(record)
        except OSError as e:
            raise RepositoryIOError("writing to log", e) from e
        try:
            self._index.clear()
        except OSError as e:
            raise RepositoryIOError("clearing index", e) from e

        logger.info("Committed %d file(s) as %s", len(committed), c_id)
        return CommitResult(record=record, skipped=skipped)
