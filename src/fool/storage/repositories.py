"""Abstract storage interfaces for fool.

Defines ABC interfaces for the three pieces of persisted repository state:
the staging index, the commit log and the snapshot objects.  No filesystem
code here -- pure abstract contracts.

Concrete implementations are in files.py.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fool.models.commit import CommitRecord


class IndexStore(ABC):
    """Abstract interface for the staging index."""

    @abstractmethod
    def read(self) -> list[str]:
        """Return staged paths in insertion order. Empty if none."""
        ...

    @abstractmethod
    def write(self, paths: list[str]) -> None:
        """Replace the whole index with ``paths``."""
        ...

    def clear(self) -> None:
        """Empty the index."""
        self.write([])


class LogStore(ABC):
    """Abstract interface for the append-only commit log."""

    @abstractmethod
    def read_entries(self) -> list[str]:
        """Return raw entry blocks, oldest first."""
        ...

    @abstractmethod
    def read_records(self) -> list[CommitRecord]:
        """Return decoded commit records, oldest first."""
        ...

    @abstractmethod
    def append(self, record: CommitRecord) -> None:
        """Append one commit record."""
        ...


class SnapshotStore(ABC):
    """Abstract interface for per-commit file snapshots."""

    @abstractmethod
    def write_file(self, commit_id: str, path: str, data: bytes) -> None:
        """Store ``data`` as ``path`` inside the snapshot for ``commit_id``."""
        ...

    @abstractmethod
    def read_file(self, commit_id: str, path: str) -> bytes:
        """Return the stored bytes of ``path`` in ``commit_id``.

        Raises OSError if the snapshot file is missing or unreadable.
        """
        ...

    @abstractmethod
    def write_meta(self, record: CommitRecord) -> None:
        """Write the metadata file for ``record`` into its snapshot."""
        ...

    @abstractmethod
    def read_meta(self, commit_id: str) -> CommitRecord | None:
        """Return the metadata stored for ``commit_id``, or None if absent."""
        ...
