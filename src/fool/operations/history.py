"""History operations: log reading and last-commit state.

There is no HEAD pointer file; the last entry in the log is HEAD.  Every
reader re-derives it by splitting the log and decoding its last block.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fool.storage.codec import decode_log_entry

if TYPE_CHECKING:
    from fool.models.commit import CommitRecord
    from fool.storage.repositories import LogStore


@dataclass(frozen=True)
class HeadState:
    """File set and id of the most recent commit.

    Attributes:
        commit_id: Last commit id, or "" if there are no commits.
        files: Paths recorded in the last commit.
    """

    commit_id: str = ""
    files: frozenset[str] = field(default_factory=frozenset)

    @property
    def has_commits(self) -> bool:
        return bool(self.commit_id)


def read_head(log_store: LogStore) -> CommitRecord | None:
    """Return the most recent commit record, or None for an empty log.

    Only the newest block is decoded, so a damaged older entry does not
    hide HEAD.
    """
    entries = log_store.read_entries()
    if not entries:
        return None
    return decode_log_entry(entries[-1])


def head_state(log_store: LogStore) -> HeadState:
    """Return the last commit's id and file set."""
    head = read_head(log_store)
    if head is None:
        return HeadState()
    return HeadState(commit_id=head.commit_id, files=frozenset(head.files))


def log_entries(log_store: LogStore) -> list[str]:
    """Raw log blocks, newest first."""
    return list(reversed(log_store.read_entries()))


def log_records(log_store: LogStore, limit: int | None = None) -> list[CommitRecord]:
    """Decoded commit records, newest first, optionally truncated to ``limit``."""
    records = list(reversed(log_store.read_records()))
    if limit is not None:
        records = records[:limit]
    return records
