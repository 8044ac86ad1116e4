"""Commit domain model for fool.

CommitRecord is what the log and ``meta.txt`` store for each commit.
CommitResult is what the commit engine hands back to callers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from pydantic import BaseModel, field_validator

_COMMIT_ID_RE = re.compile(r"^[0-9a-f]{8}$")


class CommitRecord(BaseModel):
    """A single commit as recorded in the log.

    Immutable once created.  ``timestamp`` is kept as the RFC3339 string it
    was written with so the log round-trips byte for byte.
    """

    model_config = {"frozen": True}

    commit_id: str
    timestamp: str
    message: str
    files: tuple[str, ...] = ()

    @field_validator("commit_id")
    @classmethod
    def _check_commit_id(cls, v: str) -> str:
        if not _COMMIT_ID_RE.match(v):
            raise ValueError(f"commit id must be 8 lowercase hex characters, got {v!r}")
        return v

    @field_validator("files", mode="before")
    @classmethod
    def _coerce_files(cls, v: object) -> object:
        if isinstance(v, list):
            return tuple(v)
        return v

    def __str__(self) -> str:
        msg = self.message
        if len(msg) > 60:
            msg = msg[:57] + "..."
        return f"{self.commit_id} {msg}"


@dataclass(frozen=True)
class CommitResult:
    """Outcome of a successful commit.

    Attributes:
        record: The record appended to the log.
        skipped: Staged paths that could not be copied into the snapshot.
    """

    record: CommitRecord
    skipped: list[str] = field(default_factory=list)

    @property
    def committed_count(self) -> int:
        return len(self.record.files)
