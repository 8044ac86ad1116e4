"""fool: a minimal local version control system.

Tracks a staging area, writes per-commit file snapshots, and reports
working-directory status relative to the last commit.
"""

from fool._version import __version__

# Core entry point
from fool.repo import Repo

# Models
from fool.models.commit import CommitRecord, CommitResult
from fool.models.config import RepoConfig
from fool.engine.staging import AddOutcome
from fool.operations.status import StatusInfo

# Exceptions
from fool.exceptions import (
    AlreadyStagedError,
    EmptyIndexError,
    FoolError,
    InvalidPathError,
    LogFormatError,
    NoFilesCommittedError,
    PathNotFoundError,
    RepositoryExistsError,
    RepositoryIOError,
    RepositoryNotInitializedError,
)

__all__ = [
    "__version__",
    "Repo",
    "CommitRecord",
    "CommitResult",
    "RepoConfig",
    "AddOutcome",
    "StatusInfo",
    "FoolError",
    "AlreadyStagedError",
    "EmptyIndexError",
    "InvalidPathError",
    "LogFormatError",
    "NoFilesCommittedError",
    "PathNotFoundError",
    "RepositoryExistsError",
    "RepositoryIOError",
    "RepositoryNotInitializedError",
]
