"""Fool exception hierarchy.

All fool-specific exceptions inherit from FoolError.
"""

from __future__ import annotations


class FoolError(Exception):
    """Base exception for all fool errors."""


class RepositoryNotInitializedError(FoolError):
    """Raised when an operation needs a repository that does not exist."""

    def __init__(self, root: str) -> None:
        self.root = root
        super().__init__("not a fool repository (run 'fool init' first)")


class RepositoryExistsError(FoolError):
    """Raised when init targets an already initialized repository."""

    def __init__(self, root: str) -> None:
        self.root = root
        super().__init__("Repository already initialized.")


class PathNotFoundError(FoolError):
    """Raised when a referenced path is absent from the working directory."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"File '{path}' does not exist.")


class InvalidPathError(FoolError):
    """Raised when a path cannot be tracked by the repository."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot track '{path}': {reason}")


class AlreadyStagedError(FoolError):
    """Raised when adding a path that is already in the staging index."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"File '{path}' is already staged.")


class EmptyIndexError(FoolError):
    """Raised when committing with nothing staged."""

    def __init__(self) -> None:
        super().__init__("Nothing to commit. Staging area is empty.")


class NoFilesCommittedError(FoolError):
    """Raised when every staged file failed to copy into the snapshot.

    The index is left untouched so the commit can be retried.
    """

    def __init__(self, skipped: list[str]) -> None:
        self.skipped = skipped
        super().__init__("No files were committed.")


class RepositoryIOError(FoolError):
    """Raised when writing repository metadata (index, log, meta.txt) fails."""

    def __init__(self, action: str, cause: OSError) -> None:
        self.action = action
        self.cause = cause
        super().__init__(f"Error {action}: {cause}")


class LogFormatError(FoolError):
    """Raised when a log entry cannot be decoded into a commit record."""
