"""Hashing and timestamp utilities for fool commits.

Commit ids are short opaque strings: the first 8 hex characters of a SHA-1
over the commit timestamp and message.  When file digests are supplied they
are folded into the same hash, so two commits made in the same second with
the same message but different content still get different ids.
"""

from __future__ import annotations

import hashlib
from datetime import datetime, timezone
from typing import Iterable

COMMIT_ID_LENGTH = 8
RFC3339_UTC = "%Y-%m-%dT%H:%M:%SZ"


def utc_timestamp(now: datetime | None = None) -> str:
    """Format ``now`` (default: current time) as a UTC RFC3339 string.

    Naive datetimes are assumed to already be in UTC.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime(RFC3339_UTC)


def file_digest(data: bytes) -> str:
    """SHA-256 hex digest of file content."""
    return hashlib.sha256(data).hexdigest()


def commit_id(
    timestamp: str,
    message: str,
    file_digests: Iterable[tuple[str, str]] = (),
) -> str:
    """Compute the short commit id.

    Args:
        timestamp: RFC3339 commit timestamp.
        message: Commit message.
        file_digests: ``(path, digest)`` pairs for the committed files, in
            commit order.  Omitting them gives the plain timestamp+message id.

    Returns:
        8 lowercase hex characters.
    """
    h = hashlib.sha1((timestamp + message).encode("utf-8"))
    for path, digest in file_digests:
        h.update(b"\x00" + path.encode("utf-8") + b"\x00" + digest.encode("ascii"))
    return h.hexdigest()[:COMMIT_ID_LENGTH]
