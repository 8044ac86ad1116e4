"""Line-oriented text encoding for the staging index and the commit log.

Index format: one repository-relative path per line.

Log format: one block per commit, blocks separated by a blank line::

    commit 1a2b3c4d
    Date: 2026-01-01T12:00:00Z
    Message: first commit
    Files: ["a.txt", "docs/b c.txt"]

The ``Files`` value is a JSON array so paths containing commas, brackets or
spaces survive a round trip.  Logs written before that change used a bare
space-separated list (``Files: [a.txt b.txt]``); those are still decoded,
with the old ambiguity.  ``Message`` escapes backslash, CR and LF so a block
never contains an empty line.
"""

from __future__ import annotations

import json
import re

from fool.exceptions import LogFormatError
from fool.models.commit import CommitRecord

ENTRY_SEPARATOR = "\n\n"

_COMMIT_PREFIX = "commit "
_DATE_PREFIX = "Date: "
_MESSAGE_PREFIX = "Message: "
_FILES_PREFIX = "Files: "

_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r"}
_UNESCAPES = {"\\": "\\", "n": "\n", "r": "\r"}
_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


# ---------------------------------------------------------------------------
# Index
# ---------------------------------------------------------------------------

def encode_index(paths: list[str]) -> str:
    """Serialize staged paths, one per line."""
    if not paths:
        return ""
    return "".join(f"{p}\n" for p in paths)


def decode_index(text: str) -> list[str]:
    """Parse index text into an ordered, duplicate-free list of paths."""
    seen: dict[str, None] = {}
    for line in text.split("\n"):
        if line:
            seen.setdefault(line, None)
    return list(seen)


# ---------------------------------------------------------------------------
# Log
# ---------------------------------------------------------------------------

def escape_message(message: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in message)


def unescape_message(text: str) -> str:
    return _ESCAPE_RE.sub(lambda m: _UNESCAPES.get(m.group(1), m.group(0)), text)


def split_log_entries(text: str) -> list[str]:
    """Split raw log text into entry blocks, oldest first.

    Empty blocks (leading/trailing separators, stray blank lines) are dropped.
    """
    entries = []
    for block in text.split(ENTRY_SEPARATOR):
        block = block.strip("\n")
        if block:
            entries.append(block)
    return entries


def encode_log_entry(record: CommitRecord) -> str:
    """Render a commit record as a log block (no trailing separator)."""
    files = json.dumps(list(record.files), ensure_ascii=False)
    return (
        f"{_COMMIT_PREFIX}{record.commit_id}\n"
        f"{_DATE_PREFIX}{record.timestamp}\n"
        f"{_MESSAGE_PREFIX}{escape_message(record.message)}\n"
        f"{_FILES_PREFIX}{files}"
    )


def _decode_files(value: str) -> list[str]:
    try:
        files = json.loads(value)
    except json.JSONDecodeError:
        files = None
    if isinstance(files, list) and all(isinstance(f, str) for f in files):
        return files
    # Legacy "[a b, c]" form: any of "[", "]", space, comma ends a name.
    return [name for name in re.split(r"[\[\], ]+", value) if name]


def decode_log_entry(block: str) -> CommitRecord:
    """Parse one log block back into a CommitRecord.

    Raises:
        LogFormatError: If the block has no ``commit`` line or the id is bad.
    """
    commit_id = None
    timestamp = ""
    message = ""
    files: list[str] = []
    for line in block.split("\n"):
        if line.startswith(_COMMIT_PREFIX):
            commit_id = line[len(_COMMIT_PREFIX):].strip()
        elif line.startswith(_DATE_PREFIX):
            timestamp = line[len(_DATE_PREFIX):]
        elif line.startswith(_MESSAGE_PREFIX):
            message = unescape_message(line[len(_MESSAGE_PREFIX):])
        elif line.startswith(_FILES_PREFIX):
            files = _decode_files(line[len(_FILES_PREFIX):])

    if commit_id is None:
        raise LogFormatError(f"Log entry has no commit line: {block[:40]!r}")
    try:
        return CommitRecord(
            commit_id=commit_id, timestamp=timestamp, message=message, files=files
        )
    except ValueError as e:
        raise LogFormatError(f"Malformed log entry for commit {commit_id!r}: {e}") from None
