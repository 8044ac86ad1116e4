"""Configuration model for a fool repository."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, field_validator

DEFAULT_MARKER_DIR = ".fool"


class RepoConfig(BaseModel):
    """Where a repository lives and what status ignores.

    ``root`` is the working directory; repository state lives under
    ``root / marker_dir``.
    """

    root: Path = Path(".")
    marker_dir: str = DEFAULT_MARKER_DIR
    ignored_names: frozenset[str] = frozenset({".git"})

    @field_validator("root", mode="before")
    @classmethod
    def _coerce_root(cls, v: object) -> object:
        if isinstance(v, str):
            return Path(v)
        return v

    @property
    def repo_dir(self) -> Path:
        return self.root / self.marker_dir

    @property
    def index_path(self) -> Path:
        return self.repo_dir / "index"

    @property
    def log_path(self) -> Path:
        return self.repo_dir / "log"

    @property
    def objects_dir(self) -> Path:
        return self.repo_dir / "objects"

    def is_ignored(self, name: str) -> bool:
        return name == self.marker_dir or name in self.ignored_names
