"""Rooted filesystem access for project- and home-relative artifacts."""
from __future__ import annotations

import posixpath
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from ..errors import PathEscapeError

DIR_MODE = 0o755
FILE_MODE = 0o644


class Scope(Enum):
    """Filesystem root an artifact path is resolved against."""
    PROJECT = "project"
    HOME = "home"


def normalize_path(path: str) -> str:
    """Normalize a relative artifact path to slash-separated canonical form.

    ``./a//b/../c`` becomes ``a/c``. Absolute paths and paths that climb out
    of the root are rejected.
    """
    if not path:
        raise PathEscapeError(path)
    candidate = path.replace("\\", "/")
    if candidate.startswith("/"):
        raise PathEscapeError(path)
    normalized = posixpath.normpath(candidate)
    if normalized == ".." or normalized.startswith("../"):
        raise PathEscapeError(path)
    return normalized


class Filesystem:
    """Filesystem view rooted at a directory.

    All paths handed to this class are relative to ``root``; anything that
    resolves outside of it raises PathEscapeError. OSErrors from the
    underlying operations are not caught.
    """

    def __init__(self, root: Union[str, Path], scope: Scope = Scope.PROJECT):
        self.root = Path(root).expanduser().resolve()
        self.scope = scope

    def __repr__(self) -> str:
        return f"Filesystem({str(self.root)!r}, scope={self.scope.value})"

    def resolve(self, path: str) -> Path:
        relative = normalize_path(path)
        if relative == ".":
            return self.root
        target = (self.root / relative).resolve()
        if target != self.root and self.root not in target.parents:
            # symlinks can still point outside the root
            raise PathEscapeError(path, str(self.root))
        return target

    def exists(self, path: str) -> bool:
        return self.resolve(path).exists()

    def is_dir(self, path: str) -> bool:
        return self.resolve(path).is_dir()

    def is_file(self, path: str) -> bool:
        return self.resolve(path).is_file()

    def read_text(self, path: str) -> Optional[str]:
        """Return file text, or None if the file does not exist."""
        target = self.resolve(path)
        if not target.exists():
            return None
        return target.read_text(encoding="utf-8")

    def makedirs(self, path: str) -> bool:
        """Create ``path`` and its parents. Returns True if it was created."""
        target = self.resolve(path)
        if target.is_dir():
            return False
        target.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
        return True

    def write_text(self, path: str, content: str) -> None:
        """Write ``content``, creating parent directories as needed."""
        target = self.resolve(path)
        target.parent.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
        # newline="" keeps "\n" on every platform
        with open(target, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        target.chmod(FILE_MODE)
