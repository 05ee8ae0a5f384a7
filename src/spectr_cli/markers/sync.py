"""Synchronize a marker-managed file on disk."""
from __future__ import annotations

import posixpath
from typing import TYPE_CHECKING

from ..models.results import InitResult
from .merger import merge

if TYPE_CHECKING:
    from ..core.filesystem import Filesystem


def sync_marker_file(fs: "Filesystem", path: str, body: str) -> InitResult:
    """Create or update the managed block of ``path`` on ``fs``.

    Nothing is written when the merged content equals what is on disk.
    Marker errors are raised with ``path`` attached; OSErrors propagate.
    """
    existing = fs.read_text(path)
    merged = merge(existing, body, path=path)
    if not merged.changed:
        return InitResult()

    parent = posixpath.dirname(path)
    if parent:
        fs.makedirs(parent)
    fs.write_text(path, merged.content)

    if merged.action == "CREATED":
        return InitResult.created(path)
    return InitResult.updated(path)
