"""Merge a freshly rendered managed body into existing file content."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from ..errors import MultipleStartMarkersError, NestedStartMarkerError, OrphanedEndMarkerError
from .constants import BLOCK_SEPARATOR, END_MARKER, NEWLINE, START_MARKER
from .locator import MarkerStatus, locate

MergeAction = Literal["CREATED", "UPDATED", "UNCHANGED"]


@dataclass(frozen=True)
class MergeResult:
    """Bytes to write plus what kind of change they represent."""
    content: str
    action: MergeAction

    @property
    def changed(self) -> bool:
        return self.action != "UNCHANGED"


def render_block(body: str) -> str:
    """Wrap ``body`` in canonical markers, with a trailing newline."""
    return f"{START_MARKER}{NEWLINE}{body}{NEWLINE}{END_MARKER}{NEWLINE}"


def merge(existing: Optional[str], new_body: str, path: Optional[str] = None) -> MergeResult:
    """Compute the new file content for ``new_body``.

    Args:
        existing: Current file text, or None if the file does not exist.
        new_body: Rendered managed body (without markers).
        path: Artifact path, only used in error messages.
    Returns:
        MergeResult; ``UNCHANGED`` means the write should be skipped.
    Raises:
        OrphanedEndMarkerError, NestedStartMarkerError, MultipleStartMarkersError
    """
    if existing is None:
        return MergeResult(render_block(new_body), "CREATED")

    state = locate(existing)

    if state.status is MarkerStatus.ABSENT:
        head = existing.rstrip(NEWLINE)
        if not head.strip():
            return MergeResult(render_block(new_body), "UPDATED")
        return MergeResult(head + BLOCK_SEPARATOR + render_block(new_body), "UPDATED")

    if state.status is MarkerStatus.ORPHAN_END:
        raise OrphanedEndMarkerError(path, f"end marker at offset {state.offending_index} has no preceding start marker")

    if state.status is MarkerStatus.MULTIPLE_STARTS:
        if state.nested:
            raise NestedStartMarkerError(path, f"start marker at offset {state.offending_index} inside an open block")
        raise MultipleStartMarkersError(path, "start markers found with no closing end marker")

    prefix = existing[:state.start_index]
    suffix = existing[state.suffix_start:]
    merged = f"{prefix}{START_MARKER}{NEWLINE}{new_body}{NEWLINE}{END_MARKER}{suffix}"
    if merged == existing:
        return MergeResult(existing, "UNCHANGED")
    return MergeResult(merged, "UPDATED")
