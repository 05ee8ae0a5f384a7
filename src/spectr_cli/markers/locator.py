"""Locate the spectr marker block inside a text buffer."""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .constants import END_MARKER, NEWLINE, START_MARKER


START_REGEX = re.compile(re.escape(START_MARKER), re.IGNORECASE)
END_REGEX = re.compile(re.escape(END_MARKER), re.IGNORECASE)


class MarkerStatus(Enum):
    """Classification of a buffer's marker sentinels."""
    ABSENT = "absent"
    OPEN = "open"
    ORPHAN_END = "orphan_end"
    MULTIPLE_STARTS = "multiple_starts"


@dataclass(frozen=True)
class MarkerState:
    """Result of scanning a buffer for the managed block.

    For ``OPEN`` states ``start_index`` points at the start sentinel and
    ``end_index`` at the authoritative end sentinel. ``end_index`` is None
    when the start sentinel is never closed; the managed body then runs to
    the end of the buffer.
    """
    status: MarkerStatus
    start_index: Optional[int] = None
    end_index: Optional[int] = None
    buffer_length: int = 0
    nested: bool = False
    # Offset of the sentinel that made the state invalid, if any.
    offending_index: Optional[int] = None

    @property
    def is_open(self) -> bool:
        return self.status is MarkerStatus.OPEN

    @property
    def is_error(self) -> bool:
        return self.status in (MarkerStatus.ORPHAN_END, MarkerStatus.MULTIPLE_STARTS)

    @property
    def body_start(self) -> Optional[int]:
        if not self.is_open:
            return None
        return self.start_index + len(START_MARKER)

    @property
    def body_end(self) -> Optional[int]:
        if not self.is_open:
            return None
        return self.end_index if self.end_index is not None else self.buffer_length

    @property
    def suffix_start(self) -> Optional[int]:
        """Offset of the first byte after the managed block."""
        if not self.is_open:
            return None
        if self.end_index is None:
            return self.buffer_length
        return self.end_index + len(END_MARKER)

    def body(self, buffer: str) -> Optional[str]:
        """Return the managed body without its surrounding newlines."""
        if not self.is_open:
            return None
        text = buffer[self.body_start:self.body_end]
        if text.startswith(NEWLINE):
            text = text[len(NEWLINE):]
        if text.endswith(NEWLINE):
            text = text[:-len(NEWLINE)]
        return text


def _positions(regex: re.Pattern, buffer: str) -> List[int]:
    return [match.start() for match in regex.finditer(buffer)]


def locate(buffer: str) -> MarkerState:
    """Classify the marker sentinels found in ``buffer``.

    The first end sentinel after the first start sentinel closes the block;
    anything after it is left to the caller as suffix.
    """
    length = len(buffer)
    starts = _positions(START_REGEX, buffer)
    ends = _positions(END_REGEX, buffer)

    if not starts:
        if ends:
            return MarkerState(MarkerStatus.ORPHAN_END, buffer_length=length, offending_index=ends[0])
        return MarkerState(MarkerStatus.ABSENT, buffer_length=length)

    first_start = starts[0]
    leading_ends = [idx for idx in ends if idx < first_start]
    if leading_ends:
        return MarkerState(MarkerStatus.ORPHAN_END, buffer_length=length, offending_index=leading_ends[0])

    body_start = first_start + len(START_MARKER)
    closing = next((idx for idx in ends if idx >= body_start), None)

    if closing is None:
        if len(starts) > 1:
            return MarkerState(
                MarkerStatus.MULTIPLE_STARTS,
                start_index=first_start,
                buffer_length=length,
                offending_index=starts[1],
            )
        return MarkerState(MarkerStatus.OPEN, start_index=first_start, buffer_length=length)

    inner_starts = [idx for idx in starts[1:] if idx < closing]
    if inner_starts:
        return MarkerState(
            MarkerStatus.MULTIPLE_STARTS,
            start_index=first_start,
            end_index=closing,
            buffer_length=length,
            nested=True,
            offending_index=inner_starts[0],
        )

    return MarkerState(MarkerStatus.OPEN, start_index=first_start, end_index=closing, buffer_length=length)


def has_markers(buffer: str) -> bool:
    """True when ``buffer`` holds a usable managed block."""
    return locate(buffer).is_open


def extract_body(buffer: str) -> Optional[str]:
    """Return the managed body of ``buffer`` or None when there is none."""
    return locate(buffer).body(buffer)
