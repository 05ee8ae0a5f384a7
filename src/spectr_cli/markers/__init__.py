"""Marker-bounded content synchronization."""

from .constants import END_MARKER, START_MARKER
from .locator import MarkerState, MarkerStatus, extract_body, has_markers, locate
from .merger import MergeResult, merge, render_block
from .sync import sync_marker_file

__all__ = [
    'START_MARKER',
    'END_MARKER',
    'MarkerState',
    'MarkerStatus',
    'locate',
    'has_markers',
    'extract_body',
    'MergeResult',
    'merge',
    'render_block',
    'sync_marker_file',
]
