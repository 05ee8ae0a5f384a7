"""Utility modules for spectr-cli."""

from .console import (
    _rich_success,
    _rich_error,
    _rich_warning,
    _rich_info,
    _rich_echo,
    _rich_panel,
    _create_files_table,
    _get_console,
    STATUS_SYMBOLS
)
from .logger import get_logger, set_verbose

__all__ = [
    '_rich_success',
    '_rich_error',
    '_rich_warning',
    '_rich_info',
    '_rich_echo',
    '_rich_panel',
    '_create_files_table',
    '_get_console',
    'STATUS_SYMBOLS',
    'get_logger',
    'set_verbose',
]
