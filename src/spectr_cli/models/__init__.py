"""Data models for spectr-cli."""

from .commands import FrontmatterOverride, SlashCommand
from .results import ExecutionResult, InitResult

__all__ = [
    'SlashCommand',
    'FrontmatterOverride',
    'InitResult',
    'ExecutionResult',
]
