"""Initializers: idempotent units of scaffolding work."""

from .base import Initializer, Phase
from .commands import SlashCommandsInitializer, TomlSlashCommandsInitializer
from .files import (
    ConfigFileInitializer,
    DirectoryInitializer,
    GeneratedFileInitializer,
    SkillFileInitializer,
)

__all__ = [
    'Initializer',
    'Phase',
    'DirectoryInitializer',
    'ConfigFileInitializer',
    'GeneratedFileInitializer',
    'SkillFileInitializer',
    'SlashCommandsInitializer',
    'TomlSlashCommandsInitializer',
]
