"""Spectr CLI: marker-managed instruction files and slash commands for AI coding tools."""

from .version import get_version

__version__ = get_version()
