"""AI tool providers."""

from .builtins import build_default_registry, builtin_providers
from .registry import MARKDOWN, TOML, Provider, ProviderRegistry

__all__ = [
    'Provider',
    'ProviderRegistry',
    'MARKDOWN',
    'TOML',
    'builtin_providers',
    'build_default_registry',
]
