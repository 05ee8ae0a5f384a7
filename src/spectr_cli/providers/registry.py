"""Provider model and the registry holding them."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from ..core.filesystem import Scope
from ..errors import UnknownProviderError
from ..initializers import (
    ConfigFileInitializer,
    DirectoryInitializer,
    Initializer,
    SkillFileInitializer,
    SlashCommandsInitializer,
    TomlSlashCommandsInitializer,
)
from ..models.commands import FrontmatterOverride, SlashCommand

MARKDOWN = "markdown"
TOML = "toml"


@dataclass
class Provider:
    """An AI tool integration and the artifacts it needs.

    Every field besides ``id``/``name``/``priority`` is optional; a provider
    contributes only the initializers its fields describe.
    """
    id: str
    name: str
    priority: int
    instruction_file: Optional[str] = None
    command_dir: Optional[str] = None
    command_format: str = MARKDOWN
    command_prefix: str = ""
    command_scope: Scope = Scope.PROJECT
    with_frontmatter: bool = True
    frontmatter_overrides: Dict[SlashCommand, FrontmatterOverride] = field(default_factory=dict)
    skills_dir: Optional[str] = None

    def initializers(self) -> List[Initializer]:
        """Initializers for this provider, in declaration order."""
        result: List[Initializer] = []

        if self.command_dir:
            result.append(DirectoryInitializer(self.command_dir, scope=self.command_scope))
        if self.skills_dir:
            result.append(DirectoryInitializer(self.skills_dir))
        if self.instruction_file:
            result.append(ConfigFileInitializer(self.instruction_file))

        if self.command_dir:
            if self.command_format == TOML:
                result.append(TomlSlashCommandsInitializer(
                    self.command_dir, prefix=self.command_prefix, scope=self.command_scope,
                ))
            else:
                result.append(SlashCommandsInitializer(
                    self.command_dir,
                    prefix=self.command_prefix,
                    frontmatter_overrides=self.frontmatter_overrides,
                    with_frontmatter=self.with_frontmatter,
                    scope=self.command_scope,
                ))

        if self.skills_dir:
            for command in SlashCommand:
                result.append(SkillFileInitializer(f"{self.skills_dir}/spectr-{command.value}/SKILL.md", command))

        return result


class ProviderRegistry:
    """Explicit registry of providers, built once and passed around."""

    def __init__(self, providers: Optional[Iterable[Provider]] = None):
        self._providers: Dict[str, Provider] = {}
        for provider in providers or []:
            self.register(provider)

    def __len__(self) -> int:
        return len(self._providers)

    def __contains__(self, provider_id: str) -> bool:
        return provider_id.lower() in self._providers

    def register(self, provider: Provider) -> None:
        """Add a provider.

        Raises:
            ValueError: If a provider with the same id is already registered.
        """
        provider_id = provider.id.lower()
        if provider_id in self._providers:
            raise ValueError(f"Provider already registered: {provider.id}")
        self._providers[provider_id] = provider

    def get(self, provider_id: str) -> Provider:
        try:
            return self._providers[provider_id.lower()]
        except KeyError:
            raise UnknownProviderError(provider_id) from None

    def all(self) -> List[Provider]:
        """Providers ordered by priority, then id."""
        return sorted(self._providers.values(), key=lambda p: (p.priority, p.id))

    def ids(self) -> List[str]:
        return [provider.id for provider in self.all()]
