"""Slash-command initializers (Markdown with frontmatter, and TOML)."""

from typing import Dict, Iterable, List, Optional

import frontmatter
import toml

from ..config import InitConfig
from ..core.filesystem import Filesystem, Scope
from ..markers import merge, render_block
from ..models.commands import FrontmatterOverride, SlashCommand, build_frontmatter
from ..models.results import InitResult
from ..templates import TemplateManager
from .base import Initializer, Phase

MARKDOWN_EXTENSION = ".md"
TOML_EXTENSION = ".toml"


class _CommandDirectoryInitializer(Initializer):
    """Shared layout for initializers writing one file per slash command."""

    phase = Phase.COMMANDS
    extension = MARKDOWN_EXTENSION

    def __init__(self, directory: str, commands: Iterable[SlashCommand] = tuple(SlashCommand),
                 prefix: str = "", scope: Scope = Scope.PROJECT):
        super().__init__(directory, scope)
        self.commands = list(commands)
        self.prefix = prefix

    def key_discriminators(self) -> List[str]:
        return [self.prefix] if self.prefix else []

    def command_path(self, command: SlashCommand) -> str:
        return f"{self.path}/{self.prefix}{command.value}{self.extension}"

    def command_paths(self) -> List[str]:
        return [self.command_path(command) for command in self.commands]

    def is_setup(self, project_fs: Filesystem, home_fs: Filesystem, config: InitConfig) -> bool:
        fs = self.filesystem(project_fs, home_fs)
        return all(fs.is_file(path) for path in self.command_paths())


class SlashCommandsInitializer(_CommandDirectoryInitializer):
    """Markdown slash commands: YAML frontmatter followed by a spectr block.

    Existing files keep their frontmatter and any user text around the block;
    frontmatter is added when a file has none.
    """

    kind = "slashcmds"

    def __init__(self, directory: str, commands: Iterable[SlashCommand] = tuple(SlashCommand),
                 prefix: str = "", frontmatter_overrides: Optional[Dict[SlashCommand, FrontmatterOverride]] = None,
                 with_frontmatter: bool = True, scope: Scope = Scope.PROJECT):
        super().__init__(directory, commands, prefix, scope)
        self.frontmatter_overrides = frontmatter_overrides or {}
        self.with_frontmatter = with_frontmatter

    def metadata_for(self, command: SlashCommand) -> Dict:
        if not self.with_frontmatter:
            return {}
        return build_frontmatter(command, self.frontmatter_overrides.get(command))

    def init(self, project_fs: Filesystem, home_fs: Filesystem, config: InitConfig,
             templates: TemplateManager) -> InitResult:
        fs = self.filesystem(project_fs, home_fs)
        result = InitResult()
        variables = config.template_context()

        for command in self.commands:
            path = self.command_path(command)
            body = templates.render_slash_command(command, variables)
            metadata = self.metadata_for(command)
            existing = fs.read_text(path)

            if existing is None:
                block = render_block(body)
                if metadata:
                    content = frontmatter.dumps(frontmatter.Post(block, **metadata)) + "\n"
                else:
                    content = block
                fs.write_text(path, content)
                result.created_files.append(path)
                continue

            original = existing
            if metadata and not frontmatter.checks(existing):
                header = frontmatter.dumps(frontmatter.Post("", **metadata))
                existing = header + "\n\n" + existing.lstrip("\n")

            merged = merge(existing, body, path=path)
            if merged.content == original:
                continue
            fs.write_text(path, merged.content)
            result.updated_files.append(path)

        return result


class TomlSlashCommandsInitializer(_CommandDirectoryInitializer):
    """TOML slash commands (``description`` + ``prompt``), e.g. for Gemini CLI."""

    kind = "toml-slashcmds"
    extension = TOML_EXTENSION

    def render(self, command: SlashCommand, prompt: str) -> str:
        document = {"description": command.description, "prompt": prompt}
        return "# Spectr command, regenerated by spectr-cli init\n" + toml.dumps(document)

    def init(self, project_fs: Filesystem, home_fs: Filesystem, config: InitConfig,
             templates: TemplateManager) -> InitResult:
        fs = self.filesystem(project_fs, home_fs)
        result = InitResult()
        variables = config.template_context()

        for command in self.commands:
            path = self.command_path(command)
            content = self.render(command, templates.render_slash_command(command, variables))
            existing = fs.read_text(path)
            if existing == content:
                continue
            fs.write_text(path, content)
            if existing is None:
                result.created_files.append(path)
            else:
                result.updated_files.append(path)

        return result
