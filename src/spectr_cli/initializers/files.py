"""Directory, marker-managed config file and generated file initializers."""

from ..config import InitConfig
from ..core.filesystem import Filesystem, Scope
from ..markers import has_markers, sync_marker_file
from ..models.commands import SlashCommand
from ..models.results import InitResult
from ..templates import TemplateManager
from .base import Initializer, Phase


class DirectoryInitializer(Initializer):
    """Creates a directory (and its parents)."""

    kind = "dir"
    phase = Phase.DIRECTORIES

    def init(self, project_fs: Filesystem, home_fs: Filesystem, config: InitConfig,
             templates: TemplateManager) -> InitResult:
        fs = self.filesystem(project_fs, home_fs)
        if fs.makedirs(self.path):
            return InitResult.created(self.path)
        return InitResult()

    def is_setup(self, project_fs: Filesystem, home_fs: Filesystem, config: InitConfig) -> bool:
        return self.filesystem(project_fs, home_fs).is_dir(self.path)


class ConfigFileInitializer(Initializer):
    """Keeps the spectr block of an instruction file (e.g. CLAUDE.md) current.

    Content outside the markers belongs to the user and is never touched.
    """

    kind = "config"
    phase = Phase.FILES

    def init(self, project_fs: Filesystem, home_fs: Filesystem, config: InitConfig,
             templates: TemplateManager) -> InitResult:
        body = templates.render_instruction_pointer(config.template_context())
        return sync_marker_file(self.filesystem(project_fs, home_fs), self.path, body)

    def is_setup(self, project_fs: Filesystem, home_fs: Filesystem, config: InitConfig) -> bool:
        content = self.filesystem(project_fs, home_fs).read_text(self.path)
        return content is not None and has_markers(content)


class GeneratedFileInitializer(Initializer):
    """Writes a whole file rendered from a template.

    With ``overwrite=False`` an existing file is left alone, which is what
    user-editable documents such as ``project.md`` need.
    """

    kind = "file"
    phase = Phase.FILES

    def __init__(self, path: str, template: str, overwrite: bool = False, scope: Scope = Scope.PROJECT):
        super().__init__(path, scope)
        self.template = template
        self.overwrite = overwrite

    def render(self, config: InitConfig, templates: TemplateManager) -> str:
        return templates.render_document(self.template, config.template_context()) + "\n"

    def init(self, project_fs: Filesystem, home_fs: Filesystem, config: InitConfig,
             templates: TemplateManager) -> InitResult:
        fs = self.filesystem(project_fs, home_fs)
        existing = fs.read_text(self.path)
        if existing is not None and not self.overwrite:
            return InitResult()

        content = self.render(config, templates)
        if existing == content:
            return InitResult()

        fs.write_text(self.path, content)
        if existing is None:
            return InitResult.created(self.path)
        return InitResult.updated(self.path)

    def is_setup(self, project_fs: Filesystem, home_fs: Filesystem, config: InitConfig) -> bool:
        return self.filesystem(project_fs, home_fs).is_file(self.path)


class SkillFileInitializer(GeneratedFileInitializer):
    """Renders a single SKILL.md for an agent-skills directory."""

    kind = "skill"
    phase = Phase.COMMANDS

    def __init__(self, path: str, command: SlashCommand, scope: Scope = Scope.PROJECT):
        super().__init__(path, template=f"skill-{command.value}.md", overwrite=True, scope=scope)
        self.command = command

    def render(self, config: InitConfig, templates: TemplateManager) -> str:
        return templates.render_skill(self.command, config.template_context()) + "\n"
