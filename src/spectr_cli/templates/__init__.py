"""Template loading and rendering.

Templates are Markdown files shipped next to this module. Variables use the
``{{name}}`` form and are substituted verbatim; a placeholder left without a
value is a render error.
"""

import re
from pathlib import Path
from typing import Dict, Optional, Union

from ..errors import RenderError
from ..models.commands import SlashCommand

PLACEHOLDER_REGEX = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")

INSTRUCTION_POINTER = "instruction-pointer.md"
AGENTS = "agents.md"
PROJECT = "project.md"


def get_template_dir() -> Path:
    """Get the path to the bundled templates directory."""
    return Path(__file__).parent


def render_string(name: str, text: str, variables: Dict[str, str]) -> str:
    """Substitute ``{{var}}`` placeholders in ``text``."""
    def _replace(match):
        key = match.group(1)
        if key not in variables:
            raise RenderError(name, f"no value for placeholder '{key}'")
        return str(variables[key])

    return PLACEHOLDER_REGEX.sub(_replace, text)


class TemplateManager:
    """Renders the documents spectr writes into provider files."""

    def __init__(self, template_dir: Optional[Union[str, Path]] = None):
        self.template_dir = Path(template_dir) if template_dir else get_template_dir()
        self._cache: Dict[str, str] = {}

    def load(self, name: str) -> str:
        if name not in self._cache:
            template_path = self.template_dir / name
            if not template_path.is_file():
                raise RenderError(name, f"template file not found: {template_path}")
            self._cache[name] = template_path.read_text(encoding="utf-8")
        return self._cache[name]

    def render_document(self, name: str, variables: Dict[str, str]) -> str:
        """Render a named template, trimming trailing newlines.

        The result is used as a managed body, so surrounding whitespace is
        the caller's to add.
        """
        return render_string(name, self.load(name), variables).rstrip("\n")

    def render_instruction_pointer(self, variables: Dict[str, str]) -> str:
        return self.render_document(INSTRUCTION_POINTER, variables)

    def render_slash_command(self, command: SlashCommand, variables: Dict[str, str]) -> str:
        return self.render_document(f"slash-{command.value}.md", variables)

    def render_skill(self, command: SlashCommand, variables: Dict[str, str]) -> str:
        return self.render_document(f"skill-{command.value}.md", variables)
