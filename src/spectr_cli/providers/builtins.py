"""Built-in provider definitions."""

from typing import List

from ..core.filesystem import Scope
from ..models.commands import FrontmatterOverride, SlashCommand
from .registry import TOML, Provider, ProviderRegistry

# Tools that do not understand the extra frontmatter keys.
_PLAIN_DESCRIPTION = FrontmatterOverride(remove=["agent", "subtask", "allowed-tools"])


def builtin_providers() -> List[Provider]:
    return [
        Provider("claude", "Claude Code", 1, instruction_file="CLAUDE.md",
                 command_dir=".claude/commands/spectr"),
        Provider("cline", "Cline", 2, instruction_file="CLINE.md",
                 command_dir=".clinerules/commands/spectr", with_frontmatter=False),
        Provider("costrict", "CoStrict", 3, instruction_file="COSTRICT.md",
                 command_dir=".cospec/spectr/commands", command_prefix="spectr-"),
        Provider("qoder", "Qoder", 4, instruction_file="QODER.md",
                 command_dir=".qoder/commands/spectr"),
        Provider("codebuddy", "CodeBuddy", 5, instruction_file="CODEBUDDY.md",
                 command_dir=".codebuddy/commands/spectr"),
        Provider("qwen", "Qwen Code", 6, instruction_file="QWEN.md",
                 command_dir=".qwen/commands/spectr", command_format=TOML),
        Provider("antigravity", "Antigravity", 7, instruction_file="AGENTS.md",
                 command_dir=".agent/workflows", command_prefix="spectr-",
                 frontmatter_overrides={cmd: _PLAIN_DESCRIPTION for cmd in SlashCommand}),
        Provider("gemini", "Gemini CLI", 8, command_dir=".gemini/commands/spectr", command_format=TOML),
        Provider("codex", "Codex CLI", 9, instruction_file="AGENTS.md",
                 command_dir=".codex/prompts", command_prefix="spectr-", command_scope=Scope.HOME,
                 frontmatter_overrides={cmd: _PLAIN_DESCRIPTION for cmd in SlashCommand}),
        Provider("amp", "Amp", 10, instruction_file="AMP.md", skills_dir=".agents/skills"),
        Provider("kimi", "Kimi CLI", 11, instruction_file="AGENTS.md", skills_dir=".agents/skills"),
        Provider("cursor", "Cursor", 101, command_dir=".cursor/commands/spectr"),
        Provider("windsurf", "Windsurf", 102, command_dir=".windsurf/workflows", command_prefix="spectr-",
                 frontmatter_overrides={cmd: _PLAIN_DESCRIPTION for cmd in SlashCommand}),
        Provider("kilocode", "Kilo Code", 103, command_dir=".kilocode/workflows", command_prefix="spectr-",
                 with_frontmatter=False),
        Provider("opencode", "OpenCode", 104, command_dir=".opencode/command/spectr"),
        Provider("copilot", "GitHub Copilot", 105, command_dir=".github/prompts", command_prefix="spectr-",
                 frontmatter_overrides={cmd: FrontmatterOverride(set={"mode": "agent"}, remove=["agent", "subtask"])
                                        for cmd in SlashCommand}),
        Provider("continue", "Continue", 106, command_dir=".continue/prompts/spectr"),
        Provider("aider", "Aider", 107, command_dir=".config/aider/commands/spectr", command_scope=Scope.HOME,
                 with_frontmatter=False),
        Provider("tabnine", "Tabnine", 108, command_dir=".tabnine/agent/commands/spectr"),
    ]


def build_default_registry() -> ProviderRegistry:
    """Registry with every built-in provider."""
    return ProviderRegistry(builtin_providers())
