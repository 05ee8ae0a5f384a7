"""Slash commands and their frontmatter."""

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class SlashCommand(Enum):
    """Slash commands generated for every provider that supports them."""
    PROPOSAL = "proposal"
    APPLY = "apply"

    def __str__(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return COMMAND_DESCRIPTIONS[self]


COMMAND_DESCRIPTIONS = {
    SlashCommand.PROPOSAL: "Scaffold a new Spectr change and validate strictly.",
    SlashCommand.APPLY: "Implement an approved Spectr change.",
}

# Templates only hold the body; frontmatter is data so providers can tweak it.
BASE_FRONTMATTER: Dict[SlashCommand, Dict[str, Any]] = {
    SlashCommand.PROPOSAL: {
        "description": "Proposal Creation Guide (project)",
        "allowed-tools": "Read, Glob, Grep, Write, Edit, Bash(spectr:*)",
        "agent": "plan",
        "subtask": False,
    },
    SlashCommand.APPLY: {
        "description": "Change Proposal Application/Acceptance Process (project)",
        "allowed-tools": "Read, Glob, Grep, Write, Edit, Bash(spectr:*)",
        "subtask": False,
    },
}


@dataclass(frozen=True)
class FrontmatterOverride:
    """Provider-specific edits to the base frontmatter.

    ``set`` is applied first, then ``remove``.
    """
    set: Dict[str, Any] = field(default_factory=dict)
    remove: List[str] = field(default_factory=list)

    def apply(self, frontmatter: Dict[str, Any]) -> Dict[str, Any]:
        result = copy.deepcopy(frontmatter)
        result.update(copy.deepcopy(self.set))
        for key in self.remove:
            result.pop(key, None)
        return result


def get_base_frontmatter(command: SlashCommand) -> Dict[str, Any]:
    """Return a deep copy of the base frontmatter for ``command``."""
    return copy.deepcopy(BASE_FRONTMATTER.get(command, {}))


def build_frontmatter(command: SlashCommand, override: Optional[FrontmatterOverride] = None) -> Dict[str, Any]:
    frontmatter = get_base_frontmatter(command)
    if override is not None:
        frontmatter = override.apply(frontmatter)
    return frontmatter
