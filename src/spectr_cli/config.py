"""Configuration management for spectr-cli.

Three layers:

* ``InitConfig`` - the spectr directory name and the paths derived from it,
  handed to every initializer.
* ``spectr.yaml`` - optional project file overriding ``root_dir``; searched
  from the working directory upward.
* ``~/.spectr/config.json`` - user defaults (e.g. providers to configure when
  none are given on the command line).
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .errors import ConfigError


DEFAULT_ROOT_DIR = "spectr"
PROJECT_CONFIG_FILE = "spectr.yaml"

CONFIG_DIR = os.path.expanduser("~/.spectr")
CONFIG_FILE = os.path.join(CONFIG_DIR, "config.json")


@dataclass
class InitConfig:
    """Base-directory configuration passed to initializers."""
    spectr_dir: str = DEFAULT_ROOT_DIR
    project_root: Optional[Path] = None

    def validate(self) -> None:
        if not self.spectr_dir:
            raise ConfigError("root_dir must not be empty")
        if self.spectr_dir.startswith("/"):
            raise ConfigError("root_dir must be relative, not absolute")
        if ".." in self.spectr_dir:
            raise ConfigError("root_dir must not contain path traversal")

    @property
    def specs_dir(self) -> str:
        return f"{self.spectr_dir}/specs"

    @property
    def changes_dir(self) -> str:
        return f"{self.spectr_dir}/changes"

    @property
    def project_file(self) -> str:
        return f"{self.spectr_dir}/project.md"

    @property
    def agents_file(self) -> str:
        return f"{self.spectr_dir}/AGENTS.md"

    def template_context(self) -> Dict[str, str]:
        """Variables available to every template."""
        return {
            "base_dir": self.spectr_dir,
            "specs_dir": self.specs_dir,
            "changes_dir": self.changes_dir,
            "project_file": self.project_file,
            "agents_file": self.agents_file,
            "project_name": self.project_root.name if self.project_root else "project",
        }


def find_project_config(start: Union[str, Path]) -> Optional[Path]:
    """Walk up from ``start`` looking for spectr.yaml."""
    current = Path(start).expanduser().resolve()
    for directory in [current, *current.parents]:
        candidate = directory / PROJECT_CONFIG_FILE
        if candidate.is_file():
            return candidate
    return None


def load_project_config(start: Union[str, Path]) -> InitConfig:
    """Load spectr.yaml for the project containing ``start``.

    Returns the default configuration rooted at ``start`` when no file is
    found.

    Raises:
        ConfigError: If the file cannot be parsed or is invalid.
    """
    config_path = find_project_config(start)
    if config_path is None:
        return InitConfig(project_root=Path(start).expanduser().resolve())

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping")

    root_dir = data.get("root_dir", DEFAULT_ROOT_DIR)
    if not isinstance(root_dir, str):
        raise ConfigError(f"root_dir in {config_path} must be a string")

    config = InitConfig(spectr_dir=root_dir.strip().rstrip("/"), project_root=config_path.parent)
    try:
        config.validate()
    except ConfigError as e:
        raise ConfigError(f"invalid configuration in {config_path}: {e}") from e
    return config


def ensure_config_exists():
    """Ensure the user configuration directory and file exist."""
    if not os.path.exists(CONFIG_DIR):
        os.makedirs(CONFIG_DIR)

    if not os.path.exists(CONFIG_FILE):
        with open(CONFIG_FILE, "w") as f:
            json.dump({"default_providers": []}, f)


def get_config() -> Dict[str, Any]:
    """Get the current user configuration.

    Returns:
        dict: Current configuration.
    """
    ensure_config_exists()
    with open(CONFIG_FILE, "r") as f:
        return json.load(f)


def update_config(updates: Dict[str, Any]):
    """Update the user configuration with new values.

    Args:
        updates (dict): Dictionary of configuration values to update.
    """
    config = get_config()
    config.update(updates)

    with open(CONFIG_FILE, "w") as f:
        json.dump(config, f, indent=2)


def get_default_providers() -> List[str]:
    """Providers configured when ``init`` is run without ``--provider``."""
    if not os.path.exists(CONFIG_FILE):
        return []
    return list(get_config().get("default_providers", []))


def set_default_providers(provider_ids: List[str]):
    update_config({"default_providers": list(provider_ids)})
