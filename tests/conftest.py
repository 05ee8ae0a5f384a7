"""Shared test fixtures for spectr-cli tests."""
import pytest

from spectr_cli.config import InitConfig
from spectr_cli.core.executor import InitExecutor
from spectr_cli.core.filesystem import Filesystem, Scope
from spectr_cli.templates import TemplateManager


@pytest.fixture
def project_dir(tmp_path):
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def home_dir(tmp_path):
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def project_fs(project_dir):
    return Filesystem(project_dir, Scope.PROJECT)


@pytest.fixture
def home_fs(home_dir):
    return Filesystem(home_dir, Scope.HOME)


@pytest.fixture
def config(project_dir):
    return InitConfig(project_root=project_dir)


@pytest.fixture
def templates():
    return TemplateManager()


@pytest.fixture
def executor(project_dir, home_dir):
    """Executor writing into temporary project and home directories."""
    return InitExecutor(project_dir, home_root=home_dir)


@pytest.fixture
def user_config(tmp_path, monkeypatch):
    """Point the ~/.spectr user config at a temporary directory."""
    config_dir = tmp_path / "user-config"
    config_file = config_dir / "config.json"
    monkeypatch.setattr("spectr_cli.config.CONFIG_DIR", str(config_dir))
    monkeypatch.setattr("spectr_cli.config.CONFIG_FILE", str(config_file))
    return config_file
