"""Version management for spectr-cli."""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import re

# Build-time version constant (injected during release builds)
__BUILD_VERSION__ = None


def get_version() -> str:
    """
    Get the current version.

    Tries the build-time constant, then installed package metadata, then
    pyproject.toml for source checkouts.

    Returns:
        str: Version string
    """
    if __BUILD_VERSION__:
        return __BUILD_VERSION__

    try:
        return version("spectr-cli")
    except PackageNotFoundError:
        pass

    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject_path.exists():
        content = pyproject_path.read_text(encoding="utf-8")
        # Look for version = "x.y.z" pattern (including PEP 440 prereleases)
        match = re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE)
        if match and re.match(r'^\d+\.\d+\.\d+(a\d+|b\d+|rc\d+)?$', match.group(1)):
            return match.group(1)

    return "unknown"


# For backward compatibility
__version__ = get_version()
