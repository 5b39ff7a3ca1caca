"""
Version information for the Guilds SDK.

Installed packages report the distribution metadata. A source checkout
without metadata reads ``pyproject.toml`` next to the package.
"""
import importlib.metadata
import pathlib
from typing import Optional

import tomli

DISTRIBUTION_NAME = "guilds-sdk"
DEFAULT_VERSION = "0.1.0"


def _version_from_pyproject(path: pathlib.Path) -> Optional[str]:
    """Read ``[project].version``; ``None`` if the file is missing or unusable."""
    try:
        with path.open("rb") as f:
            return tomli.load(f)["project"]["version"]
    except (FileNotFoundError, KeyError, tomli.TOMLDecodeError):
        return None


def resolve_version() -> str:
    try:
        return importlib.metadata.version(DISTRIBUTION_NAME)
    except importlib.metadata.PackageNotFoundError:
        pyproject = pathlib.Path(__file__).parent.parent / "pyproject.toml"
        return _version_from_pyproject(pyproject) or DEFAULT_VERSION


__version__ = resolve_version()
