"""Package version, read from pyproject.toml."""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DISTRIBUTION_NAME = "webapi-helper"

# Source checkout root (holds pyproject.toml)
PROJECT_ROOT = Path(__file__).parent.parent


def get_version() -> str:
    """
    Get the version from pyproject.toml, or from the installed distribution
    metadata when running outside a source checkout.

    Returns:
        Version string (e.g., "1.0.0")
    """
    pyproject_path = PROJECT_ROOT / "pyproject.toml"
    if not pyproject_path.exists():
        try:
            return version(DISTRIBUTION_NAME)
        except PackageNotFoundError:
            return "0.0.0"

    with open(pyproject_path, "rb") as f:
        pyproject_data = tomllib.load(f)

    return pyproject_data["project"]["version"]


__version__ = get_version()
