"""Version lookup for prattcalc."""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Installed distribution version, else the checkout's pyproject.toml, else 0.0.0."""
    try:
        return version("prattcalc")
    except PackageNotFoundError:
        pass
    if _PYPROJECT.is_file():
        with open(_PYPROJECT, "rb") as f:
            project = tomllib.load(f).get("project", {})
        if isinstance(project.get("version"), str):
            return project["version"]
    return "0.0.0"
