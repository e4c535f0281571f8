from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import tomllib

DISTRIBUTION_NAME = "rating-refresh-tasks"


def _read_pyproject_version(pyproject_path: Path) -> str:
    try:
        with open(pyproject_path, "rb") as f:
            return str(tomllib.load(f)["project"]["version"])
    except (OSError, KeyError, tomllib.TOMLDecodeError) as e:
        raise ValueError(f"Failed to read version from {pyproject_path}") from e


def _get_version() -> str:
    """Version of the source checkout when running from one, else of the installed distribution."""
    pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
    if pyproject_path.exists():
        return _read_pyproject_version(pyproject_path)
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError as e:
        raise ValueError(f"{DISTRIBUTION_NAME} is neither installed nor run from a source checkout") from e


SDK_VERSION = _get_version()
