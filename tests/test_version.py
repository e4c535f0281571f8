import tomllib
from pathlib import Path

import pytest

from rating_refresh._version import SDK_VERSION, _read_pyproject_version

PYPROJECT = Path(__file__).parent.parent / "pyproject.toml"


def test_version_matches_pyproject():
    with open(PYPROJECT, "rb") as f:
        assert SDK_VERSION == tomllib.load(f)["project"]["version"]


def test_unreadable_pyproject(tmp_path):
    broken = tmp_path / "pyproject.toml"
    broken.write_text("[tool.other]\nname = 'x'\n")

    with pytest.raises(ValueError, match="Failed to read version"):
        _read_pyproject_version(broken)
    with pytest.raises(ValueError):
        _read_pyproject_version(tmp_path / "missing.toml")
