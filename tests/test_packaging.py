from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

ROOT = Path(__file__).resolve().parent.parent


def test_pyproject_installs_only_the_packages():
    data = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))
    assert data["project"]["readme"] == "README.md"
    assert (ROOT / "README.md").is_file()
    assert "py-modules" not in data["tool"]["setuptools"]
    assert data["tool"]["setuptools"]["packages"] == ["core", "ui"]
