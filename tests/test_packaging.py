"""
Tests for project metadata.
"""
import re
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def test_version_file_is_dotted_release():
    assert re.fullmatch(r"\d+(\.\d+)+", (ROOT / "VERSION").read_text().strip())


def test_package_version_comes_from_version_file():
    pyproject = (ROOT / "pyproject.toml").read_text()
    assert 'dynamic = ["version"]' in pyproject
    assert 'version = {file = "VERSION"}' in pyproject
