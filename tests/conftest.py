"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

# Every file and directory the Python layout checks for
FULL_PROJECT_FILES = [
    "pyproject.toml",
    "uv.lock",
    "README.md",
    ".gitignore",
    "LICENSE",
    "CONTRIBUTING.md",
    "SECURITY.md",
    "ruff.toml",
    "release-please-config.json",
    "renovate.json",
    ".github/workflows/ci.yml",
    ".github/workflows/release.yml",
    ".github/ISSUE_TEMPLATE/bug_report.md",
    ".github/ISSUE_TEMPLATE/feature_request.md",
    ".github/PULL_REQUEST_TEMPLATE.md",
    "src/demo/__init__.py",
    "tests/test_demo.py",
    "scripts/release.sh",
    "docs/index.md",
    "examples/basic.py",
]

# Manifest, lock file, readme, ignore-file, license and one test file
MINIMAL_PROJECT_FILES = [
    "pyproject.toml",
    "uv.lock",
    "README.md",
    ".gitignore",
    "LICENSE",
    "test_demo.py",
]


def write_files(root: Path, files: list[str]) -> Path:
    """Create each relative path under ``root`` with placeholder content."""
    for relative in files:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"# {relative}\n")
    return root


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory creating a project directory with the given files."""

    def _make(files: list[str], name: str = "demo_project") -> Path:
        project_dir = tmp_path / name
        project_dir.mkdir()
        return write_files(project_dir, files)

    return _make


@pytest.fixture
def empty_project(make_project: Callable[..., Path]) -> Path:
    """A project directory with no files at all."""
    return make_project([], name="empty_project")


@pytest.fixture
def minimal_project(make_project: Callable[..., Path]) -> Path:
    """A project with only the essential files and one test."""
    return make_project(MINIMAL_PROJECT_FILES, name="minimal_project")


@pytest.fixture
def full_project(make_project: Callable[..., Path]) -> Path:
    """A project with every checked file and directory present."""
    return make_project(FULL_PROJECT_FILES, name="full_project")
