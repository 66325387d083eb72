"""Ecosystem profiles naming the concrete files each rule probes for.

The rule tables in :mod:`ossready.readiness.categories` are written against a
``ProjectLayout`` rather than literal file names, so the same checklist audits
a Go module or a Python package.
"""

from dataclasses import dataclass, replace
from pathlib import Path

from ossready.readiness.probe import exists

# Directories never descended into when walking the tree
DEFAULT_EXCLUDED_DIRS: tuple[str, ...] = (
    ".git",
    ".hg",
    ".svn",
    ".venv",
    "venv",
    "node_modules",
    "vendor",
    "__pycache__",
    ".tox",
    ".nox",
    ".eggs",
    ".mypy_cache",
    ".pytest_cache",
    ".ruff_cache",
    "build",
    "dist",
)


@dataclass(frozen=True)
class ProjectLayout:
    """File and directory names used by one ecosystem."""

    name: str
    manifest: tuple[str, ...]
    lock_files: tuple[str, ...]
    entry_files: tuple[str, ...]
    entry_dir: str
    internal_dir: str
    public_dir: str
    test_patterns: tuple[str, ...]
    lint_configs: tuple[str, ...]
    release_configs: tuple[str, ...]
    dependency_update_configs: tuple[str, ...]
    vulnerability_hint: str
    internal_dir_description: str = "Internal package directory"
    public_dir_description: str = "Public package directory"
    readme: tuple[str, ...] = ("README.md", "README.rst", "README")
    license: tuple[str, ...] = ("LICENSE", "LICENSE.md", "LICENSE.txt")
    excluded_dirs: tuple[str, ...] = DEFAULT_EXCLUDED_DIRS

    def with_excluded_dirs(self, extra: tuple[str, ...]) -> "ProjectLayout":
        """Return a copy that also prunes ``extra`` directories."""
        merged = self.excluded_dirs + tuple(d for d in extra if d not in self.excluded_dirs)
        return replace(self, excluded_dirs=merged)


GO_LAYOUT = ProjectLayout(
    name="go",
    manifest=("go.mod",),
    lock_files=("go.sum",),
    entry_files=("main.go",),
    entry_dir="cmd",
    internal_dir="internal",
    public_dir="pkg",
    test_patterns=("*_test.go",),
    lint_configs=(".golangci.yml", ".golangci.yaml"),
    release_configs=(".goreleaser.yml", ".goreleaser.yaml"),
    dependency_update_configs=("renovate.json", ".github/dependabot.yml"),
    vulnerability_hint="verify with govulncheck ./...",
    readme=("README.md",),
    license=("LICENSE",),
)

PYTHON_LAYOUT = ProjectLayout(
    name="python",
    manifest=("pyproject.toml", "setup.py", "setup.cfg"),
    lock_files=("uv.lock", "poetry.lock", "pdm.lock", "requirements.txt"),
    entry_files=("__main__.py", "main.py", "app.py"),
    entry_dir="scripts",
    internal_dir="src",
    public_dir="tests",
    test_patterns=("test_*.py", "*_test.py"),
    lint_configs=("ruff.toml", ".ruff.toml", ".flake8", ".pre-commit-config.yaml"),
    release_configs=(
        "release-please-config.json",
        ".bumpversion.cfg",
        ".bumpversion.toml",
        ".cz.toml",
    ),
    dependency_update_configs=("renovate.json", ".github/dependabot.yml"),
    vulnerability_hint="verify with pip-audit",
    internal_dir_description="Source package directory",
    public_dir_description="Test suite directory",
)

LAYOUTS: dict[str, ProjectLayout] = {
    GO_LAYOUT.name: GO_LAYOUT,
    PYTHON_LAYOUT.name: PYTHON_LAYOUT,
}


def get_layout(name: str) -> ProjectLayout:
    """Look up a layout by name.

    Raises:
        ValueError: If no layout has that name
    """
    try:
        return LAYOUTS[name]
    except KeyError:
        raise ValueError(
            f"Unknown layout '{name}'. Expected one of: {', '.join(sorted(LAYOUTS))}"
        ) from None


def detect_layout(project_path: Path) -> ProjectLayout:
    """Pick the layout for a project: Go when go.mod exists, Python otherwise."""
    if exists(project_path, "go.mod").present:
        return GO_LAYOUT
    return PYTHON_LAYOUT
