"""Checkers that walk the whole project tree."""

import logging
import os
from collections.abc import Iterator
from fnmatch import fnmatch
from pathlib import Path

from ossready.readiness.checkers import BaseChecker
from ossready.readiness.models import Item

logger = logging.getLogger(__name__)


def iter_files(project_path: Path, excluded_dirs: tuple[str, ...] = ()) -> Iterator[Path]:
    """Yield every file under ``project_path``, skipping excluded directories.

    Unreadable directories are logged and skipped.

    Args:
        project_path: Root of the walk
        excluded_dirs: Directory names never descended into

    Yields:
        File paths relative to ``project_path``, in a stable order
    """
    excluded = set(excluded_dirs)

    def _on_error(error: OSError) -> None:
        logger.warning(f"Skipping unreadable directory {error.filename}: {error.strerror}")

    for dirpath, dirnames, filenames in os.walk(project_path, onerror=_on_error):
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)
        rel_dir = Path(dirpath).relative_to(project_path)
        for filename in sorted(filenames):
            yield rel_dir / filename


def matches_any(filename: str, patterns: tuple[str, ...]) -> bool:
    """Check a bare file name against glob patterns."""
    return any(fnmatch(filename, pattern) for pattern in patterns)


class TestFileChecker(BaseChecker):
    """Counts files following the test naming convention.

    Present iff at least one test file exists anywhere under the root.
    """

    __test__ = False  # not a pytest test class

    def __init__(self, patterns: tuple[str, ...], excluded_dirs: tuple[str, ...] = ()) -> None:
        self.patterns = patterns
        self.excluded_dirs = excluded_dirs

    def count(self, project_path: Path) -> int:
        return sum(
            1
            for path in iter_files(project_path, self.excluded_dirs)
            if matches_any(path.name, self.patterns)
        )

    def check(self, project_path: Path, description: str, required: bool) -> Item:
        test_files = self.count(project_path)
        return self._create_item(
            name=f"{' / '.join(self.patterns)} ({test_files} files)",
            present=test_files > 0,
            description=description,
            required=required,
        )
