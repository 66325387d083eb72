"""Presence probe: does a path exist under the project root."""

import logging
from dataclasses import dataclass
from pathlib import Path, PurePath

from ossready.utils.path_safety import validate_relative_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Presence:
    """Outcome of a single presence probe."""

    present: bool
    is_directory: bool = False


ABSENT = Presence(present=False)


def exists(project_path: Path, relative_path: str | PurePath) -> Presence:
    """Report whether ``relative_path`` exists under ``project_path``.

    A missing path is a normal outcome. Permission and other I/O failures are
    logged and reported as absent so one unreadable entry never aborts the
    audit.

    Args:
        project_path: Project root
        relative_path: Path relative to the root

    Returns:
        Presence with the directory flag set for directories
    """
    target = project_path / validate_relative_path(relative_path)
    try:
        # stat() follows symlinks; a dangling link counts as absent
        is_directory = target.is_dir()
        present = is_directory or target.exists()
    except OSError as e:
        logger.debug(f"Treating {target} as absent: {e}")
        return ABSENT

    return Presence(present=present, is_directory=is_directory)


def first_present(project_path: Path, candidates: tuple[str, ...]) -> str | None:
    """Return the first candidate that exists, if any."""
    for candidate in candidates:
        if exists(project_path, candidate).present:
            return candidate
    return None
