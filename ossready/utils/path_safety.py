"""Path validation utilities to keep probes inside the project root."""

from pathlib import Path, PurePath


def validate_relative_path(relative_path: str | PurePath) -> PurePath:
    """Ensure a probe path stays within the project directory.

    Symlinks are not resolved, so a linked file inside the project still
    counts as present even when its target lives elsewhere.

    Args:
        relative_path: Path relative to the project root.

    Returns:
        The validated path.

    Raises:
        ValueError: If the path is absolute or climbs out with ``..``.
    """
    path = PurePath(relative_path)

    if path.is_absolute() or path.anchor:
        raise ValueError(f"Probe path '{relative_path}' must be relative to the project root.")
    if ".." in path.parts:
        raise ValueError(
            f"Probe path '{relative_path}' resolves to outside the project directory."
        )

    return path


def resolve_project_root(project_path: Path) -> Path:
    """Resolve a project path against the current working directory.

    Args:
        project_path: Absolute or relative project path.

    Returns:
        The absolute, resolved project root.
    """
    return project_path.expanduser().resolve()
