"""Checkers built directly on the presence probe."""

from pathlib import Path

from ossready.readiness.checkers import BaseChecker
from ossready.readiness.models import Item, ItemStatus
from ossready.readiness.probe import exists, first_present


class FileChecker(BaseChecker):
    """Present when any of the candidate paths exists.

    The item is named after the candidate that was found, or the first
    candidate when none exist.
    """

    def __init__(self, *candidates: str) -> None:
        if not candidates:
            raise ValueError("FileChecker needs at least one candidate path")
        self.candidates = candidates

    def check(self, project_path: Path, description: str, required: bool) -> Item:
        found = first_present(project_path, self.candidates)
        name = found or self.candidates[0]
        return self._create_item(
            name=name,
            present=found is not None,
            description=description,
            required=required,
            path=name,
        )


class DirectoryChecker(BaseChecker):
    """Present when the path exists and is a directory."""

    def __init__(self, name: str) -> None:
        self.name = name.rstrip("/")

    def check(self, project_path: Path, description: str, required: bool) -> Item:
        presence = exists(project_path, self.name)
        return self._create_item(
            name=f"{self.name}/",
            present=presence.present and presence.is_directory,
            description=description,
            required=required,
            path=self.name,
        )


class ManifestLockChecker(BaseChecker):
    """Checks that the dependency manifest comes with a lock file.

    Both present is ``present``; a manifest without a lock file is
    ``outdated``; no manifest at all is ``missing``.
    """

    def __init__(self, manifest: tuple[str, ...], lock_files: tuple[str, ...]) -> None:
        self.manifest = manifest
        self.lock_files = lock_files

    def check(self, project_path: Path, description: str, required: bool) -> Item:
        manifest = first_present(project_path, self.manifest)
        lock_file = first_present(project_path, self.lock_files) if manifest else None

        if manifest and lock_file:
            status = ItemStatus.PRESENT
        elif manifest:
            status = ItemStatus.OUTDATED
        else:
            status = ItemStatus.MISSING

        return self._create_item(
            name=f"{manifest or self.manifest[0]} / {lock_file or self.lock_files[0]} consistency",
            present=status,
            description=description,
            required=required,
        )


class AssumedPassChecker(BaseChecker):
    """Stand-in for a check that is not implemented yet.

    Always reports ``present`` and says so in the item description, so a
    real implementation can replace it without touching the rule tables.
    """

    assumed = True

    def __init__(self, name: str, hint: str) -> None:
        self.name = name
        self.hint = hint

    def check(self, project_path: Path, description: str, required: bool) -> Item:
        return self._create_item(
            name=self.name,
            present=True,
            description=f"{description} (assumed pass; {self.hint})",
            required=required,
        )
