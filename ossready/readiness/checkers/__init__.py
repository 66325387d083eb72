"""Base class and utilities for checklist item checkers."""

from abc import ABC, abstractmethod
from pathlib import Path

from ossready.readiness.models import Item, ItemStatus


class BaseChecker(ABC):
    """Abstract base class for checkers.

    A checker inspects the project tree and produces exactly one ``Item``.
    The description and required flag come from the rule table row that
    invokes it.
    """

    # True for placeholders that report a pass without inspecting anything
    assumed = False

    @abstractmethod
    def check(self, project_path: Path, description: str, required: bool) -> Item:
        """Inspect the project and report one item.

        Args:
            project_path: Path to the project root
            description: Human-readable description from the rule table
            required: Whether the rule table marks this item as required

        Returns:
            Item with present, missing or outdated status
        """
        ...

    def _create_item(
        self,
        name: str,
        present: bool | ItemStatus,
        description: str,
        required: bool,
        path: str | None = None,
    ) -> Item:
        """Helper to create an Item.

        Args:
            name: Item name shown to the user
            present: Presence flag, or an explicit status
            description: Human-readable description
            required: Whether the item is required
            path: Optional path relative to the project root

        Returns:
            Item instance
        """
        if isinstance(present, ItemStatus):
            status = present
        else:
            status = ItemStatus.PRESENT if present else ItemStatus.MISSING
        return Item(
            name=name,
            status=status,
            required=required,
            description=description,
            path=path,
        )
