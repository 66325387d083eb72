"""Data models for the readiness audit."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Category(Enum):
    """The six audit dimensions, in evaluation order."""

    BASIC_STRUCTURE = "Basic Structure"
    DOCUMENTATION = "Documentation"
    GITHUB_INTEGRATION = "GitHub Integration"
    QUALITY_TOOLS = "Quality Tools"
    DEPENDENCIES = "Dependencies"
    LICENSING = "Licensing"

    @property
    def label(self) -> str:
        return self.value


class ProjectKind(Enum):
    """Display label for the kind of project being audited."""

    CLI_TOOL = "cli-tool"
    APPLICATION = "application"
    LIBRARY = "library"
    UNKNOWN = "unknown"


class ItemStatus(Enum):
    """Status of a single checklist item."""

    PRESENT = "present"
    MISSING = "missing"
    OUTDATED = "outdated"


class Status(Enum):
    """Status tier derived from a numeric score."""

    GOOD = "good"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> str:
        """Get the display color for this status."""
        colors = {
            Status.GOOD: "green",
            Status.WARNING: "yellow",
            Status.ERROR: "red",
        }
        return colors.get(self, "white")

    @property
    def emoji(self) -> str:
        """Get the emoji for this status."""
        emojis = {
            Status.GOOD: "✅",
            Status.WARNING: "⚠️",
            Status.ERROR: "❌",
        }
        return emojis.get(self, "❓")


class Priority(Enum):
    """Remediation priority."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def emoji(self) -> str:
        emojis = {
            Priority.HIGH: "🔴",
            Priority.MEDIUM: "🟡",
            Priority.LOW: "🟢",
        }
        return emojis.get(self, "⚪")


class ChecklistStatus(Enum):
    """Status of a pre-publication checklist entry."""

    DONE = "done"
    WARNING = "warning"
    PENDING = "pending"


@dataclass(frozen=True)
class Item:
    """One atomic present/missing entry within a category."""

    name: str
    status: ItemStatus
    required: bool
    description: str
    path: str | None = None

    @property
    def weight(self) -> int:
        """Scoring weight: required items count double."""
        return 2 if self.required else 1

    @property
    def is_present(self) -> bool:
        return self.status is ItemStatus.PRESENT

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data: dict[str, Any] = {
            "name": self.name,
            "status": self.status.value,
            "required": self.required,
            "description": self.description,
        }
        if self.path:
            data["path"] = self.path
        return data


@dataclass(frozen=True)
class CategoryResult:
    """Result of evaluating one category's rule table."""

    category: Category
    score: int  # 0-100
    status: Status
    description: str
    items: tuple[Item, ...] = ()

    @property
    def name(self) -> str:
        return self.category.label

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "score": self.score,
            "status": self.status.value,
            "description": self.description,
            "items": [item.to_dict() for item in self.items],
        }


@dataclass(frozen=True)
class MissingItem:
    """A missing item together with its remediation priority."""

    name: str
    category: Category
    priority: Priority
    description: str
    action: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "category": self.category.label,
            "priority": self.priority.value,
            "description": self.description,
            "action": self.action,
        }


@dataclass(frozen=True)
class Recommendation:
    """An actionable suggestion derived from the aggregate state."""

    title: str
    description: str
    priority: Priority
    command: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data: dict[str, Any] = {
            "title": self.title,
            "description": self.description,
        }
        if self.command:
            data["command"] = self.command
        data["priority"] = self.priority.value
        return data


@dataclass(frozen=True)
class ChecklistItem:
    """One entry of the pre-publication checklist."""

    title: str
    description: str
    status: ChecklistStatus

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Complete readiness analysis for a project."""

    project_path: str
    project_name: str
    project_type: ProjectKind
    overall_score: int  # 0-100
    categories: tuple[CategoryResult, ...] = ()
    missing: tuple[MissingItem, ...] = ()
    recommendations: tuple[Recommendation, ...] = ()
    summary: str = ""

    def category(self, category: Category) -> CategoryResult | None:
        """Look up the result for a category."""
        for result in self.categories:
            if result.category is category:
                return result
        return None

    def category_score(self, category: Category) -> int:
        """Score for a category, 0 if it was not evaluated."""
        result = self.category(category)
        return result.score if result else 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "project_path": self.project_path,
            "project_name": self.project_name,
            "project_type": self.project_type.value,
            "overall_score": self.overall_score,
            "categories": [c.to_dict() for c in self.categories],
            "missing": [m.to_dict() for m in self.missing],
            "recommendations": [r.to_dict() for r in self.recommendations],
            "summary": self.summary,
        }
