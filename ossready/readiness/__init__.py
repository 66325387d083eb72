"""Open-source readiness scoring module.

This module audits a repository against a fixed checklist across six
categories (structure, documentation, GitHub integration, quality tools,
dependencies and licensing) and reports a 0-100 readiness score.

Example:
    >>> from ossready.readiness import ReadinessAnalyzer
    >>> analyzer = ReadinessAnalyzer()
    >>> result = analyzer.analyze(Path("."))
    >>> print(result.summary)
    Project 'demo' health: Good (Score: 92/100)
    Missing items: 2, Recommendations: 0
"""

from ossready.readiness.analyzer import ProjectPathError, ReadinessAnalyzer
from ossready.readiness.checklist import generate_checklist
from ossready.readiness.layouts import GO_LAYOUT, PYTHON_LAYOUT, ProjectLayout, get_layout
from ossready.readiness.models import (
    AnalysisResult,
    Category,
    CategoryResult,
    ChecklistItem,
    ChecklistStatus,
    Item,
    ItemStatus,
    MissingItem,
    Priority,
    ProjectKind,
    Recommendation,
    Status,
)
from ossready.readiness.release import ReleaseGate, ReleaseVerdict
from ossready.readiness.report import generate_json_report, save_json_report
from ossready.readiness.thresholds import DEFAULT_THRESHOLDS, ScoreThresholds

__all__ = [
    # Main analyzer
    "ReadinessAnalyzer",
    "ProjectPathError",
    # Release gate
    "ReleaseGate",
    "ReleaseVerdict",
    "generate_checklist",
    # Layouts and thresholds
    "GO_LAYOUT",
    "PYTHON_LAYOUT",
    "ProjectLayout",
    "get_layout",
    "DEFAULT_THRESHOLDS",
    "ScoreThresholds",
    # Models
    "AnalysisResult",
    "Category",
    "CategoryResult",
    "ChecklistItem",
    "ChecklistStatus",
    "Item",
    "ItemStatus",
    "MissingItem",
    "Priority",
    "ProjectKind",
    "Recommendation",
    "Status",
    # Report functions
    "generate_json_report",
    "save_json_report",
]
