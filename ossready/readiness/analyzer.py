"""Main readiness analyzer orchestrator."""

import logging
from pathlib import Path

from ossready.readiness.categories import build_rule_tables, evaluate_category
from ossready.readiness.layouts import ProjectLayout, detect_layout
from ossready.readiness.models import AnalysisResult, CategoryResult, ProjectKind, Status
from ossready.readiness.probe import exists, first_present
from ossready.readiness.recommendations import extract_missing_items, generate_recommendations
from ossready.readiness.scoring import overall_score
from ossready.readiness.thresholds import DEFAULT_THRESHOLDS, ScoreThresholds
from ossready.utils.path_safety import resolve_project_root

logger = logging.getLogger(__name__)


class ProjectPathError(ValueError):
    """Raised when the project root cannot be analyzed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot analyze '{path}': {reason}")


class ReadinessAnalyzer:
    """Orchestrates one readiness pass over a project."""

    def __init__(
        self,
        layout: ProjectLayout | None = None,
        thresholds: ScoreThresholds = DEFAULT_THRESHOLDS,
    ) -> None:
        """Initialize the analyzer.

        Args:
            layout: Ecosystem layout to audit against; detected per project
                when omitted
            thresholds: Status tier cut-offs
        """
        self.layout = layout
        self.thresholds = thresholds

    def analyze(self, project_path: Path) -> AnalysisResult:
        """Analyze a project for open-source readiness.

        Args:
            project_path: Path to the project root

        Returns:
            AnalysisResult with categories, missing items and recommendations

        Raises:
            ProjectPathError: If the path does not exist or is not a directory
        """
        root = self._validate_root(project_path)
        layout = self.layout or detect_layout(root)
        logger.debug(f"Analyzing {root} with the {layout.name} layout")

        categories: list[CategoryResult] = [
            evaluate_category(category, rules, root, self.thresholds)
            for category, rules in build_rule_tables(layout).items()
        ]

        score = overall_score(categories)
        missing = extract_missing_items(categories)
        recommendations = generate_recommendations(score, categories, self.thresholds)

        return AnalysisResult(
            project_path=str(root),
            project_name=root.name,
            project_type=self.detect_project_kind(root, layout),
            overall_score=score,
            categories=tuple(categories),
            missing=missing,
            recommendations=recommendations,
            summary=self._summarize(root.name, score, len(missing), len(recommendations)),
        )

    @staticmethod
    def detect_project_kind(project_path: Path, layout: ProjectLayout) -> ProjectKind:
        """Guess the project kind from its entry point and manifest.

        Args:
            project_path: Path to the project root
            layout: Layout naming the entry point and manifest files

        Returns:
            The detected ProjectKind, used for display only
        """
        if first_present(project_path, layout.entry_files):
            if exists(project_path, layout.entry_dir).is_directory:
                return ProjectKind.CLI_TOOL
            return ProjectKind.APPLICATION

        if first_present(project_path, layout.manifest):
            return ProjectKind.LIBRARY

        return ProjectKind.UNKNOWN

    def _validate_root(self, project_path: Path) -> Path:
        root = resolve_project_root(project_path)
        if not root.exists():
            raise ProjectPathError(root, "path does not exist")
        if not root.is_dir():
            raise ProjectPathError(root, "path is not a directory")
        return root

    def _summarize(self, name: str, score: int, missing: int, recommendations: int) -> str:
        tier = {
            Status.GOOD: "Good",
            Status.WARNING: "Room for improvement",
            Status.ERROR: "Needs improvement",
        }[self.thresholds.classify(score)]
        return (
            f"Project '{name}' health: {tier} (Score: {score}/100)\n"
            f"Missing items: {missing}, Recommendations: {recommendations}"
        )
