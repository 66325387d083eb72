"""Release gate: decides whether an analyzed project may be published."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ossready.readiness.checklist import generate_checklist
from ossready.readiness.checkers.tree import iter_files, matches_any
from ossready.readiness.layouts import DEFAULT_EXCLUDED_DIRS
from ossready.readiness.models import AnalysisResult, Category, ChecklistItem
from ossready.readiness.thresholds import DEFAULT_THRESHOLDS, ScoreThresholds

logger = logging.getLogger(__name__)

SENSITIVE_PATTERNS: tuple[str, ...] = (
    ".env",
    "*.key",
    "*.pem",
    "credentials.json",
    "secrets.yaml",
)


@dataclass(frozen=True)
class ReleaseVerdict:
    """Outcome of the release gate."""

    passed: bool
    overall_score: int
    minimum_score: int
    checklist: tuple[ChecklistItem, ...] = ()
    sensitive_files: tuple[str, ...] = ()
    blockers: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "passed": self.passed,
            "overall_score": self.overall_score,
            "minimum_score": self.minimum_score,
            "checklist": [c.to_dict() for c in self.checklist],
            "sensitive_files": list(self.sensitive_files),
            "blockers": list(self.blockers),
        }


class ReleaseGate:
    """Enforces the minimum readiness score before a release.

    The checklist is attached for display only and never changes the
    verdict.
    """

    def __init__(
        self,
        thresholds: ScoreThresholds = DEFAULT_THRESHOLDS,
        excluded_dirs: tuple[str, ...] = DEFAULT_EXCLUDED_DIRS,
    ) -> None:
        self.thresholds = thresholds
        self.excluded_dirs = excluded_dirs

    def evaluate(self, result: AnalysisResult) -> ReleaseVerdict:
        """Check an analysis against the release requirements.

        Args:
            result: Completed analysis

        Returns:
            ReleaseVerdict listing every blocker found
        """
        minimum = self.thresholds.release_minimum
        blockers: list[str] = []

        if result.overall_score < minimum:
            blockers.append(
                f"Readiness score {result.overall_score}/100 is below the minimum of {minimum}"
            )

        if not self._license_present(result):
            blockers.append("License file not found")

        sensitive = self.find_sensitive_files(Path(result.project_path))
        if sensitive:
            blockers.append(f"{len(sensitive)} sensitive file(s) found: {', '.join(sensitive)}")

        return ReleaseVerdict(
            passed=not blockers,
            overall_score=result.overall_score,
            minimum_score=minimum,
            checklist=generate_checklist(result),
            sensitive_files=sensitive,
            blockers=tuple(blockers),
        )

    def find_sensitive_files(self, project_path: Path) -> tuple[str, ...]:
        """List files that look like committed secrets.

        Args:
            project_path: Path to the project root

        Returns:
            POSIX-style paths relative to the root, in walk order
        """
        found = tuple(
            path.as_posix()
            for path in iter_files(project_path, self.excluded_dirs)
            if matches_any(path.name, SENSITIVE_PATTERNS)
        )
        if found:
            logger.debug(f"Sensitive files under {project_path}: {found}")
        return found

    @staticmethod
    def _license_present(result: AnalysisResult) -> bool:
        licensing = result.category(Category.LICENSING)
        if licensing is None:
            return False
        return all(item.is_present for item in licensing.items if item.required)
