"""Pre-publication checklist derived from category and overall scores."""

from dataclasses import dataclass

from ossready.readiness import thresholds as limits
from ossready.readiness.models import (
    AnalysisResult,
    Category,
    ChecklistItem,
    ChecklistStatus,
)
from ossready.readiness.thresholds import ChecklistThreshold


@dataclass(frozen=True)
class ChecklistEntry:
    """Definition of one checklist row.

    ``source`` names the category whose score drives the row; ``None`` with a
    threshold means the overall score. Rows without a threshold always report
    ``fixed_status``.
    """

    title: str
    description: str
    source: Category | None = None
    threshold: ChecklistThreshold | None = None
    fixed_status: ChecklistStatus = ChecklistStatus.DONE


CHECKLIST: tuple[ChecklistEntry, ...] = (
    ChecklistEntry(
        title="Documentation is complete",
        description="README, contribution guide, docs and examples are in place",
        source=Category.DOCUMENTATION,
        threshold=limits.DOCUMENTATION_CHECK,
    ),
    ChecklistEntry(
        title="Tests are in place",
        description="The project ships automated tests and quality tooling",
        source=Category.QUALITY_TOOLS,
        threshold=limits.TESTS_CHECK,
    ),
    ChecklistEntry(
        title="CI/CD is configured",
        description="Workflows build, test and release the project",
        source=Category.GITHUB_INTEGRATION,
        threshold=limits.CI_CHECK,
    ),
    ChecklistEntry(
        title="License is configured",
        description="A license file is present and declared",
        source=Category.LICENSING,
        threshold=limits.LICENSE_CHECK,
    ),
    # TODO: derive from the SECURITY.md item instead of always reporting done
    ChecklistEntry(
        title="Security policy is defined",
        description="Vulnerability reports have a documented channel",
    ),
    ChecklistEntry(
        title="Community guidelines are set up",
        description="Issue and pull request templates guide contributors",
        source=Category.GITHUB_INTEGRATION,
        threshold=limits.COMMUNITY_CHECK,
    ),
    ChecklistEntry(
        title="No sensitive data is committed",
        description="No credentials, keys or environment files are tracked",
    ),
    ChecklistEntry(
        title="Dependencies are tidy",
        description="The dependency manifest and lock file agree",
        source=Category.DEPENDENCIES,
        threshold=limits.DEPENDENCY_CHECK,
    ),
    ChecklistEntry(
        title="Ready to tag a version",
        description="Create the first release tag once everything above is done",
        fixed_status=ChecklistStatus.PENDING,
    ),
    ChecklistEntry(
        title="Overall code quality",
        description="The overall readiness score is high enough to publish",
        threshold=limits.CODE_QUALITY_CHECK,
    ),
)


def checklist_status(score: int, threshold: ChecklistThreshold) -> ChecklistStatus:
    """Map a score onto done / warning / pending."""
    if score >= threshold.done:
        return ChecklistStatus.DONE
    elif score >= threshold.warning:
        return ChecklistStatus.WARNING
    else:
        return ChecklistStatus.PENDING


def generate_checklist(
    result: AnalysisResult,
    entries: tuple[ChecklistEntry, ...] = CHECKLIST,
) -> tuple[ChecklistItem, ...]:
    """Build the pre-publication checklist for an analysis.

    Args:
        result: Completed analysis
        entries: Checklist definition, ten rows by default

    Returns:
        One ChecklistItem per entry, in definition order
    """
    items: list[ChecklistItem] = []
    for entry in entries:
        if entry.threshold is None:
            status = entry.fixed_status
        elif entry.source is None:
            status = checklist_status(result.overall_score, entry.threshold)
        else:
            status = checklist_status(result.category_score(entry.source), entry.threshold)

        items.append(
            ChecklistItem(title=entry.title, description=entry.description, status=status)
        )
    return tuple(items)
