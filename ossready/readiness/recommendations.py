"""Missing-item extraction and recommendation generation."""

from collections.abc import Sequence

from ossready.readiness.models import (
    Category,
    CategoryResult,
    ItemStatus,
    MissingItem,
    Priority,
    Recommendation,
    Status,
)
from ossready.readiness.thresholds import DEFAULT_THRESHOLDS, ScoreThresholds

# Missing files are produced by the project template, not by this tool
SCAFFOLD_COMMAND = "copier update"
SCAFFOLD_ACTION = f"Generate it from your project template (run '{SCAFFOLD_COMMAND}')"

CATEGORY_REMEDIES: dict[Category, Recommendation] = {
    Category.BASIC_STRUCTURE: Recommendation(
        title="Complete the basic project structure",
        description="Add the dependency manifest, README and .gitignore the project is missing",
        priority=Priority.MEDIUM,
        command=SCAFFOLD_COMMAND,
    ),
    Category.DOCUMENTATION: Recommendation(
        title="Improve documentation",
        description="Add a contribution guide, a docs/ directory and runnable examples",
        priority=Priority.MEDIUM,
    ),
    Category.GITHUB_INTEGRATION: Recommendation(
        title="Improve GitHub integration",
        description="Add CI/CD workflows and issue/PR templates to strengthen GitHub integration",
        priority=Priority.MEDIUM,
        command=SCAFFOLD_COMMAND,
    ),
    Category.QUALITY_TOOLS: Recommendation(
        title="Introduce quality tools",
        description="Add a linter configuration and tests to improve code quality",
        priority=Priority.MEDIUM,
    ),
    Category.DEPENDENCIES: Recommendation(
        title="Pin dependencies",
        description="Commit a lock file next to the dependency manifest",
        priority=Priority.MEDIUM,
    ),
    Category.LICENSING: Recommendation(
        title="Add a license",
        description="Choose an open-source license and commit it as LICENSE",
        priority=Priority.MEDIUM,
        command=SCAFFOLD_COMMAND,
    ),
}


def extract_missing_items(categories: Sequence[CategoryResult]) -> tuple[MissingItem, ...]:
    """Collect every missing item across all categories.

    Required items are HIGH priority, optional ones LOW. Items that are
    present or outdated never produce an entry.

    Args:
        categories: Evaluated categories in evaluation order

    Returns:
        Missing items in category then table order
    """
    missing: list[MissingItem] = []
    for category in categories:
        for item in category.items:
            if item.status is not ItemStatus.MISSING:
                continue
            missing.append(
                MissingItem(
                    name=item.name,
                    category=category.category,
                    priority=Priority.HIGH if item.required else Priority.LOW,
                    description=item.description,
                    action=SCAFFOLD_ACTION,
                )
            )
    return tuple(missing)


def generate_recommendations(
    overall_score: int,
    categories: Sequence[CategoryResult],
    thresholds: ScoreThresholds = DEFAULT_THRESHOLDS,
) -> tuple[Recommendation, ...]:
    """Suggest remediation from the aggregate state.

    The rules are independent: a low overall score adds one HIGH
    recommendation, and every category in the ERROR tier adds its own
    MEDIUM remedy.

    Args:
        overall_score: Overall readiness score
        categories: Evaluated categories
        thresholds: Status tier cut-offs

    Returns:
        Recommendations, overall first, then in category order
    """
    recommendations: list[Recommendation] = []

    if thresholds.classify(overall_score) is Status.ERROR:
        recommendations.append(
            Recommendation(
                title="Add the baseline open-source files",
                description="Files expected of every open-source project are missing",
                priority=Priority.HIGH,
                command=SCAFFOLD_COMMAND,
            )
        )

    for category in categories:
        if category.status is Status.ERROR:
            recommendations.append(CATEGORY_REMEDIES[category.category])

    return tuple(recommendations)
