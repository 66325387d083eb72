"""Category and overall score computation."""

from collections.abc import Iterable, Sequence

from ossready.readiness.models import CategoryResult, Item


def category_score(items: Iterable[Item]) -> int:
    """Weighted share of present items, as an integer percentage.

    Required items weigh 2 and optional items 1. A category with no items
    scores 0.

    Args:
        items: Items produced by a category's checkers

    Returns:
        ``floor(100 * present weight / total weight)``
    """
    total = 0
    present = 0
    for item in items:
        total += item.weight
        if item.is_present:
            present += item.weight

    if total == 0:
        return 0
    return (present * 100) // total


def overall_score(categories: Sequence[CategoryResult]) -> int:
    """Unweighted floor mean of the category scores (0 when there are none)."""
    if not categories:
        return 0
    return sum(c.score for c in categories) // len(categories)
