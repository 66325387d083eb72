"""Declarative rule tables for the six readiness categories.

Each category is a fixed, ordered table of ``CheckRule`` rows. The generic
``evaluate_category`` runs a table and folds the items into a score and
status tier.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from ossready.readiness.checkers import BaseChecker
from ossready.readiness.checkers.files import (
    AssumedPassChecker,
    DirectoryChecker,
    FileChecker,
    ManifestLockChecker,
)
from ossready.readiness.checkers.tree import TestFileChecker
from ossready.readiness.layouts import ProjectLayout
from ossready.readiness.models import Category, CategoryResult
from ossready.readiness.scoring import category_score
from ossready.readiness.thresholds import DEFAULT_THRESHOLDS, ScoreThresholds

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckRule:
    """One row of a category table."""

    checker: BaseChecker
    description: str
    required: bool = False


CATEGORY_DESCRIPTIONS: dict[Category, str] = {
    Category.BASIC_STRUCTURE: "Basic directory structure and files for the project",
    Category.DOCUMENTATION: "Project documentation completeness",
    Category.GITHUB_INTEGRATION: "Integration status with GitHub-specific features",
    Category.QUALITY_TOOLS: "Tools supporting code quality and maintainability",
    Category.DEPENDENCIES: "Project dependency management status",
    Category.LICENSING: "Project license information",
}


def basic_structure_rules(layout: ProjectLayout) -> tuple[CheckRule, ...]:
    return (
        CheckRule(FileChecker(*layout.manifest), "Dependency manifest", required=True),
        CheckRule(FileChecker(*layout.lock_files), "Dependency lock file"),
        CheckRule(FileChecker(*layout.readme), "Project description", required=True),
        CheckRule(FileChecker(".gitignore"), "Git ignore rules", required=True),
        CheckRule(DirectoryChecker(layout.internal_dir), layout.internal_dir_description),
        CheckRule(DirectoryChecker(layout.public_dir), layout.public_dir_description),
        CheckRule(DirectoryChecker(layout.entry_dir), "Entry point directory"),
    )


def documentation_rules(layout: ProjectLayout) -> tuple[CheckRule, ...]:
    return (
        CheckRule(FileChecker(*layout.readme), "Project description", required=True),
        CheckRule(FileChecker("CONTRIBUTING.md"), "Contribution guide"),
        CheckRule(DirectoryChecker("docs"), "Documentation directory"),
        CheckRule(DirectoryChecker("examples"), "Usage examples"),
    )


def github_integration_rules(layout: ProjectLayout) -> tuple[CheckRule, ...]:
    return (
        CheckRule(
            FileChecker(".github/workflows/ci.yml", ".github/workflows/ci.yaml"),
            "CI/CD workflow",
        ),
        CheckRule(
            FileChecker(".github/workflows/release.yml", ".github/workflows/release.yaml"),
            "Release automation workflow",
        ),
        CheckRule(FileChecker(".github/ISSUE_TEMPLATE/bug_report.md"), "Bug report template"),
        CheckRule(
            FileChecker(".github/ISSUE_TEMPLATE/feature_request.md"), "Feature request template"
        ),
        CheckRule(FileChecker(".github/PULL_REQUEST_TEMPLATE.md"), "Pull request template"),
        CheckRule(FileChecker("SECURITY.md", ".github/SECURITY.md"), "Security policy"),
    )


def quality_tools_rules(layout: ProjectLayout) -> tuple[CheckRule, ...]:
    return (
        CheckRule(FileChecker(*layout.lint_configs), "Linter configuration"),
        CheckRule(FileChecker(*layout.release_configs), "Release automation configuration"),
        CheckRule(
            TestFileChecker(layout.test_patterns, layout.excluded_dirs),
            "Test files",
            required=True,
        ),
        CheckRule(FileChecker(*layout.dependency_update_configs), "Automated dependency updates"),
    )


def dependencies_rules(layout: ProjectLayout) -> tuple[CheckRule, ...]:
    return (
        CheckRule(
            ManifestLockChecker(layout.manifest, layout.lock_files),
            "Manifest and lock file are consistent",
            required=True,
        ),
        CheckRule(FileChecker(*layout.manifest), "Direct dependencies declared"),
        CheckRule(
            AssumedPassChecker("Vulnerability check", layout.vulnerability_hint),
            "Known vulnerabilities in dependencies",
            required=True,
        ),
    )


def licensing_rules(layout: ProjectLayout) -> tuple[CheckRule, ...]:
    return (
        CheckRule(FileChecker(*layout.license), "License file", required=True),
        CheckRule(
            AssumedPassChecker(
                f"License field in {layout.manifest[0]}", "manifests are not parsed"
            ),
            "License declared in the dependency manifest",
        ),
    )


RULE_BUILDERS = {
    Category.BASIC_STRUCTURE: basic_structure_rules,
    Category.DOCUMENTATION: documentation_rules,
    Category.GITHUB_INTEGRATION: github_integration_rules,
    Category.QUALITY_TOOLS: quality_tools_rules,
    Category.DEPENDENCIES: dependencies_rules,
    Category.LICENSING: licensing_rules,
}


def build_rule_tables(layout: ProjectLayout) -> dict[Category, tuple[CheckRule, ...]]:
    """Build every category table for a layout, in evaluation order."""
    return {category: RULE_BUILDERS[category](layout) for category in Category}


def evaluate_category(
    category: Category,
    rules: tuple[CheckRule, ...],
    project_path: Path,
    thresholds: ScoreThresholds = DEFAULT_THRESHOLDS,
) -> CategoryResult:
    """Run a category's rule table against a project.

    Args:
        category: Category being evaluated
        rules: Ordered rule table
        project_path: Path to the project root
        thresholds: Status tier cut-offs

    Returns:
        CategoryResult with one item per rule, in table order
    """
    items = []
    for rule in rules:
        item = rule.checker.check(project_path, rule.description, rule.required)
        if rule.checker.assumed:
            logger.debug(f"{category.label}: '{item.name}' assumed to pass")
        items.append(item)

    score = category_score(items)
    return CategoryResult(
        category=category,
        score=score,
        status=thresholds.classify(score),
        description=CATEGORY_DESCRIPTIONS[category],
        items=tuple(items),
    )
