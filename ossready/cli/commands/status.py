"""CLI command for the readiness status report."""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ossready.readiness.analyzer import ReadinessAnalyzer
from ossready.readiness.layouts import LAYOUTS, ProjectLayout
from ossready.readiness.models import AnalysisResult, ItemStatus
from ossready.readiness.report import generate_json_report, save_json_report
from ossready.readiness.thresholds import ScoreThresholds
from ossready.utils.config import ProjectConfig

console = Console()


def run_analysis(
    path: str,
    layout_name: str | None = None,
    release_minimum: int | None = None,
) -> tuple[AnalysisResult, ScoreThresholds, ProjectLayout]:
    """Load the project configuration and analyze the project.

    Command-line values override the [tool.ossready] table. Exits with
    status 1 and a message naming the path when the project cannot be
    analyzed.
    """
    project_path = Path(path).resolve()
    config = ProjectConfig.from_pyproject(project_path)
    if release_minimum is not None:
        config.release_minimum = release_minimum

    try:
        layout = config.resolve_layout(project_path, layout_name)
        thresholds = config.thresholds()
        result = ReadinessAnalyzer(layout=layout, thresholds=thresholds).analyze(project_path)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    return result, thresholds, layout


@click.command()
@click.option(
    "--path",
    "-p",
    type=click.Path(exists=True, file_okay=False, dir_okay=True),
    default=".",
    help="Path to the project (default: current directory)",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["human", "json"]),
    default="human",
    help="Output format (default: human)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    help="Also save the JSON report to this file",
)
@click.option(
    "--layout",
    type=click.Choice(sorted(LAYOUTS)),
    help="Project layout to audit against (default: detected)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Show every checked item, not only the missing ones",
)
def status(
    path: str,
    output_format: str,
    output: str | None,
    layout: str | None,
    verbose: bool,
) -> None:
    """Check project health and open-source readiness.

    Scores the project across six categories:
    - Basic Structure: manifest, README, .gitignore and standard directories
    - Documentation: README, contribution guide, docs and examples
    - GitHub Integration: workflows, issue/PR templates, security policy
    - Quality Tools: tests, linter, release and dependency-update configs
    - Dependencies: manifest and lock file, vulnerability check
    - Licensing: license file

    \b
    Examples:
        ossready status                      # Show readiness summary
        ossready status --format json        # Print the JSON report
        ossready status -o readiness.json    # Save the JSON report
        ossready status --layout go -v       # Audit as a Go module

    """
    if output_format == "human":
        with console.status("[bold blue]Analyzing project readiness..."):
            result, _, _ = run_analysis(path, layout)
    else:
        result, _, _ = run_analysis(path, layout)

    if output:
        output_path = Path(output)
        save_json_report(result, output_path)
        if output_format == "human":
            console.print(f"[green]JSON report saved to:[/] {output_path}")

    if output_format == "json":
        click.echo(generate_json_report(result))
    else:
        _display_status(result, verbose)


def _display_status(result: AnalysisResult, verbose: bool) -> None:
    """Display the readiness report in the terminal.

    Args:
        result: AnalysisResult to display
        verbose: Whether to list every item
    """
    style = _get_score_style(result.overall_score)
    console.print(
        Panel(
            f"[{style}]{result.overall_score}/100[/] - {_get_score_label(result.overall_score)}",
            title=f"[bold]{result.project_name}[/] ({result.project_type.value})",
            subtitle=result.project_path,
        )
    )

    table = Table(title="Category Results", show_header=True)
    table.add_column("Category", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Status")
    table.add_column("Details")

    for category in result.categories:
        table.add_row(
            category.name,
            f"[{category.status.color}]{category.score}[/]",
            f"{category.status.emoji} {category.status.value}",
            category.description,
        )

        for item in category.items:
            if item.status is ItemStatus.MISSING:
                marker = "[red]required[/]" if item.required else "[yellow]recommended[/]"
                table.add_row("", "", f"  ✗ {item.name}", marker)
            elif verbose:
                table.add_row("", "", f"  ✓ {item.name}", f"[dim]{item.description}[/]")

    console.print(table)

    if result.missing:
        console.print(f"\n[bold]Missing Items ({len(result.missing)}):[/]")
        for missing in result.missing:
            console.print(f"  {missing.priority.emoji} {missing.name} - {missing.description}")

    if result.recommendations:
        console.print(f"\n[bold]Recommendations ({len(result.recommendations)}):[/]")
        for i, rec in enumerate(result.recommendations, 1):
            console.print(f"  {i}. {rec.priority.emoji} {rec.title}")
            console.print(f"     {rec.description}")
            if rec.command:
                console.print(f"     Run: [bold]{rec.command}[/]")

    console.print(f"\n{result.summary}")


def _get_score_style(score: int) -> str:
    """Get Rich style for a numeric score."""
    if score >= 90:
        return "bold green"
    elif score >= 80:
        return "green"
    elif score >= 60:
        return "yellow"
    elif score >= 40:
        return "orange1"
    else:
        return "red"


def _get_score_label(score: int) -> str:
    """Get the display label for the overall score."""
    if score >= 90:
        return "Excellent"
    elif score >= 80:
        return "Good"
    elif score >= 60:
        return "Fair"
    elif score >= 40:
        return "Needs Improvement"
    else:
        return "Critical"
