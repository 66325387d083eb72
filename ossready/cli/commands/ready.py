"""CLI command for the pre-release readiness gate."""

import sys

import click
from rich.table import Table

from ossready.cli.commands.status import console, run_analysis
from ossready.readiness.layouts import LAYOUTS
from ossready.readiness.models import ChecklistStatus
from ossready.readiness.release import ReleaseGate, ReleaseVerdict
from ossready.readiness.report import generate_json_report

CHECKLIST_ICONS = {
    ChecklistStatus.DONE: "[green]✓[/]",
    ChecklistStatus.WARNING: "[yellow]![/]",
    ChecklistStatus.PENDING: "[dim]○[/]",
}


@click.command()
@click.option(
    "--path",
    "-p",
    type=click.Path(exists=True, file_okay=False, dir_okay=True),
    default=".",
    help="Path to the project (default: current directory)",
)
@click.option(
    "--min-score",
    type=click.IntRange(0, 100),
    help="Minimum readiness score required (default: 90 or [tool.ossready] release_minimum)",
)
@click.option(
    "--layout",
    type=click.Choice(sorted(LAYOUTS)),
    help="Project layout to audit against (default: detected)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the verdict as JSON")
def ready(path: str, min_score: int | None, layout: str | None, as_json: bool) -> None:
    """Check whether the project is ready for public release.

    Blocks the release when the readiness score is below the minimum, the
    license file is missing, or files that look like secrets are present.
    Nothing is published; this command only checks.

    \b
    Examples:
        ossready ready                   # Gate the current directory
        ossready ready --min-score 80    # Relax the minimum score
        ossready ready --json            # Machine-readable verdict

    """
    result, thresholds, project_layout = run_analysis(path, layout, min_score)
    gate = ReleaseGate(thresholds=thresholds, excluded_dirs=project_layout.excluded_dirs)
    verdict = gate.evaluate(result)

    if as_json:
        click.echo(generate_json_report(verdict))
    else:
        _display_verdict(result.project_name, verdict)

    sys.exit(0 if verdict.passed else 1)


def _display_verdict(project_name: str, verdict: ReleaseVerdict) -> None:
    """Display the release verdict and checklist in the terminal."""
    console.print(f"[bold]Release readiness check:[/] {project_name}\n")

    if verdict.overall_score >= verdict.minimum_score:
        console.print(f"[green]Readiness score:[/] {verdict.overall_score}/100")
    else:
        console.print(
            f"[red]Readiness score insufficient:[/] {verdict.overall_score}/100 "
            f"(minimum {verdict.minimum_score})"
        )

    table = Table(title="Pre-publication Checklist", show_header=True)
    table.add_column("", justify="center")
    table.add_column("Item", style="cyan")
    table.add_column("Details", style="dim")
    for item in verdict.checklist:
        table.add_row(CHECKLIST_ICONS[item.status], item.title, item.description)
    console.print(table)

    if verdict.passed:
        console.print(f"\n[bold green]Project '{project_name}' is ready for public release![/]")
        console.print("Next steps:")
        console.print("  1. Change the repository visibility to public")
        console.print("  2. Create the initial release tag")
        return

    console.print(f"\n[bold red]Release blocked ({len(verdict.blockers)}):[/]")
    for blocker in verdict.blockers:
        console.print(f"  - {blocker}")
    console.print("\nRun 'ossready status' to see what is missing.")
