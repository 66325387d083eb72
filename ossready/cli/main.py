"""Main CLI entry point for ossready."""

import logging

import click

from ossready import __version__
from ossready.cli.commands import ready, status


@click.group()
@click.version_option(version=__version__, prog_name="ossready")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """ossready - check a repository before publishing it as open source.

    \b
    Examples:
        ossready status                  # Score the current directory
        ossready status --format json    # Machine-readable output
        ossready ready --path ./project  # Release gate (exit 1 when blocked)
    """
    ctx.ensure_object(dict)
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(name)s] %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )


# Register commands
cli.add_command(status)
cli.add_command(ready)


if __name__ == "__main__":
    cli()
