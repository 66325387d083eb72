"""CLI commands for ossready."""

from ossready.cli.commands.ready import ready
from ossready.cli.commands.status import status

__all__ = ["ready", "status"]
