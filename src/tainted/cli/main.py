"""Main CLI entry point for tainted."""

import click
from .commands.select import select
from .commands.changes import changes
from .commands.deps import deps
from .commands.version import version as version_command
from .. import __version__
from ..utils.logging import get_logger, setup_logging, verbosity_to_level

logger = get_logger("cli.main")


@click.group()
@click.version_option(version=__version__, prog_name="tainted", message="%(prog)s version %(version)s")
@click.option('-v', '--verbose', count=True, help='Log progress to stderr (-vv for debug)')
def cli(verbose):
    """tainted - Change-impact package selection."""
    setup_logging(verbosity_to_level(verbose))


cli.add_command(select)
cli.add_command(changes)
cli.add_command(deps)
cli.add_command(version_command)
