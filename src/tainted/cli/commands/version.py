"""Version command - show tainted version."""

import click
from ... import __version__


@click.command()
def version():
    """Show tainted version."""
    click.echo(f"tainted version {__version__}")
