"""Changes command - show directories changed between two revisions."""

import sys
import click
from ...changes import changed_directories
from ...utils.errors import TaintedError
from ..utils import echo_lines, format_error, settings_from_options


@click.command()
@click.option('--dir', 'root', default='.', show_default=True, type=click.Path(file_okay=False), help='Repository root')
@click.option('--from', 'from_rev', default=None, help='Revision to take changes from [default: HEAD~1]')
@click.option('--to', 'to_rev', default=None, help='Revision to take changes to [default: HEAD]')
@click.option('--test/--no-test', 'include_tests', default=None, help='Include test files')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False), help='Config YAML file')
def changes(root, from_rev, to_rev, include_tests, config_path):
    """Print changed directories, one per line."""
    try:
        settings = settings_from_options(
            config_path,
            **{"from": from_rev, "to": to_rev, "include_tests": include_tests}
        )
        directories = changed_directories(
            root,
            settings.from_rev,
            settings.to_rev,
            include_tests=settings.include_tests,
            test_patterns=settings.test_patterns,
        )
    except TaintedError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    
    echo_lines(sorted(directories))
