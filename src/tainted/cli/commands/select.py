"""Select command - list packages affected by changes between two revisions."""

import sys
import click
from ... import select_affected
from ...utils.errors import TaintedError
from ..utils import dump_json, echo_lines, format_error, read_candidates, run_options, settings_from_options


@click.command(name="select")
@run_options
@click.option('--from', 'from_rev', default=None, help='Revision to take changes from [default: HEAD~1]')
@click.option('--to', 'to_rev', default=None, help='Revision to take changes to [default: HEAD]')
@click.option('--test/--no-test', 'include_tests', default=None, help='Include test files in the change set')
@click.option('--packages', type=click.File('r'), default=None, help="Newline-delimited candidates ('-' for stdin)")
@click.option('--entrypoints', default=None, help='Only report candidates under this subtree, e.g. cmd')
@click.option('--workers', type=int, default=None, help='Worker threads [default: CPU count]')
@click.option('--include-self', 'include_self', is_flag=True, default=None, help="Select candidates whose own directory changed")
@click.option('--on-error', 'on_error', type=click.Choice(['fail', 'select']), default=None, help='fail: abort the run; select: treat unresolvable candidates as affected')
@click.option('--json', 'as_json', is_flag=True, help='Output the full selection result as JSON')
def select(root, catalog, manifest, config_path, from_rev, to_rev, include_tests, packages,
           entrypoints, workers, include_self, on_error, as_json):
    """
    Print packages whose dependencies changed between two revisions.
    
    Candidates are read from --packages, or enumerated from the catalog.
    Output is sorted, one import path per line, and empty when nothing
    is affected:
    
        go list ./... | tainted select --packages - --entrypoints cmd
    """
    try:
        settings = settings_from_options(
            config_path,
            **{
                "from": from_rev,
                "to": to_rev,
                "include_tests": include_tests,
                "entrypoints": entrypoints,
                "catalog": catalog,
                "manifest": manifest,
                "workers": workers,
                "include_self": include_self,
                "on_error": on_error,
            }
        )
        candidates = read_candidates(packages) if packages is not None else None
        result = select_affected(root, settings, candidates=candidates)
    except TaintedError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    
    if as_json:
        click.echo(dump_json(result.model_dump()))
    else:
        echo_lines(result.selected)
    
    if result.uncertain:
        click.echo(
            f"Warning: {len(result.uncertain)} candidates selected without a known closure: {', '.join(result.uncertain)}",
            err=True
        )
