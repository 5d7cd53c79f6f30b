"""Deps command - show the dependency closure of one package."""

import sys
import click
from ... import build_catalog
from ...graph.import_graph import ImportGraph
from ...resolve import ImportResolver, MetadataCache
from ...utils.errors import TaintedError
from ..utils import dump_json, echo_lines, format_error, run_options, settings_from_options


@click.command()
@click.argument('package')
@run_options
@click.option('--cycles', is_flag=True, help='Also report import cycles in the closure')
@click.option('--json', 'as_json', is_flag=True, help='Output JSON')
def deps(package, root, catalog, manifest, config_path, cycles, as_json):
    """Print every local package PACKAGE depends on, sorted."""
    try:
        settings = settings_from_options(config_path, catalog=catalog, manifest=manifest)
        resolver = ImportResolver(build_catalog(settings, root), MetadataCache())
        closure = sorted(resolver.resolve(package, root))
    except TaintedError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    
    found_cycles = []
    if cycles:
        graph = ImportGraph()
        graph.build_from_metadata(resolver.cache.snapshot())
        found_cycles = graph.find_cycles()
    
    if as_json:
        click.echo(dump_json({"package": package, "dependencies": closure, "cycles": found_cycles}))
        return
    
    echo_lines(closure)
    for cycle in found_cycles:
        click.echo("cycle: " + " -> ".join(cycle + [cycle[0]]))
