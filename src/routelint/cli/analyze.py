"""CLI command: routelint analyze [PATH] — console or JSON route analysis."""

from __future__ import annotations

import sys

import click

from routelint.cli.common import console, fail, resolve_target
from routelint.report.console import print_header, print_results
from routelint.report.json_report import render_json
from routelint.scanner.engine import RouteAnalyzer


@click.command()
@click.argument("directory", required=False, type=click.Path())
@click.option(
    "--verbose", "-v", is_flag=True, help="Show detailed file-by-file analysis."
)
@click.option("--json", "-j", "as_json", is_flag=True, help="Output results as JSON.")
def analyze(directory: str | None, verbose: bool, as_json: bool) -> None:
    """Analyze React Router patterns that may cause unmounting/remounting.

    Exits with status 1 when console output reports any issue.
    """
    target = resolve_target(directory)

    try:
        if not as_json:
            print_header(console, str(target), "Route Analyzer")
        result = RouteAnalyzer().analyze(target)
    except Exception as e:  # noqa: BLE001
        fail(e)

    if as_json:
        click.echo(render_json(result))
        return

    print_results(console, result, verbose=verbose)
    if result.issues:
        sys.exit(1)
