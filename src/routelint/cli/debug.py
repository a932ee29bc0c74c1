"""CLI command: routelint debug [PATH] — HTML or JSON debug report."""

from __future__ import annotations

from pathlib import Path

import click
from rich.markup import escape

from routelint.cli.common import console, fail, get_config, resolve_target
from routelint.report.html import write_html_report
from routelint.report.json_report import render_json
from routelint.scanner.engine import RouteAnalyzer


@click.command()
@click.argument("directory", required=False, type=click.Path())
@click.option(
    "--verbose", "-v", is_flag=True, help="Show detailed file-by-file analysis."
)
@click.option("--json", "-j", "as_json", is_flag=True, help="Output results as JSON.")
@click.option(
    "--html",
    "as_html",
    is_flag=True,
    help="Generate an interactive HTML report (the default).",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="HTML report path (default: docs/index.html).",
)
@click.pass_context
def debug(
    ctx: click.Context,
    directory: str | None,
    verbose: bool,
    as_json: bool,
    as_html: bool,
    output: Path | None,
) -> None:
    """Analyze route files and build an interactive debug report.

    Writes HTML unless --json is given alone. The report embeds a live
    route monitor for use in the browser.
    """
    config = get_config(ctx)
    target = resolve_target(directory)
    html = as_html or not as_json

    try:
        result = RouteAnalyzer(extended=True).analyze(target)
        if html:
            written = write_html_report(result, output or config.output_path)
    except Exception as e:  # noqa: BLE001
        fail(e)

    if html:
        if verbose:
            console.print(
                f"Analyzed {result.stats.analyzed} files, "
                f"found {len(result.issues)} issues"
            )
        console.print(f"[green]✅ HTML report generated: {escape(str(written))}[/green]")
        return

    click.echo(render_json(result))
