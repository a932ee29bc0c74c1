"""CLI entry point — Click group with global options."""

from __future__ import annotations

import logging

import click

from routelint import __version__
from routelint.config import RouteLintConfig


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="routelint")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging on stderr.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """routelint — find React Router patterns that cause component remounts."""
    ctx.ensure_object(dict)
    ctx.obj["config"] = RouteLintConfig.load()

    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _register_commands() -> None:
    from routelint.cli.analyze import analyze  # noqa: F811
    from routelint.cli.debug import debug  # noqa: F811

    main.add_command(analyze)
    main.add_command(debug)


_register_commands()
