"""Helpers shared by the CLI commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape

from routelint.config import RouteLintConfig

logger = logging.getLogger(__name__)

console = Console(soft_wrap=True, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, emoji=False)


def resolve_target(directory: str | None) -> Path:
    """Resolve the directory argument, exiting with status 1 if it is missing."""
    target = Path(directory).resolve() if directory else Path.cwd()
    if not target.exists():
        err_console.print(f"[red]❌ Error: Path does not exist: {escape(str(target))}[/red]")
        sys.exit(1)
    return target


def get_config(ctx: click.Context) -> RouteLintConfig:
    obj = ctx.obj or {}
    return obj.get("config") or RouteLintConfig.load()


def fail(exc: Exception) -> NoReturn:
    """Report an unexpected error and exit with status 1."""
    logger.debug("Analysis failed", exc_info=exc)
    err_console.print(f"[red]❌ Analysis failed: {escape(str(exc))}[/red]")
    sys.exit(1)
