"""Analysis engine — walks a tree, runs the route rules, aggregates results."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterator
from pathlib import Path

from routelint.scanner.aggregate import finalize
from routelint.scanner.dependencies import DependencySpec
from routelint.scanner.models import AnalysisResult
from routelint.scanner.route_config import extract_route_config
from routelint.scanner.rules import run_rules

logger = logging.getLogger(__name__)

# Directories to always skip, matched against the exact basename
SKIP_DIRS = frozenset(
    {
        "node_modules",
        ".git",
        "dist",
        "build",
        "coverage",
        ".next",
    }
)

_ROUTE_NAME = re.compile(r"route", re.IGNORECASE)
_ROUTES_MODULE = re.compile(r"Routes\.tsx?\Z")
_SCRIPT_EXTENSION = re.compile(r"\.(tsx?|jsx?)\Z")


def should_skip_directory(name: str) -> bool:
    return name in SKIP_DIRS


def is_relevant_file(name: str) -> bool:
    """Whether a file name looks like a JS/TS routing module."""
    named_like_route = bool(_ROUTE_NAME.search(name) or _ROUTES_MODULE.search(name))
    return named_like_route and bool(_SCRIPT_EXTENSION.search(name))


def walk_route_files(directory: str | Path) -> Iterator[Path]:
    """Yield candidate route files depth-first, entries in name order.

    An unreadable directory is logged and skipped; the walk carries on with
    its siblings. Symlinked directories are not followed.
    """
    directory = Path(directory)
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        logger.warning("Error reading directory %s: %s", directory, e)
        return

    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            if not should_skip_directory(entry.name):
                yield from walk_route_files(entry.path)
        elif is_relevant_file(entry.name):
            yield Path(entry.path)


class RouteAnalyzer:
    """Orchestrates route analysis across a directory.

    ``extended`` switches on the debug-report extras: per-file
    ``RouteFileConfig`` summaries, the dependency table, and global
    recommendations.
    """

    def __init__(
        self,
        extended: bool = False,
        dependency_table: list[DependencySpec] | None = None,
    ) -> None:
        self._extended = extended
        self._dependency_table = dependency_table

    def analyze(self, directory: str | Path) -> AnalysisResult:
        """Analyze every route file under ``directory`` and return the result."""
        directory = Path(directory).resolve()
        result = AnalysisResult(base_path=str(directory), extended=self._extended)

        for file_path in walk_route_files(directory):
            result.stats.total += 1
            self.analyze_file(file_path, result)

        return finalize(result, self._dependency_table)

    def analyze_file(self, file_path: Path, result: AnalysisResult) -> None:
        """Run all rules on one file and fold the findings into ``result``."""
        try:
            content = file_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning("Error analyzing %s: %s", file_path, e)
            return

        relative = _relative_path(file_path, result.base_path)
        result.stats.analyzed += 1
        result.files.append(relative)
        logger.debug("Analyzing %s", relative)

        issues, recommendations = run_rules(content, relative, extended=self._extended)
        result.issues.extend(issues)
        result.recommendations.extend(recommendations)
        if issues:
            result.stats.with_issues += 1

        if self._extended:
            result.route_configs.append(extract_route_config(content, relative))


def _relative_path(file_path: Path, base_dir: str) -> str:
    """Path relative to the analyzed root, as shown in reports."""
    try:
        return str(file_path.relative_to(base_dir))
    except ValueError:
        return str(file_path)
