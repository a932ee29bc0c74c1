"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from routelint.scanner.models import (
    AnalysisResult,
    Issue,
    IssueType,
    Recommendation,
    RouteFileConfig,
    Severity,
)


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_app(fixtures_dir: Path) -> Path:
    return fixtures_dir / "sample_app"


@pytest.fixture
def write_file(tmp_path: Path):
    """Create a file (and its parents) under tmp_path."""

    def _write(relative: str, content: str = "") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def small_result() -> AnalysisResult:
    result = AnalysisResult(base_path="/project", extended=True)
    result.stats.total = 2
    result.stats.analyzed = 2
    result.stats.with_issues = 1
    result.files = ["src/AppRoutes.tsx", "src/clean.routes.ts"]
    result.issues = [
        Issue(
            type=IssueType.DYNAMIC_ROUTE_GENERATION,
            severity=Severity.HIGH,
            file="src/AppRoutes.tsx",
            message="Dynamic route generation detected - may cause unmounts",
            pattern="routes.map(({ path, Component })",
            fix="Wrap routes array in useMemo to prevent recreation",
        ),
        Issue(
            type=IssueType.QUERY_CLIENT_CREATION,
            severity=Severity.MEDIUM,
            file="src/AppRoutes.tsx",
            message="QueryClient created in route file - may cause state loss",
            count=2,
        ),
    ]
    result.recommendations = [
        Recommendation(
            file="src/AppRoutes.tsx",
            message="Wrap routes array in useMemo to prevent recreation",
        ),
        Recommendation(
            priority=Severity.HIGH,
            message="Address high-severity issues immediately to prevent route unmounting",
            action="Review dynamic route generation and context placement patterns",
        ),
    ]
    result.route_configs = [
        RouteFileConfig(
            file="src/AppRoutes.tsx",
            has_multiple_query_clients=True,
            has_unmemoized_routes=True,
            has_react_router=True,
            component_count=1,
            imports=("react", "react-router-dom"),
        ),
        RouteFileConfig(file="src/clean.routes.ts"),
    ]
    return result
