"""Per-file structural summaries and their diagnosis."""

from __future__ import annotations

from dataclasses import dataclass, field

from routelint.scanner import patterns as p
from routelint.scanner.models import RouteFileConfig, Severity


def extract_imports(content: str) -> list[str]:
    """Return module specifiers from ``import ... from "..."`` in source order."""
    return [m.group(1) for m in p.IMPORT_FROM.finditer(content)]


def extract_route_config(content: str, file_path: str) -> RouteFileConfig:
    """Summarize a route file independently of the rule results."""
    return RouteFileConfig(
        file=file_path,
        has_activity_context=p.ACTIVITY_CONTEXT in content,
        has_blocked_navigation=p.BLOCKED_NAVIGATION in content,
        has_multiple_query_clients=len(p.NEW_QUERY_CLIENT_LOOSE.findall(content)) > 1,
        has_unmemoized_routes=p.ROUTES_MAP in content and p.USE_MEMO not in content,
        has_react_router=bool(p.REACT_ROUTER_USAGE.search(content)),
        has_shell_components=bool(p.SHELL_USAGE.search(content)),
        component_count=len(p.COMPONENT_DECLARATION.findall(content)),
        imports=tuple(extract_imports(content)),
    )


@dataclass
class Diagnosis:
    """Problems and fixes inferred from a single RouteFileConfig."""

    file: str
    problems: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    severity: Severity = Severity.LOW


def diagnose(config: RouteFileConfig) -> Diagnosis:
    """Explain which remount causes a route file exhibits.

    Severity starts low; multiple query clients raise it to high and
    unmemoized routes set it to medium. The checks run in that order, so a
    file with both ends up medium.
    """
    diagnosis = Diagnosis(file=config.file)

    if config.has_activity_context:
        diagnosis.problems.append("ActivityContext tracking navigation changes")
        diagnosis.recommendations.append(
            "Move ActivityContext below module routing level"
        )

    if config.has_blocked_navigation:
        diagnosis.problems.append("BlockedNavigation intercepting navigation")
        diagnosis.recommendations.append(
            "Check BlockedNavigation placement and when conditions"
        )

    if config.has_multiple_query_clients:
        diagnosis.problems.append("Multiple QueryClient instances detected")
        diagnosis.recommendations.append(
            "Share single QueryClient instance across routes"
        )
        diagnosis.severity = Severity.HIGH

    if config.has_unmemoized_routes:
        diagnosis.problems.append("Route array recreated on each render")
        diagnosis.recommendations.append(
            "Wrap routes in useMemo with stable dependencies"
        )
        diagnosis.severity = Severity.MEDIUM

    return diagnosis
