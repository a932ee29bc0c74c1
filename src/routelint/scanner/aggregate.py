"""Run-level aggregation — global recommendations derived from all issues."""

from __future__ import annotations

from routelint.scanner.dependencies import DependencySpec, map_dependencies
from routelint.scanner.models import AnalysisResult, Recommendation, Severity

# Thresholds over the whole run
MEDIUM_ISSUE_THRESHOLD = 3
ROUTE_FILE_THRESHOLD = 10
UNMEMOIZED_ROUTE_THRESHOLD = 5


def global_recommendations(result: AnalysisResult) -> list[Recommendation]:
    """Recommendations that depend on the full issue set, each at most once."""
    recommendations: list[Recommendation] = []
    by_severity = result.issues_by_severity

    if by_severity[Severity.HIGH.value] > 0:
        recommendations.append(
            Recommendation(
                priority=Severity.HIGH,
                message="Address high-severity issues immediately to prevent route unmounting",
                action="Review dynamic route generation and context placement patterns",
            )
        )

    if by_severity[Severity.MEDIUM.value] > MEDIUM_ISSUE_THRESHOLD:
        recommendations.append(
            Recommendation(
                priority=Severity.MEDIUM,
                message="Multiple medium-severity issues detected",
                action="Consider refactoring route structure for better stability",
            )
        )

    unmemoized = sum(1 for c in result.route_configs if c.has_unmemoized_routes)
    if (
        len(result.route_configs) > ROUTE_FILE_THRESHOLD
        and unmemoized > UNMEMOIZED_ROUTE_THRESHOLD
    ):
        recommendations.append(
            Recommendation(
                priority=Severity.MEDIUM,
                message="Large number of unmemoized routes detected",
                action="Implement useMemo wrapping for route arrays across the application",
            )
        )

    return recommendations


def finalize(
    result: AnalysisResult,
    dependency_table: list[DependencySpec] | None = None,
) -> AnalysisResult:
    """Attach extended-mode aggregates once every file has been analyzed."""
    if not result.extended:
        return result
    result.dependencies = map_dependencies(result.route_configs, dependency_table)
    result.recommendations.extend(global_recommendations(result))
    return result
