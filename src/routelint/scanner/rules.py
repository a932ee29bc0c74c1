"""Route rules — independent detectors run in a fixed order against file text.

Every rule takes the raw file content and its display path and returns a
:class:`RuleOutcome`. Rules never look at each other's results, so a file can
collect issues from all of them. Matching is purely textual: comments and
string literals count the same as code.
"""

from __future__ import annotations

from collections.abc import Callable

from routelint.scanner import patterns as p
from routelint.scanner.models import (
    Issue,
    IssueType,
    Recommendation,
    RuleOutcome,
    Severity,
)

Rule = Callable[..., RuleOutcome]

_MEMOIZE_ROUTES = "Wrap routes array in useMemo to prevent recreation"
_SHARE_QUERY_CLIENT = "Move QueryClient creation to module level or share instance"
_MOVE_PROVIDER = "Move context provider below shell routing but above module routes"
_REVIEW_BLOCKED_NAVIGATION = "Review BlockedNavigation placement and when conditions"
_REVIEW_ACTIVITY_CONTEXT = (
    "Review ActivityContext usage for potential navigation interference"
)
_MEMOIZE_CALCULATIONS = (
    "Consider memoizing expensive calculations with useMemo/useCallback"
)
_CONSOLIDATE_WRAPPERS = "Consolidate AsyncWrapper usage to prevent conflicts"
_MEMOIZE_SHELL_HOOKS = "Wrap shell hooks with useMemo/useCallback for stability"
_OPTIMIZE = "Optimize performance by addressing this pattern"


def check_dynamic_route_generation(
    content: str, file_path: str, extended: bool = False
) -> RuleOutcome:
    """Flag ``routes.map(({ path, Component }) ...`` route generation."""
    match = p.ROUTES_MAP_DESTRUCTURE.search(content)
    if not match:
        return RuleOutcome()

    issue = Issue(
        type=IssueType.DYNAMIC_ROUTE_GENERATION,
        severity=Severity.HIGH,
        file=file_path,
        message="Dynamic route generation detected - may cause unmounts",
        pattern=match.group(0),
        fix=_MEMOIZE_ROUTES,
    )
    recommendations: tuple[Recommendation, ...] = ()
    if p.USE_MEMO not in content:
        recommendations = (Recommendation(file=file_path, message=_MEMOIZE_ROUTES),)
    return RuleOutcome(issues=(issue,), recommendations=recommendations)


def check_query_client_creation(
    content: str, file_path: str, extended: bool = False
) -> RuleOutcome:
    """Flag ``new QueryClient(`` calls inside a route file."""
    count = len(p.NEW_QUERY_CLIENT.findall(content))
    if not count:
        return RuleOutcome()

    return RuleOutcome(
        issues=(
            Issue(
                type=IssueType.QUERY_CLIENT_CREATION,
                severity=Severity.MEDIUM,
                file=file_path,
                message="QueryClient created in route file - may cause state loss",
                count=count,
                fix=_SHARE_QUERY_CLIENT,
            ),
        ),
        recommendations=(Recommendation(file=file_path, message=_SHARE_QUERY_CLIENT),),
    )


def check_context_placement(
    content: str, file_path: str, extended: bool = False
) -> RuleOutcome:
    """Flag context usage whose first occurrence precedes the first ``<Routes>``.

    Only the first occurrence of each marker is compared, so this is a rough
    proxy for JSX nesting rather than a structural check.
    """
    context = p.CONTEXT_MARKER.search(content)
    routes = p.ROUTES_TAG.search(content)
    if not context or not routes or context.start() >= routes.start():
        return RuleOutcome()

    return RuleOutcome(
        issues=(
            Issue(
                type=IssueType.CONTEXT_PLACEMENT,
                severity=Severity.HIGH,
                file=file_path,
                message="Context may be placed above Routes - could cause unmounts",
                fix=_MOVE_PROVIDER,
            ),
        ),
        recommendations=(Recommendation(file=file_path, message=_MOVE_PROVIDER),),
    )


def check_blocked_navigation(
    content: str, file_path: str, extended: bool = False
) -> RuleOutcome:
    if p.BLOCKED_NAVIGATION not in content:
        return RuleOutcome()

    return RuleOutcome(
        issues=(
            Issue(
                type=IssueType.BLOCKED_NAVIGATION,
                severity=Severity.MEDIUM,
                file=file_path,
                message="BlockedNavigation component found - may interfere with routing",
                fix=_REVIEW_BLOCKED_NAVIGATION,
            ),
        ),
        recommendations=(
            Recommendation(file=file_path, message=_REVIEW_BLOCKED_NAVIGATION),
        ),
    )


def check_activity_context(
    content: str, file_path: str, extended: bool = False
) -> RuleOutcome:
    if p.ACTIVITY_CONTEXT not in content:
        return RuleOutcome()

    return RuleOutcome(
        issues=(
            Issue(
                type=IssueType.ACTIVITY_CONTEXT,
                severity=Severity.MEDIUM,
                file=file_path,
                message="ActivityContext found - may track navigation changes",
                fix=_REVIEW_ACTIVITY_CONTEXT,
            ),
        ),
        recommendations=(
            Recommendation(file=file_path, message=_REVIEW_ACTIVITY_CONTEXT),
        ),
    )


def check_memoization(
    content: str, file_path: str, extended: bool = False
) -> RuleOutcome:
    """Flag iteration calls in a file that never uses useMemo or useCallback."""
    if not p.ITERATION_CALL.search(content):
        return RuleOutcome()
    if p.USE_MEMO in content or p.USE_CALLBACK in content:
        return RuleOutcome()

    return RuleOutcome(
        issues=(
            Issue(
                type=IssueType.MISSING_MEMOIZATION,
                severity=Severity.LOW,
                file=file_path,
                message="Expensive calculations detected without memoization",
                fix=_MEMOIZE_CALCULATIONS,
            ),
        ),
        recommendations=(
            Recommendation(file=file_path, message=_MEMOIZE_CALCULATIONS),
        ),
    )


def check_async_wrapper(
    content: str, file_path: str, extended: bool = False
) -> RuleOutcome:
    """Flag more than one AsyncWrapper mention in the same file."""
    count = content.count(p.ASYNC_WRAPPER)
    if count <= 1:
        return RuleOutcome()

    issue = Issue(
        type=IssueType.MULTIPLE_ASYNC_WRAPPERS,
        severity=Severity.MEDIUM,
        file=file_path,
        message="Multiple AsyncWrapper instances detected",
        count=count,
        fix=_CONSOLIDATE_WRAPPERS,
    )
    recommendations: tuple[Recommendation, ...] = ()
    if extended:
        recommendations = (
            Recommendation(file=file_path, message=_CONSOLIDATE_WRAPPERS),
        )
    return RuleOutcome(issues=(issue,), recommendations=recommendations)


def check_shell_patterns(
    content: str, file_path: str, extended: bool = False
) -> RuleOutcome:
    if p.MODULE_PATH_RESOLVER not in content:
        return RuleOutcome()
    if p.USE_MEMO in content and p.USE_CALLBACK in content:
        return RuleOutcome()

    return RuleOutcome(
        issues=(
            Issue(
                type=IssueType.UNMEMOIZED_SHELL_HOOKS,
                severity=Severity.MEDIUM,
                file=file_path,
                message="Shell hooks used without proper memoization",
                fix=_MEMOIZE_SHELL_HOOKS,
            ),
        ),
    )


def check_performance_patterns(
    content: str, file_path: str, extended: bool = False
) -> RuleOutcome:
    """One low-severity issue per smell present; all smells are checked."""
    issues = tuple(
        Issue(
            type=IssueType.PERFORMANCE_ISSUE,
            severity=pattern.severity,
            file=file_path,
            message=pattern.message,
            fix=_OPTIMIZE,
        )
        for pattern in p.PERFORMANCE_PATTERNS
        if pattern.regex.search(content)
    )
    return RuleOutcome(issues=issues)


# Evaluation order is part of the output contract
RULES: list[Rule] = [
    check_dynamic_route_generation,
    check_query_client_creation,
    check_context_placement,
    check_blocked_navigation,
    check_activity_context,
    check_memoization,
    check_async_wrapper,
    check_shell_patterns,
    check_performance_patterns,
]


def run_rules(
    content: str, file_path: str, extended: bool = False
) -> tuple[list[Issue], list[Recommendation]]:
    """Run every rule in order and collect their issues and recommendations."""
    issues: list[Issue] = []
    recommendations: list[Recommendation] = []
    for rule in RULES:
        outcome = rule(content, file_path, extended=extended)
        issues.extend(outcome.issues)
        recommendations.extend(outcome.recommendations)
    return issues, recommendations
