"""Scanner data models — issues, recommendations and analysis results."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


class Severity(enum.Enum):
    """Issue severity level."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class IssueType(enum.Enum):
    """The fixed set of rule kinds."""

    DYNAMIC_ROUTE_GENERATION = "dynamic-route-generation"
    QUERY_CLIENT_CREATION = "query-client-creation"
    CONTEXT_PLACEMENT = "context-placement"
    BLOCKED_NAVIGATION = "blocked-navigation"
    ACTIVITY_CONTEXT = "activity-context"
    MISSING_MEMOIZATION = "missing-memoization"
    MULTIPLE_ASYNC_WRAPPERS = "multiple-async-wrappers"
    UNMEMOIZED_SHELL_HOOKS = "unmemoized-shell-hooks"
    PERFORMANCE_ISSUE = "performance-issue"


@dataclass(frozen=True)
class Issue:
    """A single pattern detected in one file."""

    type: IssueType
    severity: Severity
    file: str
    message: str
    pattern: str | None = None
    count: int | None = None
    fix: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.type.value,
            "severity": self.severity.value,
            "file": self.file,
            "message": self.message,
        }
        if self.pattern is not None:
            data["pattern"] = self.pattern
        if self.count is not None:
            data["count"] = self.count
        if self.fix is not None:
            data["fix"] = self.fix
        return data


@dataclass(frozen=True)
class Recommendation:
    """A suggested remediation, file-scoped or global."""

    message: str
    file: str | None = None
    priority: Severity | None = None
    action: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.file is not None:
            data["file"] = self.file
        if self.priority is not None:
            data["priority"] = self.priority.value
        data["message"] = self.message
        if self.action is not None:
            data["action"] = self.action
        return data


@dataclass(frozen=True)
class RuleOutcome:
    """What one rule produced for one file."""

    issues: tuple[Issue, ...] = ()
    recommendations: tuple[Recommendation, ...] = ()


@dataclass(frozen=True)
class RouteFileConfig:
    """Structural summary of one route file."""

    file: str
    has_activity_context: bool = False
    has_blocked_navigation: bool = False
    has_multiple_query_clients: bool = False
    has_unmemoized_routes: bool = False
    has_react_router: bool = False
    has_shell_components: bool = False
    component_count: int = 0
    imports: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file,
            "hasActivityContext": self.has_activity_context,
            "hasBlockedNavigation": self.has_blocked_navigation,
            "hasMultipleQueryClients": self.has_multiple_query_clients,
            "hasUnmemoizedRoutes": self.has_unmemoized_routes,
            "hasReactRouter": self.has_react_router,
            "hasShellComponents": self.has_shell_components,
            "componentCount": self.component_count,
            "imports": list(self.imports),
        }


@dataclass(frozen=True)
class DependencyRecord:
    """A library of interest and whether any route file uses it."""

    name: str
    version: str
    critical: bool
    detected: bool = False
    shell_patched: bool | None = None
    patched_components: tuple[str, ...] = ()
    components: tuple[str, ...] = ()
    issue: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"version": self.version, "critical": self.critical}
        if self.shell_patched is not None:
            data["shellPatched"] = self.shell_patched
        if self.patched_components:
            data["patchedComponents"] = list(self.patched_components)
        if self.components:
            data["components"] = list(self.components)
        if self.issue is not None:
            data["issue"] = self.issue
        data["detected"] = self.detected
        return data


@dataclass
class FileStats:
    """Running file counters for one run."""

    total: int = 0
    analyzed: int = 0
    with_issues: int = 0


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class AnalysisResult:
    """Aggregate result of one analysis run, handed to every reporter."""

    base_path: str
    extended: bool = False
    stats: FileStats = field(default_factory=FileStats)
    issues: list[Issue] = field(default_factory=list)
    recommendations: list[Recommendation] = field(default_factory=list)
    dependencies: list[DependencyRecord] = field(default_factory=list)
    route_configs: list[RouteFileConfig] = field(default_factory=list)
    files: list[str] = field(default_factory=list)
    timestamp: str = field(default_factory=_utc_timestamp)

    @property
    def issues_by_type(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for issue in self.issues:
            counts[issue.type.value] = counts.get(issue.type.value, 0) + 1
        return counts

    @property
    def issues_by_severity(self) -> dict[str, int]:
        counts = {s.value: 0 for s in Severity}
        for issue in self.issues:
            counts[issue.severity.value] += 1
        return counts

    @property
    def files_with_issues(self) -> list[str]:
        """Distinct files carrying at least one issue, in discovery order."""
        return list(dict.fromkeys(issue.file for issue in self.issues))

    def issues_for(self, severity: Severity) -> list[Issue]:
        return [i for i in self.issues if i.severity == severity]

    def summary(self) -> dict[str, Any]:
        return {
            "filesAnalyzed": self.stats.analyzed,
            "filesWithIssues": self.stats.with_issues,
            "totalIssues": len(self.issues),
            "issuesByType": self.issues_by_type,
            "issuesBySeverity": self.issues_by_severity,
        }

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "summary": self.summary(),
            "issues": [i.to_dict() for i in self.issues],
            "recommendations": [r.to_dict() for r in self.recommendations],
        }
        if self.extended:
            data["dependencies"] = {d.name: d.to_dict() for d in self.dependencies}
            data["routeConfigs"] = [c.to_dict() for c in self.route_configs]
        data["timestamp"] = self.timestamp
        data["basePath"] = self.base_path
        return data
