"""Tests for the route rules."""

from __future__ import annotations

from dataclasses import fields

from routelint.scanner import rules
from routelint.scanner.models import IssueType, Severity
from routelint.scanner.patterns import Pattern
from routelint.scanner.rules import run_rules

ROUTES_MAP = "routes.map(({ path, Component }) => <Route path={path} />)"


def _types(issues):
    return [i.type for i in issues]


class TestDynamicRouteGeneration:
    def test_flags_destructuring_map(self):
        outcome = rules.check_dynamic_route_generation(ROUTES_MAP, "AppRoutes.tsx")
        assert len(outcome.issues) == 1
        issue = outcome.issues[0]
        assert issue.type == IssueType.DYNAMIC_ROUTE_GENERATION
        assert issue.severity == Severity.HIGH
        assert issue.pattern == "routes.map(({ path, Component })"
        assert len(outcome.recommendations) == 1
        assert "useMemo" in outcome.recommendations[0].message

    def test_whitespace_variants_match(self):
        code = "routes.map ( (  {path ,Component}  ) )"
        outcome = rules.check_dynamic_route_generation(code, "a.tsx")
        assert len(outcome.issues) == 1

    def test_one_issue_for_many_matches(self):
        code = f"{ROUTES_MAP}\n{ROUTES_MAP}\n"
        outcome = rules.check_dynamic_route_generation(code, "a.tsx")
        assert len(outcome.issues) == 1

    def test_use_memo_suppresses_recommendation_only(self):
        code = f"const memo = useMemo(() => routes, []);\n{ROUTES_MAP}"
        outcome = rules.check_dynamic_route_generation(code, "a.tsx")
        assert len(outcome.issues) == 1
        assert outcome.recommendations == ()

    def test_other_identifiers_ignored(self):
        outcome = rules.check_dynamic_route_generation(
            "appRoutes.map(({ path, Component }) => null)", "a.tsx"
        )
        # "appRoutes" still ends in "Routes", but the regex is case-sensitive
        assert outcome.issues == ()


class TestQueryClientCreation:
    def test_counts_every_construction(self):
        code = "const a = new QueryClient();\nconst b = new QueryClient({});\n"
        outcome = rules.check_query_client_creation(code, "routes.ts")
        assert len(outcome.issues) == 1
        assert outcome.issues[0].count == 2
        assert outcome.issues[0].severity == Severity.MEDIUM
        assert len(outcome.recommendations) == 1

    def test_no_construction(self):
        outcome = rules.check_query_client_creation("useQueryClient()", "routes.ts")
        assert outcome.issues == ()
        assert outcome.recommendations == ()


class TestContextPlacement:
    def test_context_before_routes(self):
        code = "const Ctx = createContext(null);\n<Routes><Route /></Routes>"
        outcome = rules.check_context_placement(code, "routes.tsx")
        assert _types(outcome.issues) == [IssueType.CONTEXT_PLACEMENT]
        assert outcome.issues[0].severity == Severity.HIGH
        assert len(outcome.recommendations) == 1

    def test_routes_before_context(self):
        code = "<Routes>\n<Ctx.Provider>\n</Routes>"
        outcome = rules.check_context_placement(code, "routes.tsx")
        assert outcome.issues == ()

    def test_only_first_occurrences_are_compared(self):
        code = (
            "<Routes>\n"
            + "useContext(A);\n" * 20
            + "<Routes>\n"
            + "useContext(B);\n"
        )
        outcome = rules.check_context_placement(code, "routes.tsx")
        assert outcome.issues == ()

    def test_requires_both_markers(self):
        assert rules.check_context_placement("useContext(A)", "r.tsx").issues == ()
        assert rules.check_context_placement("<Routes></Routes>", "r.tsx").issues == ()


class TestMarkers:
    def test_blocked_navigation(self):
        outcome = rules.check_blocked_navigation("<BlockedNavigation when />", "r.tsx")
        assert _types(outcome.issues) == [IssueType.BLOCKED_NAVIGATION]
        assert len(outcome.recommendations) == 1

    def test_activity_context(self):
        outcome = rules.check_activity_context("useContext(ActivityContext)", "r.tsx")
        assert _types(outcome.issues) == [IssueType.ACTIVITY_CONTEXT]
        assert outcome.issues[0].severity == Severity.MEDIUM


class TestMemoization:
    def test_iteration_without_hooks(self):
        outcome = rules.check_memoization("items.filter(Boolean)", "r.tsx")
        assert _types(outcome.issues) == [IssueType.MISSING_MEMOIZATION]
        assert outcome.issues[0].severity == Severity.LOW

    def test_either_hook_silences(self):
        assert rules.check_memoization("x.map(f); useMemo", "r.tsx").issues == ()
        assert rules.check_memoization("x.map(f); useCallback", "r.tsx").issues == ()

    def test_no_iteration(self):
        assert rules.check_memoization("const x = 1;", "r.tsx").issues == ()


class TestAsyncWrapper:
    def test_single_wrapper_is_fine(self):
        outcome = rules.check_async_wrapper("<AsyncWrapper />", "r.tsx")
        assert outcome.issues == ()

    def test_multiple_wrappers(self):
        code = "<AsyncWrapper><AsyncWrapper /></AsyncWrapper>"
        outcome = rules.check_async_wrapper(code, "r.tsx")
        assert outcome.issues[0].count == 3
        assert outcome.recommendations == ()

    def test_extended_mode_recommends_consolidation(self):
        code = "<AsyncWrapper><AsyncWrapper /></AsyncWrapper>"
        outcome = rules.check_async_wrapper(code, "r.tsx", extended=True)
        assert len(outcome.recommendations) == 1
        assert "Consolidate" in outcome.recommendations[0].message


class TestShellPatterns:
    def test_missing_either_hook(self):
        code = "useModulePathResolver(); useMemo();"
        outcome = rules.check_shell_patterns(code, "r.tsx")
        assert _types(outcome.issues) == [IssueType.UNMEMOIZED_SHELL_HOOKS]
        assert outcome.recommendations == ()

    def test_both_hooks_present(self):
        code = "useModulePathResolver(); useMemo(); useCallback();"
        assert rules.check_shell_patterns(code, "r.tsx").issues == ()


class TestPerformancePatterns:
    def test_each_smell_reported_once(self):
        code = (
            "console.log(a); console.log(b);\n"
            "debugger;\n"
            "const copy = JSON.parse(JSON.stringify(obj));\n"
        )
        outcome = rules.check_performance_patterns(code, "r.tsx")
        messages = [i.message for i in outcome.issues]
        assert len(messages) == 3
        assert messages[0].startswith("Console statements")
        assert messages[1].startswith("Debugger statements")
        assert messages[2].startswith("Deep cloning")
        assert all(i.severity == Severity.LOW for i in outcome.issues)

    def test_clean_file(self):
        assert rules.check_performance_patterns("const a = 1;", "r.tsx").issues == ()

    def test_issue_dict_has_no_pattern_key(self):
        outcome = rules.check_performance_patterns("debugger;", "r.tsx")
        assert "pattern" not in outcome.issues[0].to_dict()
        assert {f.name for f in fields(Pattern)} == {"regex", "message", "severity"}


class TestRunRules:
    def test_rules_accumulate_in_fixed_order(self):
        code = (
            "const Ctx = createContext(null);\n"
            "const client = new QueryClient();\n"
            "<Routes>{routes.map(({ path, Component }) => null)}</Routes>\n"
            "<BlockedNavigation /> ActivityContext\n"
            "debugger;\n"
        )
        issues, recommendations = run_rules(code, "AppRoutes.tsx")
        assert _types(issues) == [
            IssueType.DYNAMIC_ROUTE_GENERATION,
            IssueType.QUERY_CLIENT_CREATION,
            IssueType.CONTEXT_PLACEMENT,
            IssueType.BLOCKED_NAVIGATION,
            IssueType.ACTIVITY_CONTEXT,
            IssueType.MISSING_MEMOIZATION,
            IssueType.PERFORMANCE_ISSUE,
        ]
        assert len(recommendations) == 6
        assert all(i.file == "AppRoutes.tsx" for i in issues)

    def test_deterministic(self):
        code = f"{ROUTES_MAP}\nnew QueryClient(); console.log(1);"
        assert run_rules(code, "a.tsx") == run_rules(code, "a.tsx")

    def test_every_issue_has_a_fix(self):
        code = f"{ROUTES_MAP}\n<AsyncWrapper/><AsyncWrapper/> useModulePathResolver"
        issues, _ = run_rules(code, "a.tsx")
        assert issues
        assert all(i.fix for i in issues)
