"""Regex patterns and marker tokens used by the route rules."""

from __future__ import annotations

import re
from dataclasses import dataclass

from routelint.scanner.models import Severity

# Hook and component names matched as plain substrings
USE_MEMO = "useMemo"
USE_CALLBACK = "useCallback"
BLOCKED_NAVIGATION = "BlockedNavigation"
ACTIVITY_CONTEXT = "ActivityContext"
ASYNC_WRAPPER = "AsyncWrapper"
MODULE_PATH_RESOLVER = "useModulePathResolver"
ROUTES_MAP = "routes.map"

ROUTES_MAP_DESTRUCTURE = re.compile(
    r"routes\.map\s*\(\s*\(\s*\{\s*path\s*,\s*Component\s*\}\s*\)"
)
NEW_QUERY_CLIENT = re.compile(r"new\s+QueryClient\s*\(")
NEW_QUERY_CLIENT_LOOSE = re.compile(r"new\s+QueryClient")
CONTEXT_MARKER = re.compile(r"createContext|useContext|\.Provider")
ROUTES_TAG = re.compile(r"<Routes>")
ITERATION_CALL = re.compile(r"\.map\(|\.filter\(|\.reduce\(|\.forEach\(")

REACT_ROUTER_USAGE = re.compile(r"react-router|useNavigate|useLocation")
SHELL_USAGE = re.compile(r"Shell|AsyncWrapper|useModulePathResolver")
COMPONENT_DECLARATION = re.compile(
    r"export\s+(?:default\s+)?function"
    r"|export\s+(?:default\s+)?class"
    r"|const\s+\w+\s*=\s*\("
)
IMPORT_FROM = re.compile(r"""import\s+.*?\s+from\s+['"]([^'"]+)['"]""")


@dataclass(frozen=True)
class Pattern:
    """A standalone smell: a compiled regex with a fixed message."""

    regex: re.Pattern[str]
    message: str
    severity: Severity = Severity.LOW


PERFORMANCE_PATTERNS: list[Pattern] = [
    Pattern(
        regex=re.compile(r"console\.log"),
        message="Console statements found - remove for production",
    ),
    Pattern(
        regex=re.compile(r"debugger"),
        message="Debugger statements found - remove for production",
    ),
    Pattern(
        regex=re.compile(r"JSON\.parse\(JSON\.stringify"),
        message="Deep cloning with JSON methods - consider alternatives",
    ),
]
