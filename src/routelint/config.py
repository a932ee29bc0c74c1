"""Global configuration — env vars and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_OUTPUT_DIR = Path("docs")
DEFAULT_REPORT_NAME = "index.html"


def _default_output_path() -> Path:
    return DEFAULT_OUTPUT_DIR / DEFAULT_REPORT_NAME


@dataclass
class RouteLintConfig:
    """Application-wide configuration."""

    output_path: Path = field(default_factory=_default_output_path)

    @classmethod
    def load(cls) -> RouteLintConfig:
        """Load config from environment variables with built-in defaults."""
        config = cls()

        env_output = os.environ.get("ROUTELINT_OUTPUT")
        if env_output:
            config.output_path = Path(env_output)

        return config
