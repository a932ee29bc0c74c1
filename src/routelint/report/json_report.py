"""JSON reporter."""

from __future__ import annotations

import json

from routelint.scanner.models import AnalysisResult


def render_json(result: AnalysisResult) -> str:
    """Serialize the full result as a pretty-printed JSON document."""
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
