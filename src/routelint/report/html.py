"""HTML reporter — a self-contained page with the route monitor embedded."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape

from routelint.scanner.models import AnalysisResult
from routelint.scanner.route_config import diagnose

logger = logging.getLogger(__name__)

_SEVERITY_ICONS = {"high": "❌", "medium": "⚠️", "low": "ℹ️"}


def _environment() -> Environment:
    env = Environment(
        loader=PackageLoader("routelint.report", "templates"),
        autoescape=select_autoescape(enabled_extensions=("html", "j2")),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.policies["json.dumps_kwargs"] = {"sort_keys": False, "indent": 2}
    return env


def debug_data(result: AnalysisResult) -> dict[str, Any]:
    """The object exposed to the page as ``window.routeDebugData``."""
    data = result.to_dict()
    return {
        "issues": data["issues"],
        "recommendations": data["recommendations"],
        "dependencies": data.get("dependencies", {}),
        "routeConfigs": data.get("routeConfigs", []),
        "summary": data["summary"],
    }


def render_html(result: AnalysisResult, generated_at: datetime | None = None) -> str:
    """Render the report page as a string."""
    generated_at = generated_at or datetime.now()
    template = _environment().get_template("report.html.j2")
    return template.render(
        result=result,
        summary=result.summary(),
        severity_icons=_SEVERITY_ICONS,
        diagnoses=[diagnose(c) for c in result.route_configs],
        debug_data=debug_data(result),
        generated_at=generated_at.strftime("%Y-%m-%d %H:%M:%S"),
    )


def write_html_report(result: AnalysisResult, output_path: str | Path) -> Path:
    """Render the report and write it, creating parent directories."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_html(result), encoding="utf-8")
    logger.debug("Wrote HTML report to %s", output_path)
    return output_path
