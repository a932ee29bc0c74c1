"""Load the known-library table and mark which libraries route files use."""

from __future__ import annotations

import importlib.resources
from collections.abc import Iterable
from dataclasses import dataclass, fields, replace

import yaml

from routelint.scanner.models import DependencyRecord, RouteFileConfig

_DATA_PACKAGE = "routelint.scanner.data"
_DEFAULT_TABLE = "dependencies.yaml"

_DETECT_FLAGS = {
    f.name
    for f in fields(RouteFileConfig)
    if f.name.startswith("has_")
}


@dataclass(frozen=True)
class DependencySpec:
    """One entry of the static table plus the flag used to detect it."""

    record: DependencyRecord
    detect: str


def load_dependency_table(text: str) -> list[DependencySpec]:
    """Parse a YAML dependency table."""
    data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError("Dependency table YAML must be a mapping")

    specs: list[DependencySpec] = []
    for entry in data.get("dependencies", []):
        if not isinstance(entry, dict):
            raise ValueError(f"Dependency entry must be a mapping, got {entry!r}")
        if not entry.get("name"):
            raise ValueError(f"Dependency entry is missing a name: {entry!r}")
        detect = entry.get("detect", "")
        if detect not in _DETECT_FLAGS:
            raise ValueError(
                f"Unknown detect flag {detect!r} for dependency {entry.get('name')!r}"
            )
        shell_patched = entry.get("shell_patched")
        specs.append(
            DependencySpec(
                record=DependencyRecord(
                    name=entry["name"],
                    version=str(entry.get("version", "")),
                    critical=bool(entry.get("critical", False)),
                    shell_patched=None if shell_patched is None else bool(shell_patched),
                    patched_components=tuple(entry.get("patched_components", ())),
                    components=tuple(entry.get("components", ())),
                    issue=entry.get("issue"),
                ),
                detect=detect,
            )
        )
    return specs


def default_dependency_table() -> list[DependencySpec]:
    """Load the table bundled with the package."""
    resource = importlib.resources.files(_DATA_PACKAGE).joinpath(_DEFAULT_TABLE)
    return load_dependency_table(resource.read_text(encoding="utf-8"))


def map_dependencies(
    configs: Iterable[RouteFileConfig],
    table: list[DependencySpec] | None = None,
) -> list[DependencyRecord]:
    """Return the table's records with ``detected`` set from the route configs."""
    configs = list(configs)
    table = table if table is not None else default_dependency_table()

    records: list[DependencyRecord] = []
    for spec in table:
        detected = any(getattr(c, spec.detect) for c in configs)
        records.append(replace(spec.record, detected=detected))
    return records
