"""
Compatibility checks between stored content and the current registry.

Everything here is advisory. Warnings are shown to editors as a banner and
are never used to reject a save or publish: the registry evolves on its own
schedule and historical content has to keep loading.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from cms.registry.registry import ComponentRegistry

from .content.builder import BUILDER_SCHEMA_VERSION, is_builder_content, resolve_content
from .content.records import check_field_value, is_blank, orphan_keys


@dataclass
class CompatibilityReport:
    valid: bool
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "warnings": list(self.warnings)}


def _report(warnings: list[str]) -> CompatibilityReport:
    return CompatibilityReport(valid=not warnings, warnings=warnings)


def check_compatibility(content: Any, available_slugs: Iterable[str]) -> CompatibilityReport:
    available = set(available_slugs)
    warnings: list[str] = []

    for block in resolve_content(content):
        block_type = block.get("type")
        if block_type not in available:
            warnings.append(f'Component "{block_type}" is not in the current registry')

    if is_builder_content(content):
        schema_version = content["schemaVersion"]
        if schema_version > BUILDER_SCHEMA_VERSION:
            warnings.append(
                f"Content uses schema version {schema_version}, "
                f"current is {BUILDER_SCHEMA_VERSION}"
            )

    return _report(warnings)


def check_against_registry(content: Any, registry: ComponentRegistry) -> CompatibilityReport:
    """check_compatibility plus notices for deprecated components in use."""
    report = check_compatibility(content, registry.slugs())

    notified: set[str] = set()
    for block in resolve_content(content):
        definition = registry.find_type(block.get("type"))
        if definition is None or not definition.is_deprecated:
            continue
        if definition.slug in notified:
            continue
        notified.add(definition.slug)
        report.warnings.append(f'Component "{definition.slug}" is deprecated')

    return _report(report.warnings)


def check_record_compatibility(fields: list[dict[str, Any]], data: Any) -> CompatibilityReport:
    """Read-time diagnostics for stored item data."""
    if not isinstance(data, dict):
        return _report(["Item data is not an object"])

    warnings: list[str] = []
    for key in orphan_keys(fields, data):
        warnings.append(f'Field "{key}" is no longer in the collection schema')

    for spec in fields:
        value = data.get(spec.get("key"))
        if is_blank(value):
            continue
        error = check_field_value(spec, value)
        if error:
            warnings.append(error)

    return _report(warnings)
