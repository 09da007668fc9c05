"""
Builder content envelope.

Stored page content looks like:

    {"schemaVersion": 1,
     "data": {"content": [{"type": "hero", "props": {"id": "hero-1", ...}}],
              "root": {...},
              "zones": {"hero-1:left": [...]}}}

Two checks exist on purpose:
    - validate_builder_content() is strict and runs before anything is written
    - is_builder_content() is a loose guard for read paths, so content saved
      under older rules still renders
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

BUILDER_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    content: dict[str, Any] | None = None
    error: str | None = None


def _invalid(error: str) -> ValidationResult:
    return ValidationResult(valid=False, content=None, error=error)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def create_empty_builder_content() -> dict[str, Any]:
    return {
        "schemaVersion": BUILDER_SCHEMA_VERSION,
        "data": {
            "content": [],
            "root": {},
        },
    }


def is_builder_content(value: Any) -> bool:
    if not isinstance(value, dict):
        return False
    return _is_number(value.get("schemaVersion")) and "data" in value


def _block_error(item: Any) -> bool:
    if not isinstance(item, dict) or not isinstance(item.get("type"), str):
        return True
    props = item.get("props")
    return not isinstance(props, dict) or not isinstance(props.get("id"), str)


def validate_builder_content(raw: Any) -> ValidationResult:
    """Strict structural validation, stopping at the first failure."""
    if not isinstance(raw, dict):
        return _invalid("Content is not an object")

    if not is_builder_content(raw):
        return _invalid("Missing schemaVersion or data")

    schema_version = raw["schemaVersion"]
    if not isinstance(schema_version, int) or isinstance(schema_version, bool):
        return _invalid("schemaVersion must be an integer")
    if schema_version > BUILDER_SCHEMA_VERSION:
        return _invalid(
            f"Schema version {schema_version} is newer than supported version "
            f"{BUILDER_SCHEMA_VERSION}"
        )

    data = raw["data"]
    if not isinstance(data, dict):
        return _invalid("data must be an object")

    content = data.get("content")
    if not isinstance(content, list):
        return _invalid("data.content must be an array")

    seen_ids: set[str] = set()
    for index, item in enumerate(content):
        if _block_error(item):
            return _invalid(
                f"Invalid content item at index {index}: must have type (string) "
                f"and props.id (string)"
            )
        block_id = item["props"]["id"]
        if block_id in seen_ids:
            return _invalid(f"Duplicate block id '{block_id}' at index {index}")
        seen_ids.add(block_id)

    if "root" in data and not isinstance(data["root"], dict):
        return _invalid("data.root must be an object if present")

    if "zones" in data:
        zones = data["zones"]
        if not isinstance(zones, dict):
            return _invalid("data.zones must be an object if present")
        for zone_key, zone_items in zones.items():
            if not isinstance(zone_items, list):
                return _invalid(f"Zone '{zone_key}' must be an array")
            for index, item in enumerate(zone_items):
                if _block_error(item):
                    return _invalid(
                        f"Invalid content item at index {index} of zone '{zone_key}': "
                        f"must have type (string) and props.id (string)"
                    )
                block_id = item["props"]["id"]
                if block_id in seen_ids:
                    return _invalid(
                        f"Duplicate block id '{block_id}' at index {index} of zone '{zone_key}'"
                    )
                seen_ids.add(block_id)

    return ValidationResult(valid=True, content=raw)


def resolve_content(raw: Any) -> list[dict[str, Any]]:
    """Flatten stored content into its ordered list of top-level blocks.

    Accepts the envelope as well as the pre-envelope {"content": [...]}
    shape. Anything else resolves to an empty list.
    """
    if is_builder_content(raw):
        data = raw["data"]
        blocks = data.get("content") if isinstance(data, dict) else None
    elif isinstance(raw, dict) and "content" in raw:
        blocks = raw["content"]
    else:
        return []

    if not isinstance(blocks, list):
        return []
    return [block for block in blocks if isinstance(block, dict)]
