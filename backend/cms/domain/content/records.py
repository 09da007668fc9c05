"""
Structured records: collection field schemas and item data.

A collection's schema_json is an ordered list of fields:

    [{"key": "title", "label": "Title", "type": "text", "required": True},
     {"key": "tags", "label": "Tags", "type": "multiselect", "options": ["a", "b"]}]

Item data maps field keys to values. Data may hold keys that are no longer in
the schema (the field was deleted after data existed). Those orphan keys are
reported and kept; they are never dropped and never an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from dateutil.parser import isoparse

from cms.domain.exceptions import InvalidContent

FIELD_TYPES = {
    "text",
    "richtext",
    "url",
    "image",
    "number",
    "boolean",
    "date",
    "select",
    "multiselect",
}
STRING_TYPES = {"text", "richtext", "url", "image"}
OPTION_TYPES = {"select", "multiselect"}


@dataclass
class RecordValidation:
    valid: bool
    errors: list[str] = field(default_factory=list)
    orphan_keys: list[str] = field(default_factory=list)


def validate_collection_schema(fields: Any) -> list[dict[str, Any]]:
    """Check a collection schema and return it.

    Raises:
        InvalidContent: On the first malformed field
    """
    if not isinstance(fields, list):
        raise InvalidContent("schema_json must be an array of fields")

    seen: set[str] = set()
    for index, spec in enumerate(fields):
        if not isinstance(spec, dict):
            raise InvalidContent(f"Field at index {index} must be an object")

        key = spec.get("key")
        if not isinstance(key, str) or not key:
            raise InvalidContent(f"Field at index {index} must have a non-empty key")
        if key in seen:
            raise InvalidContent(f"Duplicate field key '{key}'")
        seen.add(key)

        if not isinstance(spec.get("label"), str):
            raise InvalidContent(f"Field '{key}' must have a label")

        field_type = spec.get("type")
        if field_type not in FIELD_TYPES:
            raise InvalidContent(f"Field '{key}' has unknown type {field_type!r}")

        options = spec.get("options")
        if field_type in OPTION_TYPES:
            if not isinstance(options, list) or not options:
                raise InvalidContent(f"Field '{key}' of type {field_type} needs options")
        if options is not None and (
            not isinstance(options, list) or not all(isinstance(o, str) for o in options)
        ):
            raise InvalidContent(f"Field '{key}' options must be strings")

        if "required" in spec and not isinstance(spec["required"], bool):
            raise InvalidContent(f"Field '{key}' required flag must be a boolean")

    return fields


def _is_iso_date(value: Any) -> bool:
    if not isinstance(value, str) or not value:
        return False
    try:
        isoparse(value)
    except (ValueError, OverflowError):
        return False
    return True


def check_field_value(spec: dict[str, Any], value: Any) -> str | None:
    """Return an error message if value does not fit the field, else None."""
    key = spec["key"]
    field_type = spec["type"]
    options = spec.get("options") or []

    if field_type in STRING_TYPES:
        if not isinstance(value, str):
            return f"Field '{key}' must be a string"
    elif field_type == "number":
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            return f"Field '{key}' must be a number"
    elif field_type == "boolean":
        if not isinstance(value, bool):
            return f"Field '{key}' must be a boolean"
    elif field_type == "date":
        if not _is_iso_date(value):
            return f"Field '{key}' must be an ISO-8601 date"
    elif field_type == "select":
        if not isinstance(value, str) or value not in options:
            return f"Field '{key}' must be one of {options}"
    elif field_type == "multiselect":
        if not isinstance(value, list) or not all(
            isinstance(v, str) and v in options for v in value
        ):
            return f"Field '{key}' must be a list drawn from {options}"
    return None


def is_blank(value: Any) -> bool:
    return value is None or value == "" or value == []


def orphan_keys(fields: Iterable[dict[str, Any]], data: dict[str, Any]) -> list[str]:
    known = {spec.get("key") for spec in fields if isinstance(spec, dict)}
    return [key for key in data if key not in known]


def validate_record_data(
    fields: list[dict[str, Any]],
    data: Any,
    *,
    enforce_required: bool = False,
) -> RecordValidation:
    """Validate item data against its collection's fields.

    Blank values (None, "", []) are allowed for every field unless
    enforce_required is set, which is the case on publish.
    """
    if not isinstance(data, dict):
        return RecordValidation(valid=False, errors=["Item data must be an object"])

    errors: list[str] = []
    for spec in fields:
        key = spec["key"]
        value = data.get(key)

        if is_blank(value):
            if enforce_required and spec.get("required"):
                errors.append(f"Field '{key}' is required")
            continue

        error = check_field_value(spec, value)
        if error:
            errors.append(error)

    return RecordValidation(
        valid=not errors,
        errors=errors,
        orphan_keys=orphan_keys(fields, data),
    )
