"""
Renderer configuration built from the component registry.

The UI layer owns the concrete render functions and hands them over as a
slug -> binding mapping. This module never constructs bindings; it joins them
with the registry into the configuration the editor and the renderer consume.

Invariants:
    - deprecated components never appear in the configuration
    - a missing binding skips that component (logged), never raises
    - serialized array/object values never raise: bad JSON becomes [] / {}
"""

from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from .registry import ComponentRegistry
from .types import ComponentTypeDefinition, PropField, PropType

logger = logging.getLogger(__name__)

RenderBinding = Callable[..., Any]


@dataclass(frozen=True)
class RendererComponent:
    slug: str
    label: str
    fields: dict[str, dict[str, Any]]
    default_props: dict[str, Any]
    render: RenderBinding


@dataclass
class RendererConfig:
    components: dict[str, RendererComponent] = field(default_factory=dict)
    categories: dict[str, list[str]] = field(default_factory=dict)
    skipped: list[str] = field(default_factory=list)

    def __contains__(self, slug: object) -> bool:
        return slug in self.components


@dataclass(frozen=True)
class BindingReport:
    missing: list[str]
    unknown: list[str]

    @property
    def ok(self) -> bool:
        return not self.missing and not self.unknown


def empty_value_for(prop: PropField) -> Any:
    return [] if prop.type == PropType.ARRAY else {}


def parse_structured_value(prop: PropField, value: Any, *, component: str = "?") -> Any:
    """Return the native value of an array/object prop.

    Editors store these props as JSON text. A value that fails to parse, or
    parses to the wrong shape, degrades to an empty list/dict.
    """
    if not prop.type.is_structured or not isinstance(value, str):
        return value

    expected = list if prop.type == PropType.ARRAY else dict
    try:
        parsed = json.loads(value)
    except (TypeError, ValueError):
        logger.warning(
            "Invalid JSON for %s prop '%s' on component '%s'; using empty default",
            prop.type.value,
            prop.name,
            component,
        )
        return empty_value_for(prop)

    if not isinstance(parsed, expected):
        logger.warning(
            "Prop '%s' on component '%s' is not a JSON %s; using empty default",
            prop.name,
            component,
            prop.type.value,
        )
        return empty_value_for(prop)
    return parsed


def map_prop_field(prop: PropField) -> dict[str, Any]:
    """Editor field descriptor for a prop."""
    label = prop.label or prop.name

    if prop.type == PropType.RICHTEXT:
        return {"type": "textarea", "label": label}

    if prop.type == PropType.NUMBER:
        descriptor: dict[str, Any] = {"type": "number", "label": label}
        if prop.min is not None:
            descriptor["min"] = prop.min
        if prop.max is not None:
            descriptor["max"] = prop.max
        return descriptor

    if prop.type == PropType.BOOLEAN:
        return {
            "type": "radio",
            "label": label,
            "options": [
                {"label": "Yes", "value": True},
                {"label": "No", "value": False},
            ],
        }

    if prop.type == PropType.ENUM:
        return {
            "type": "select",
            "label": label,
            "options": [
                {"label": opt[:1].upper() + opt[1:], "value": opt}
                for opt in (prop.options or ())
            ],
        }

    if prop.type.is_structured:
        return {"type": "textarea", "label": f"{label} (JSON)"}

    # string, image, color
    return {"type": "text", "label": label}


def build_default_props(definition: ComponentTypeDefinition) -> dict[str, Any]:
    """Merge the default preset with prop-level defaults.

    Preset values win; a field's own default only fills keys the preset
    leaves out. Every value is a fresh copy, so callers may edit the result freely.
    """
    defaults: dict[str, Any] = {}

    for key, value in definition.default_preset.props.items():
        prop = definition.get_prop(key)
        if prop is not None:
            value = parse_structured_value(prop, value, component=definition.slug)
        defaults[key] = copy.deepcopy(value)

    for prop in definition.prop_schema:
        if prop.name in defaults or not prop.has_default:
            continue
        defaults[prop.name] = copy.deepcopy(
            parse_structured_value(prop, prop.default, component=definition.slug)
        )

    return defaults


def validate_bindings(
    registry: ComponentRegistry,
    bindings: Mapping[str, RenderBinding],
) -> BindingReport:
    """Startup check of the slug -> binding table against the registry."""
    missing = [d.slug for d in registry.available_types() if d.slug not in bindings]
    unknown = [slug for slug in bindings if slug not in registry]

    for slug in missing:
        logger.warning("No render binding for component '%s'", slug)
    for slug in unknown:
        logger.warning("Render binding '%s' has no registry entry", slug)

    return BindingReport(missing=missing, unknown=unknown)


def to_renderer_config(
    registry: ComponentRegistry,
    bindings: Mapping[str, RenderBinding],
) -> RendererConfig:
    config = RendererConfig()

    for definition in registry.list_types():
        if definition.is_deprecated:
            continue

        render = bindings.get(definition.slug)
        if render is None:
            logger.warning(
                "Skipping component '%s': no render binding supplied", definition.slug
            )
            config.skipped.append(definition.slug)
            continue

        config.components[definition.slug] = RendererComponent(
            slug=definition.slug,
            label=definition.name,
            fields={p.name: map_prop_field(p) for p in definition.prop_schema},
            default_props=build_default_props(definition),
            render=render,
        )
        config.categories.setdefault(definition.category, []).append(definition.slug)

    return config
