"""
Type definitions for the component registry.

A ComponentTypeDefinition describes one builder component: its slug (the join
key used by every ContentBlock), its version, lifecycle status and the schema
of props the editor exposes for it.

Invariants:
    - slug is immutable once published; content references components by slug only
    - version is a semver string
    - prop names are unique within one component
    - enum props declare their options

Example:
    >>> hero = ComponentTypeDefinition.from_dict({
    ...     "slug": "hero",
    ...     "name": "Hero",
    ...     "version": "1.0.0",
    ...     "status": "stable",
    ...     "propSchema": [{"name": "headline", "type": "string", "label": "Headline"}],
    ...     "defaultPreset": {"name": "Default", "props": {"headline": "Hello"}},
    ... })
"""

from __future__ import annotations

import copy
import re
from dataclasses import dataclass
from dataclasses import field as dataclass_field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

SEMVER_PATTERN = re.compile(r"^\d+\.\d+\.\d+(?:-[0-9A-Za-z.-]+)?(?:\+[0-9A-Za-z.-]+)?$")


class ComponentStatus(Enum):
    """Lifecycle status of a registry entry."""

    STABLE = "stable"
    BETA = "beta"
    EXPERIMENTAL = "experimental"
    DEPRECATED = "deprecated"


class PropType(Enum):
    """Prop value kinds understood by the editor."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ENUM = "enum"
    RICHTEXT = "richtext"
    IMAGE = "image"
    COLOR = "color"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def is_structured(self) -> bool:
        """Array and object props may arrive serialized as JSON strings."""
        return self in (PropType.ARRAY, PropType.OBJECT)

    @classmethod
    def from_str(cls, value: str) -> PropType:
        for kind in cls:
            if kind.value == value:
                return kind
        valid = [k.value for k in cls]
        raise ValueError(f"Invalid prop type '{value}'. Valid types: {valid}")


@dataclass(frozen=True)
class PropField:
    """One entry of a component's prop schema."""

    name: str
    type: PropType
    label: str = ""
    required: bool = False
    default: Any = None
    options: tuple[str, ...] | None = None
    min: float | None = None
    max: float | None = None
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Prop name cannot be empty")
        object.__setattr__(self, "default", copy.deepcopy(self.default))
        if self.type == PropType.ENUM and not self.options:
            raise ValueError(f"options required for enum prop '{self.name}'")
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min > max for prop '{self.name}'")

    @property
    def has_default(self) -> bool:
        return self.default is not None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "type": self.type.value,
            "label": self.label or self.name,
            "required": self.required,
        }
        if self.default is not None:
            data["default"] = copy.deepcopy(self.default)
        if self.options is not None:
            data["options"] = list(self.options)
        if self.min is not None:
            data["min"] = self.min
        if self.max is not None:
            data["max"] = self.max
        if self.description:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PropField:
        options = data.get("options")
        return cls(
            name=data["name"],
            type=PropType.from_str(data["type"]),
            label=data.get("label", ""),
            required=bool(data.get("required", False)),
            default=data.get("default"),
            options=tuple(options) if options is not None else None,
            min=data.get("min"),
            max=data.get("max"),
            description=data.get("description", ""),
        )


@dataclass(frozen=True)
class Preset:
    """A named set of prop values."""

    name: str
    props: Mapping[str, Any] = dataclass_field(default_factory=dict)
    description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "props", MappingProxyType(copy.deepcopy(dict(self.props))))

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "props": copy.deepcopy(dict(self.props)),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Preset:
        return cls(
            name=data.get("name", "Default"),
            props=dict(data.get("props") or {}),
            description=data.get("description", ""),
        )


@dataclass(frozen=True)
class ComponentTypeDefinition:
    """A registry entry for one builder component.

    Attributes:
        slug: Stable identifier referenced by ContentBlock.type
        name: Display name
        version: Semver string of this component's schema
        status: Lifecycle status; deprecated entries stay resolvable
        prop_schema: Ordered prop definitions
        default_preset: Canonical default prop values
        additional_presets: Other named prop sets
    """

    slug: str
    name: str
    version: str
    status: ComponentStatus = ComponentStatus.STABLE
    category: str = "content"
    description: str = ""
    prop_schema: tuple[PropField, ...] = ()
    default_preset: Preset = dataclass_field(default_factory=lambda: Preset(name="Default"))
    additional_presets: tuple[Preset, ...] = ()
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.slug:
            raise ValueError("Component slug cannot be empty")
        if not SEMVER_PATTERN.match(self.version):
            raise ValueError(
                f"Component '{self.slug}' has invalid version '{self.version}'"
            )
        seen: set[str] = set()
        for prop in self.prop_schema:
            if prop.name in seen:
                raise ValueError(
                    f"Component '{self.slug}' declares prop '{prop.name}' twice"
                )
            seen.add(prop.name)

    @property
    def is_deprecated(self) -> bool:
        return self.status == ComponentStatus.DEPRECATED

    @property
    def presets(self) -> tuple[Preset, ...]:
        return (self.default_preset,) + self.additional_presets

    def get_prop(self, name: str) -> PropField | None:
        for prop in self.prop_schema:
            if prop.name == name:
                return prop
        return None

    def summary(self) -> dict[str, Any]:
        return {
            "slug": self.slug,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "version": self.version,
            "status": self.status.value,
            "tags": list(self.tags),
            "prop_count": len(self.prop_schema),
            "preset_count": len(self.presets),
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "slug": self.slug,
            "name": self.name,
            "version": self.version,
            "status": self.status.value,
            "category": self.category,
            "description": self.description,
            "tags": list(self.tags),
            "prop_schema": [p.to_dict() for p in self.prop_schema],
            "default_preset": self.default_preset.to_dict(),
            "additional_presets": [p.to_dict() for p in self.additional_presets],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ComponentTypeDefinition:
        """Build a definition from a registry artifact entry.

        Both the camelCase artifact keys (propSchema, defaultPreset,
        additionalPresets) and their snake_case forms are accepted.
        """
        prop_schema = data.get("propSchema", data.get("prop_schema", []))
        default_preset = data.get("defaultPreset", data.get("default_preset"))
        additional = data.get("additionalPresets", data.get("additional_presets")) or []

        return cls(
            slug=data["slug"],
            name=data.get("name", data["slug"]),
            version=data.get("version", "1.0.0"),
            status=ComponentStatus(data.get("status", "stable")),
            category=data.get("category", "content"),
            description=data.get("description", ""),
            prop_schema=tuple(PropField.from_dict(p) for p in prop_schema),
            default_preset=Preset.from_dict(default_preset) if default_preset else Preset(name="Default"),
            additional_presets=tuple(Preset.from_dict(p) for p in additional),
            tags=tuple(data.get("tags", ())),
        )
