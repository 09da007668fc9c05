"""
Component registry: the read-only catalog of builder component types.

Loaded once in create_app and reachable from request code through
get_registry().
"""

from flask import current_app

from .registry import (
    ComponentNotFound,
    ComponentRegistry,
    DuplicateComponentError,
    RegistryLoadError,
    load_registry,
    registry_from_entries,
)
from .types import ComponentStatus, ComponentTypeDefinition, Preset, PropField, PropType

EXTENSION_KEY = "component_registry"


def init_registry(app, registry=None):
    if registry is None:
        registry = load_registry(app.config.get("COMPONENT_REGISTRY_PATH"))
    app.extensions[EXTENSION_KEY] = registry
    return registry


def get_registry() -> ComponentRegistry:
    return current_app.extensions[EXTENSION_KEY]


__all__ = [
    "ComponentNotFound",
    "ComponentRegistry",
    "ComponentStatus",
    "ComponentTypeDefinition",
    "DuplicateComponentError",
    "Preset",
    "PropField",
    "PropType",
    "RegistryLoadError",
    "get_registry",
    "init_registry",
    "load_registry",
    "registry_from_entries",
]
