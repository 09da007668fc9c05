"""
Component registry.

The ComponentRegistry is the read-only catalog of builder component types.
It is built once per process (see load_registry, called from create_app) and
never changes afterwards: shipping a new or changed component means deploying
a new registry artifact.

Invariants:
    - slugs are unique
    - the registry exposes no mutation API
    - deprecated entries stay resolvable through get_type() but are excluded
      from available_types() and categories()
    - fingerprint changes whenever any definition changes
"""

from __future__ import annotations

import hashlib
import json
import logging
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from cms.domain.exceptions import ResourceNotFound

from .types import ComponentTypeDefinition

logger = logging.getLogger(__name__)


class ComponentNotFound(ResourceNotFound):
    entity = "Component"


class RegistryLoadError(Exception):
    """Raised when a registry artifact cannot be turned into a registry."""


class DuplicateComponentError(RegistryLoadError):
    """Raised when two definitions share a slug."""


class ComponentRegistry:
    """Immutable slug -> ComponentTypeDefinition catalog.

    Example:
        >>> registry = ComponentRegistry([hero, faq])
        >>> registry.get_type("hero").version
        '1.0.0'
        >>> [c.slug for c in registry.available_types()]
        ['hero', 'faq']
    """

    def __init__(self, definitions: Iterable[ComponentTypeDefinition]) -> None:
        by_slug: dict[str, ComponentTypeDefinition] = {}
        for definition in definitions:
            if definition.slug in by_slug:
                raise DuplicateComponentError(
                    f"Component slug '{definition.slug}' is registered twice"
                )
            by_slug[definition.slug] = definition

        self._types = MappingProxyType(by_slug)
        self._ordered = tuple(by_slug.values())
        self._fingerprint = self._compute_fingerprint()

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, slug: object) -> bool:
        return slug in self._types

    @property
    def fingerprint(self) -> str:
        return self._fingerprint

    def list_types(self) -> list[ComponentTypeDefinition]:
        """All definitions, deprecated included, in catalog order."""
        return list(self._ordered)

    def available_types(self) -> list[ComponentTypeDefinition]:
        """Definitions an editor may add to new content."""
        return [d for d in self._ordered if not d.is_deprecated]

    def get_type(self, slug: str) -> ComponentTypeDefinition:
        """Resolve a slug.

        Raises:
            ComponentNotFound: If no entry has this slug
        """
        definition = self._types.get(slug)
        if definition is None:
            raise ComponentNotFound(slug)
        return definition

    def find_type(self, slug: Any) -> ComponentTypeDefinition | None:
        if not isinstance(slug, str):
            return None
        return self._types.get(slug)

    def slugs(self) -> list[str]:
        """Every resolvable slug, deprecated included."""
        return list(self._types.keys())

    def categories(self) -> dict[str, list[str]]:
        categories: dict[str, list[str]] = {}
        for definition in self.available_types():
            categories.setdefault(definition.category, []).append(definition.slug)
        return categories

    def _compute_fingerprint(self) -> str:
        canonical = json.dumps(
            [d.to_dict() for d in self._ordered],
            sort_keys=True,
            separators=(",", ":"),
            default=str,
        )
        return "sha256:" + hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def registry_from_entries(entries: Iterable[Mapping[str, Any]]) -> ComponentRegistry:
    definitions = []
    for index, entry in enumerate(entries):
        try:
            definitions.append(ComponentTypeDefinition.from_dict(dict(entry)))
        except (KeyError, TypeError, ValueError) as exc:
            raise RegistryLoadError(f"Invalid registry entry at index {index}: {exc}") from exc
    return ComponentRegistry(definitions)


def load_registry(path: str | None = None) -> ComponentRegistry:
    """Load the process-wide registry.

    Args:
        path: JSON artifact holding a list of component entries. The built-in
            catalog is used when no path is given.

    Raises:
        RegistryLoadError: If the artifact is unreadable or invalid
    """
    if path is None:
        from .catalog import BUILTIN_COMPONENTS

        registry = registry_from_entries(BUILTIN_COMPONENTS)
        logger.info(
            "Loaded built-in component registry: %d types (%s)",
            len(registry),
            registry.fingerprint,
        )
        return registry

    try:
        with open(path, encoding="utf-8") as fh:
            entries = json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        raise RegistryLoadError(f"Cannot read registry artifact {path}: {exc}") from exc

    if isinstance(entries, dict):
        entries = entries.get("components", [])
    if not isinstance(entries, list):
        raise RegistryLoadError(f"Registry artifact {path} must hold a list of components")

    registry = registry_from_entries(entries)
    logger.info(
        "Loaded component registry from %s: %d types (%s)",
        path,
        len(registry),
        registry.fingerprint,
    )
    return registry
