"""
Registry evolution checks.

Compares the deployed registry with a candidate artifact before rollout.
Stored content is never migrated when the registry changes, so a change that
would leave existing blocks unrenderable or with props the editor can no
longer express is reported as breaking.

Breaking:
    - a component removed (existing blocks degrade to placeholders)
    - a prop removed, or its type changed
    - an optional prop made required
    - an enum option removed

Non-breaking:
    - components or props added
    - a component deprecated
    - version bumps, label and description changes

Example:
    >>> changes = check_registry_changes(current, candidate)
    >>> breaking = [c for c in changes if c.is_breaking]
    >>> if breaking:
    ...     raise RegistryCompatibilityError(breaking)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import List

from .registry import ComponentRegistry
from .types import ComponentStatus, ComponentTypeDefinition


class ChangeKind(Enum):
    COMPONENT_ADDED = auto()
    COMPONENT_DEPRECATED = auto()
    VERSION_CHANGED = auto()
    PROP_ADDED = auto()
    ENUM_OPTION_ADDED = auto()

    COMPONENT_REMOVED = auto()
    PROP_REMOVED = auto()
    PROP_TYPE_CHANGED = auto()
    REQUIRED_ADDED = auto()
    ENUM_OPTION_REMOVED = auto()

    @property
    def is_breaking(self) -> bool:
        return self in {
            ChangeKind.COMPONENT_REMOVED,
            ChangeKind.PROP_REMOVED,
            ChangeKind.PROP_TYPE_CHANGED,
            ChangeKind.REQUIRED_ADDED,
            ChangeKind.ENUM_OPTION_REMOVED,
        }


@dataclass
class RegistryChange:
    kind: ChangeKind
    slug: str
    message: str = ""

    @property
    def is_breaking(self) -> bool:
        return self.kind.is_breaking

    def __str__(self) -> str:
        status = "BREAKING" if self.is_breaking else "OK"
        return f"[{status}] {self.kind.name}: {self.slug} - {self.message}"


class RegistryCompatibilityError(Exception):
    def __init__(self, changes: List[RegistryChange]):
        self.changes = changes
        super().__init__(
            f"Registry check failed with {len(changes)} breaking change(s):\n"
            + "\n".join(str(c) for c in changes)
        )


def check_registry_changes(
    old: ComponentRegistry,
    new: ComponentRegistry,
) -> List[RegistryChange]:
    """List every difference between two registries, breaking or not."""
    changes: List[RegistryChange] = []

    for old_def in old.list_types():
        new_def = new.find_type(old_def.slug)
        if new_def is None:
            changes.append(RegistryChange(
                kind=ChangeKind.COMPONENT_REMOVED,
                slug=old_def.slug,
                message=f"Component '{old_def.slug}' was removed; existing blocks render as unknown",
            ))
            continue
        changes.extend(_compare_definitions(old_def, new_def))

    for new_def in new.list_types():
        if new_def.slug not in old:
            changes.append(RegistryChange(
                kind=ChangeKind.COMPONENT_ADDED,
                slug=new_def.slug,
                message=f"Component '{new_def.slug}' was added",
            ))

    return changes


def assert_registry_compatible(old: ComponentRegistry, new: ComponentRegistry) -> None:
    breaking = [c for c in check_registry_changes(old, new) if c.is_breaking]
    if breaking:
        raise RegistryCompatibilityError(breaking)


def _compare_definitions(
    old: ComponentTypeDefinition,
    new: ComponentTypeDefinition,
) -> List[RegistryChange]:
    changes: List[RegistryChange] = []
    slug = old.slug

    if old.version != new.version:
        changes.append(RegistryChange(
            kind=ChangeKind.VERSION_CHANGED,
            slug=slug,
            message=f"{old.version} -> {new.version}",
        ))

    if not old.is_deprecated and new.status == ComponentStatus.DEPRECATED:
        changes.append(RegistryChange(
            kind=ChangeKind.COMPONENT_DEPRECATED,
            slug=slug,
            message=f"Component '{slug}' is now deprecated",
        ))

    for old_prop in old.prop_schema:
        new_prop = new.get_prop(old_prop.name)
        if new_prop is None:
            changes.append(RegistryChange(
                kind=ChangeKind.PROP_REMOVED,
                slug=slug,
                message=f"Prop '{old_prop.name}' was removed",
            ))
            continue

        if new_prop.type != old_prop.type:
            changes.append(RegistryChange(
                kind=ChangeKind.PROP_TYPE_CHANGED,
                slug=slug,
                message=f"Prop '{old_prop.name}' changed type {old_prop.type.value} -> {new_prop.type.value}",
            ))

        if new_prop.required and not old_prop.required:
            changes.append(RegistryChange(
                kind=ChangeKind.REQUIRED_ADDED,
                slug=slug,
                message=f"Prop '{old_prop.name}' became required",
            ))

        old_options = set(old_prop.options or ())
        new_options = set(new_prop.options or ())
        for option in sorted(old_options - new_options):
            changes.append(RegistryChange(
                kind=ChangeKind.ENUM_OPTION_REMOVED,
                slug=slug,
                message=f"Prop '{old_prop.name}' lost option '{option}'",
            ))
        for option in sorted(new_options - old_options):
            changes.append(RegistryChange(
                kind=ChangeKind.ENUM_OPTION_ADDED,
                slug=slug,
                message=f"Prop '{old_prop.name}' gained option '{option}'",
            ))

    for new_prop in new.prop_schema:
        if old.get_prop(new_prop.name) is None:
            changes.append(RegistryChange(
                kind=ChangeKind.PROP_ADDED,
                slug=slug,
                message=f"Prop '{new_prop.name}' was added",
            ))

    return changes
