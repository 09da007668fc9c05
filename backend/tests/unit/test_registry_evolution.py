import copy

import pytest

from cms.registry import registry_from_entries
from cms.registry.catalog import BUILTIN_COMPONENTS
from cms.registry.evolution import (
    ChangeKind,
    RegistryCompatibilityError,
    assert_registry_compatible,
    check_registry_changes,
)


def _entries():
    return copy.deepcopy(BUILTIN_COMPONENTS)


def _find(entries, slug):
    return next(e for e in entries if e["slug"] == slug)


def _kinds(changes):
    return {c.kind for c in changes}


def test_identical_registries_have_no_changes():
    old = registry_from_entries(_entries())
    new = registry_from_entries(_entries())

    assert check_registry_changes(old, new) == []
    assert_registry_compatible(old, new)


def test_additions_and_deprecations_are_not_breaking():
    entries = _entries()
    entries.append({"slug": "video", "name": "Video", "version": "1.0.0"})
    _find(entries, "faq")["status"] = "deprecated"
    _find(entries, "faq")["version"] = "1.2.0"
    _find(entries, "hero")["propSchema"].append({"name": "eyebrow", "type": "string"})

    changes = check_registry_changes(
        registry_from_entries(_entries()), registry_from_entries(entries)
    )

    assert _kinds(changes) == {
        ChangeKind.COMPONENT_ADDED,
        ChangeKind.COMPONENT_DEPRECATED,
        ChangeKind.VERSION_CHANGED,
        ChangeKind.PROP_ADDED,
    }
    assert not any(c.is_breaking for c in changes)


def test_removed_component_is_breaking():
    entries = [e for e in _entries() if e["slug"] != "gallery"]

    with pytest.raises(RegistryCompatibilityError) as exc:
        assert_registry_compatible(
            registry_from_entries(_entries()), registry_from_entries(entries)
        )

    assert [c.slug for c in exc.value.changes] == ["gallery"]
    assert exc.value.changes[0].kind == ChangeKind.COMPONENT_REMOVED


def test_prop_level_breaking_changes():
    entries = _entries()
    hero = _find(entries, "hero")
    hero["propSchema"] = [p for p in hero["propSchema"] if p["name"] != "ctaHref"]
    for prop in hero["propSchema"]:
        if prop["name"] == "subheading":
            prop["required"] = True
        if prop["name"] == "alignment":
            prop["options"] = ["left", "center", "justify"]
    for prop in _find(entries, "gallery")["propSchema"]:
        if prop["name"] == "columns":
            prop["type"] = "string"
            prop.pop("min")
            prop.pop("max")

    changes = check_registry_changes(
        registry_from_entries(_entries()), registry_from_entries(entries)
    )
    breaking = {c.kind for c in changes if c.is_breaking}

    assert breaking == {
        ChangeKind.PROP_REMOVED,
        ChangeKind.REQUIRED_ADDED,
        ChangeKind.ENUM_OPTION_REMOVED,
        ChangeKind.PROP_TYPE_CHANGED,
    }
    assert ChangeKind.ENUM_OPTION_ADDED in _kinds(changes)
