import json

import pytest

from cms.registry import (
    ComponentNotFound,
    ComponentStatus,
    ComponentTypeDefinition,
    DuplicateComponentError,
    PropType,
    RegistryLoadError,
    load_registry,
    registry_from_entries,
)


def _entry(slug="hero", **overrides):
    entry = {
        "slug": slug,
        "name": slug.title(),
        "version": "1.0.0",
        "status": "stable",
        "propSchema": [{"name": "headline", "type": "string", "label": "Headline"}],
        "defaultPreset": {"name": "Default", "props": {"headline": "Hello"}},
    }
    entry.update(overrides)
    return entry


def test_builtin_catalog_loads():
    registry = load_registry()

    assert "hero" in registry
    assert registry.get_type("hero").status == ComponentStatus.STABLE
    assert registry.get_type("faq").version == "1.1.0"
    assert registry.fingerprint.startswith("sha256:")


def test_available_types_exclude_deprecated():
    registry = load_registry()

    available = [d.slug for d in registry.available_types()]
    everything = [d.slug for d in registry.list_types()]

    assert "legacy-columns" in everything
    assert "legacy-columns" not in available
    assert "legacy-columns" in registry.slugs()
    assert len(everything) == len(available) + 1


def test_get_type_unknown_slug():
    registry = load_registry()

    with pytest.raises(ComponentNotFound) as exc:
        registry.get_type("nonexistent-slug")

    assert "nonexistent-slug" in str(exc.value)
    assert registry.find_type("nonexistent-slug") is None
    assert registry.find_type(None) is None


def test_categories_group_available_slugs():
    categories = load_registry().categories()

    assert categories["layout"] == ["hero"]
    assert "legacy-columns" not in sum(categories.values(), [])


def test_definition_from_dict_accepts_both_key_styles():
    camel = ComponentTypeDefinition.from_dict(_entry())
    snake = ComponentTypeDefinition.from_dict({
        "slug": "hero",
        "name": "Hero",
        "version": "1.0.0",
        "prop_schema": [{"name": "headline", "type": "string", "label": "Headline"}],
        "default_preset": {"name": "Default", "props": {"headline": "Hello"}},
    })

    assert camel == snake
    assert camel.get_prop("headline").type == PropType.STRING
    assert camel.presets[0].props == {"headline": "Hello"}


def test_duplicate_slugs_are_rejected():
    with pytest.raises(DuplicateComponentError):
        registry_from_entries([_entry(), _entry()])


@pytest.mark.parametrize(
    "overrides",
    [
        {"version": "one"},
        {"status": "retired"},
        {"propSchema": [{"name": "x", "type": "video"}]},
        {"propSchema": [{"name": "x", "type": "enum"}]},
        {"propSchema": [{"name": "x", "type": "string"}, {"name": "x", "type": "number"}]},
    ],
)
def test_invalid_entries_fail_at_load(overrides):
    with pytest.raises(RegistryLoadError):
        registry_from_entries([_entry(**overrides)])


def test_registry_is_read_only():
    registry = load_registry()

    with pytest.raises(TypeError):
        registry._types["new"] = registry.get_type("hero")


def test_fingerprint_tracks_definitions():
    first = registry_from_entries([_entry()])
    same = registry_from_entries([_entry()])
    bumped = registry_from_entries([_entry(version="1.0.1")])

    assert first.fingerprint == same.fingerprint
    assert first.fingerprint != bumped.fingerprint


def test_load_registry_from_file(tmp_path):
    path = tmp_path / "registry.json"
    path.write_text(json.dumps({"components": [_entry(), _entry("faq")]}))

    registry = load_registry(str(path))

    assert registry.slugs() == ["hero", "faq"]


def test_load_registry_bad_file(tmp_path):
    path = tmp_path / "registry.json"
    path.write_text("{not json")

    with pytest.raises(RegistryLoadError):
        load_registry(str(path))

    with pytest.raises(RegistryLoadError):
        load_registry(str(tmp_path / "missing.json"))
