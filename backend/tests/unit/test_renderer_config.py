import logging

import pytest

from cms.registry import PropField, PropType, load_registry, registry_from_entries
from cms.registry.renderer_config import (
    build_default_props,
    map_prop_field,
    parse_structured_value,
    to_renderer_config,
    validate_bindings,
)


def _bind_all(registry):
    return {d.slug: (lambda props, slug=d.slug: (slug, props)) for d in registry.list_types()}


def test_deprecated_components_are_skipped():
    registry = load_registry()
    config = to_renderer_config(registry, _bind_all(registry))

    assert "legacy-columns" not in config
    assert "hero" in config
    assert set(config.components) == {d.slug for d in registry.available_types()}


def test_missing_binding_is_skipped_and_logged(caplog):
    registry = load_registry()
    bindings = _bind_all(registry)
    del bindings["faq"]

    with caplog.at_level(logging.WARNING):
        config = to_renderer_config(registry, bindings)

    assert "faq" not in config
    assert config.skipped == ["faq"]
    assert "faq" in caplog.text


def test_categories_follow_configured_components():
    registry = load_registry()
    config = to_renderer_config(registry, _bind_all(registry))

    assert config.categories["content"] == ["feature-grid", "faq", "rich-text"]


def test_field_mapping():
    assert map_prop_field(PropField("t", PropType.STRING, label="Title")) == {
        "type": "text",
        "label": "Title",
    }
    assert map_prop_field(PropField("c", PropType.COLOR))["type"] == "text"
    assert map_prop_field(PropField("i", PropType.IMAGE))["type"] == "text"
    assert map_prop_field(PropField("b", PropType.RICHTEXT))["type"] == "textarea"

    number = map_prop_field(PropField("n", PropType.NUMBER, min=1, max=6))
    assert number == {"type": "number", "label": "n", "min": 1, "max": 6}

    radio = map_prop_field(PropField("flag", PropType.BOOLEAN))
    assert radio["type"] == "radio"
    assert [o["value"] for o in radio["options"]] == [True, False]

    select = map_prop_field(PropField("align", PropType.ENUM, options=("left", "center")))
    assert select["options"] == [
        {"label": "Left", "value": "left"},
        {"label": "Center", "value": "center"},
    ]

    assert map_prop_field(PropField("items", PropType.ARRAY, label="Items")) == {
        "type": "textarea",
        "label": "Items (JSON)",
    }


def test_preset_values_win_over_field_defaults():
    hero = load_registry().get_type("hero")
    defaults = build_default_props(hero)

    assert defaults["headline"] == "Build Something Amazing"
    assert defaults["alignment"] == "center"
    # backgroundImage has neither a preset value nor a default
    assert "backgroundImage" not in defaults


def test_field_default_fills_keys_missing_from_preset():
    definition = registry_from_entries([{
        "slug": "banner",
        "version": "1.0.0",
        "propSchema": [
            {"name": "text", "type": "string", "default": "Field default"},
            {"name": "tone", "type": "enum", "options": ["a", "b"], "default": "a"},
        ],
        "defaultPreset": {"props": {"text": "Preset text"}},
    }]).get_type("banner")

    assert build_default_props(definition) == {"text": "Preset text", "tone": "a"}


def test_serialized_structured_props_are_parsed():
    definition = registry_from_entries([{
        "slug": "list",
        "version": "1.0.0",
        "propSchema": [
            {"name": "items", "type": "array"},
            {"name": "style", "type": "object", "default": "{\"color\": \"red\"}"},
        ],
        "defaultPreset": {"props": {"items": "[1, 2]"}},
    }]).get_type("list")

    assert build_default_props(definition) == {"items": [1, 2], "style": {"color": "red"}}


def test_invalid_json_degrades_to_empty_value(caplog):
    items = PropField("items", PropType.ARRAY)
    style = PropField("style", PropType.OBJECT)

    with caplog.at_level(logging.WARNING):
        assert parse_structured_value(items, "[1, 2", component="faq") == []
        assert parse_structured_value(style, "not json", component="faq") == {}
        assert parse_structured_value(items, "{\"a\": 1}", component="faq") == []

    assert "faq" in caplog.text
    # Native values and non-structured props pass through
    assert parse_structured_value(items, [1]) == [1]
    assert parse_structured_value(PropField("t", PropType.STRING), "[1]") == "[1]"


def test_validate_bindings_reports_both_directions():
    registry = load_registry()
    bindings = _bind_all(registry)
    del bindings["hero"]
    bindings["ghost"] = lambda props: props

    report = validate_bindings(registry, bindings)

    assert report.missing == ["hero"]
    assert report.unknown == ["ghost"]
    assert not report.ok


def test_default_props_do_not_alias_registry_values():
    entries = [{
        "slug": "faq",
        "version": "1.0.0",
        "propSchema": [
            {"name": "items", "type": "array", "default": [{"q": "a"}]},
            {"name": "meta", "type": "object"},
        ],
        "defaultPreset": {"props": {"meta": {"tags": ["x"]}}},
    }]
    registry = registry_from_entries(entries)
    config = to_renderer_config(registry, _bind_all(registry))

    defaults = config.components["faq"].default_props
    defaults["items"].append({"q": "injected"})
    defaults["meta"]["tags"].append("injected")

    faq = registry.get_type("faq")
    assert faq.get_prop("items").default == [{"q": "a"}]
    assert faq.default_preset.props["meta"] == {"tags": ["x"]}
    assert build_default_props(faq) == {"items": [{"q": "a"}], "meta": {"tags": ["x"]}}
    # the source entry is not shared either
    assert entries[0]["propSchema"][0]["default"] == [{"q": "a"}]


def test_preset_props_are_read_only():
    hero = load_registry().get_type("hero")

    with pytest.raises(TypeError):
        hero.default_preset.props["headline"] = "Changed"
