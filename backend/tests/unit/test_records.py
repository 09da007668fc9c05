import pytest

from cms.domain.content.records import validate_collection_schema, validate_record_data
from cms.domain.exceptions import InvalidContent

FIELDS = [
    {"key": "title", "label": "Title", "type": "text", "required": True},
    {"key": "price", "label": "Price", "type": "number"},
    {"key": "in_stock", "label": "In stock", "type": "boolean"},
    {"key": "released", "label": "Released", "type": "date"},
    {"key": "size", "label": "Size", "type": "select", "options": ["s", "m", "l"]},
    {"key": "tags", "label": "Tags", "type": "multiselect", "options": ["new", "sale"]},
]


def test_schema_is_returned_when_valid():
    assert validate_collection_schema(FIELDS) is FIELDS
    assert validate_collection_schema([]) == []


@pytest.mark.parametrize(
    "fields, message",
    [
        ({}, "schema_json must be an array of fields"),
        (["title"], "Field at index 0 must be an object"),
        ([{"label": "T", "type": "text"}], "Field at index 0 must have a non-empty key"),
        (
            [{"key": "a", "label": "A", "type": "text"}, {"key": "a", "label": "B", "type": "text"}],
            "Duplicate field key 'a'",
        ),
        ([{"key": "a", "type": "text"}], "Field 'a' must have a label"),
        ([{"key": "a", "label": "A", "type": "video"}], "Field 'a' has unknown type 'video'"),
        ([{"key": "a", "label": "A", "type": "select"}], "Field 'a' of type select needs options"),
        (
            [{"key": "a", "label": "A", "type": "select", "options": [1, 2]}],
            "Field 'a' options must be strings",
        ),
    ],
)
def test_invalid_schemas(fields, message):
    with pytest.raises(InvalidContent) as exc:
        validate_collection_schema(fields)

    assert str(exc.value) == message


def test_valid_record():
    result = validate_record_data(FIELDS, {
        "title": "Mug",
        "price": 9.5,
        "in_stock": True,
        "released": "2024-03-01",
        "size": "m",
        "tags": ["new"],
    }, enforce_required=True)

    assert result.valid
    assert result.errors == []
    assert result.orphan_keys == []


def test_type_errors_are_collected():
    result = validate_record_data(FIELDS, {
        "title": 3,
        "price": True,
        "released": "yesterday",
        "size": "xl",
        "tags": ["new", "old"],
    })

    assert not result.valid
    assert result.errors == [
        "Field 'title' must be a string",
        "Field 'price' must be a number",
        "Field 'released' must be an ISO-8601 date",
        "Field 'size' must be one of ['s', 'm', 'l']",
        "Field 'tags' must be a list drawn from ['new', 'sale']",
    ]


def test_required_fields_only_enforced_on_publish():
    assert validate_record_data(FIELDS, {"price": 1}).valid

    result = validate_record_data(FIELDS, {"title": "", "price": 1}, enforce_required=True)
    assert result.errors == ["Field 'title' is required"]


def test_orphan_keys_are_reported_not_rejected():
    result = validate_record_data(FIELDS, {"title": "Mug", "legacy_sku": "X-1"})

    assert result.valid
    assert result.orphan_keys == ["legacy_sku"]


def test_non_object_data():
    result = validate_record_data(FIELDS, ["title"])

    assert not result.valid
    assert result.errors == ["Item data must be an object"]
