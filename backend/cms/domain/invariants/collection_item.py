from cms.domain.content.records import validate_record_data
from cms.domain.exceptions import InvalidContent

def assert_item_data(collection, data, publish=False):
    """
    Checks item data against the collection schema.

    Required fields are only enforced on publish; keys missing from the
    schema are kept as they are.
    """
    if data is None:
        raise InvalidContent("Item data is required")

    result = validate_record_data(
        collection.schema_json or [],
        data,
        enforce_required=publish,
    )
    if not result.valid:
        raise InvalidContent("; ".join(result.errors))

    return data
