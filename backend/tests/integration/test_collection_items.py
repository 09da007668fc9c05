import pytest

from cms.application.cms import queries
from cms.application.cms.collections import (
    create_collection,
    create_item,
    delete_collection,
    update_collection,
)
from cms.application.cms.publish import publish
from cms.application.cms.save_draft import save_draft
from cms.domain.documents import COLLECTION_ITEM
from cms.domain.exceptions import (
    CollectionNotFound,
    DocumentNotFound,
    InvalidContent,
    SlugConflict,
)

FIELDS = [
    {"key": "name", "label": "Name", "type": "text", "required": True},
    {"key": "price", "label": "Price", "type": "number"},
    {"key": "tags", "label": "Tags", "type": "multiselect", "options": ["new", "sale"]},
]


@pytest.fixture
def collection_id(tenant_id, admin_id):
    collection = create_collection(
        tenant_id=tenant_id,
        actor_id=admin_id,
        data={"name": "Products", "slug": "products", "schema_json": FIELDS},
    )
    return collection.id


@pytest.fixture
def item_id(tenant_id, admin_id, collection_id):
    item, _ = create_item(
        tenant_id=tenant_id,
        collection_id=collection_id,
        actor_id=admin_id,
    )
    return item.id


def _ids(tenant_id, admin_id, item_id):
    return dict(tenant_id=tenant_id, document_id=item_id, actor_id=admin_id)


def test_invalid_schema_is_rejected(tenant_id, admin_id):
    with pytest.raises(InvalidContent):
        create_collection(
            tenant_id=tenant_id,
            actor_id=admin_id,
            data={"name": "Bad", "slug": "bad", "schema_json": [{"key": "x", "label": "X", "type": "video"}]},
        )


def test_collection_slug_conflict(tenant_id, admin_id, collection_id):
    with pytest.raises(SlugConflict):
        create_collection(
            tenant_id=tenant_id,
            actor_id=admin_id,
            data={"name": "Again", "slug": "products"},
        )


def test_initial_item_data_becomes_version_one(tenant_id, admin_id, collection_id):
    item, revision = create_item(
        tenant_id=tenant_id,
        collection_id=collection_id,
        actor_id=admin_id,
        data={"name": "Mug", "price": 9},
    )

    assert revision.version == 1
    assert revision.get_snapshot() == {"name": "Mug", "price": 9}
    assert item.status == "DRAFT"


def test_item_in_unknown_collection(tenant_id, admin_id):
    with pytest.raises(CollectionNotFound):
        create_item(tenant_id=tenant_id, collection_id="missing", actor_id=admin_id)


def test_drafts_skip_required_but_check_types(tenant_id, admin_id, item_id):
    ids = _ids(tenant_id, admin_id, item_id)

    _, revision = save_draft(COLLECTION_ITEM, content={"price": 5}, **ids)
    assert revision.version == 1

    with pytest.raises(InvalidContent) as exc:
        save_draft(COLLECTION_ITEM, content={"price": "five", "tags": ["old"]}, **ids)
    assert str(exc.value) == (
        "Field 'price' must be a number; Field 'tags' must be a list drawn from ['new', 'sale']"
    )


def test_publish_enforces_required_fields(tenant_id, admin_id, item_id):
    ids = _ids(tenant_id, admin_id, item_id)
    save_draft(COLLECTION_ITEM, content={"price": 5}, **ids)

    with pytest.raises(InvalidContent, match="Field 'name' is required"):
        publish(COLLECTION_ITEM, **ids)

    item, revision = publish(COLLECTION_ITEM, content={"name": "Mug", "price": 5}, **ids)

    assert revision.version == 2
    assert item.status == "PUBLISHED"
    assert item.published_content == {"name": "Mug", "price": 5}


def test_public_item_reads(tenant_id, admin_id, item_id, other_tenant_id):
    ids = _ids(tenant_id, admin_id, item_id)

    with pytest.raises(DocumentNotFound):
        queries.get_published_item(tenant_id=tenant_id, collection_slug="products", item_id=item_id)

    publish(COLLECTION_ITEM, content={"name": "Mug"}, **ids)
    save_draft(COLLECTION_ITEM, content={"name": "Mug v2"}, **ids)

    item = queries.get_published_item(
        tenant_id=tenant_id, collection_slug="products", item_id=item_id
    )
    assert item.published_content == {"name": "Mug"}

    _, items = queries.list_published_items(tenant_id=tenant_id, collection_slug="products")
    assert [i.id for i in items.all()] == [item_id]

    with pytest.raises(CollectionNotFound):
        queries.get_published_item(
            tenant_id=other_tenant_id, collection_slug="products", item_id=item_id
        )


def test_removed_field_leaves_orphan_data(tenant_id, admin_id, collection_id, item_id):
    ids = _ids(tenant_id, admin_id, item_id)
    save_draft(COLLECTION_ITEM, content={"name": "Mug", "price": 5}, **ids)

    update_collection(
        tenant_id=tenant_id,
        collection_id=collection_id,
        actor_id=admin_id,
        data={"schema_json": [f for f in FIELDS if f["key"] != "price"]},
    )

    state = queries.get_editor_state(COLLECTION_ITEM, tenant_id=tenant_id, document_id=item_id)

    assert state["content"] == {"name": "Mug", "price": 5}
    assert state["compatibility"].warnings == [
        'Field "price" is no longer in the collection schema'
    ]

    # Orphan keys do not block saving or publishing
    _, revision = publish(COLLECTION_ITEM, **ids)
    assert revision.get_snapshot() == {"name": "Mug", "price": 5}


def test_deleting_collection_hides_items(tenant_id, admin_id, collection_id, item_id):
    publish(COLLECTION_ITEM, content={"name": "Mug"}, **_ids(tenant_id, admin_id, item_id))

    delete_collection(tenant_id=tenant_id, collection_id=collection_id, actor_id=admin_id)

    with pytest.raises(CollectionNotFound):
        queries.get_published_item(tenant_id=tenant_id, collection_slug="products", item_id=item_id)
    with pytest.raises(DocumentNotFound):
        queries.get_document(COLLECTION_ITEM, tenant_id=tenant_id, document_id=item_id)


def test_deleted_collection_releases_its_slug(tenant_id, admin_id, collection_id, item_id):
    delete_collection(tenant_id=tenant_id, collection_id=collection_id, actor_id=admin_id)

    collection = create_collection(
        tenant_id=tenant_id,
        actor_id=admin_id,
        data={"name": "Products v2", "slug": "products", "schema_json": FIELDS},
    )

    assert collection.id != collection_id
    found, items = queries.list_published_items(tenant_id=tenant_id, collection_slug="products")
    assert found.id == collection.id
    assert items.all() == []
