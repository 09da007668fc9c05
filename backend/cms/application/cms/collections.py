# cms/application/cms/collections.py
from typing import Any, Dict, Optional, Tuple
from sqlalchemy.exc import IntegrityError
from cms.extensions import db
from cms.models.collection import Collection
from cms.models.collection_item import CollectionItem
from cms.models.collection_item_revision import CollectionItemRevision
from cms.domain.content.records import validate_collection_schema
from cms.domain.documents import COLLECTION_ITEM
from cms.domain.exceptions import CollectionNotFound, InvalidContent, SlugConflict
from cms.domain.lifecycle.document import DRAFT
from cms.domain.revisions import RevisionStore
from cms.utils.audit import log_action
from cms.utils.transaction import transactional


ALLOWED_COLLECTION_FIELDS = ("name", "slug", "description", "schema_json")


def get_collection(*, tenant_id: str, collection_id: str) -> Collection:
    collection = Collection.query.filter_by(
        id=collection_id,
        tenant_id=tenant_id,
        deleted_at=None,
    ).first()

    if collection is None:
        raise CollectionNotFound(collection_id)
    return collection


def create_collection(
    *,
    tenant_id: str,
    actor_id: Optional[str],
    data: Dict[str, Any],
) -> Collection:
    name = data.get("name")
    slug = data.get("slug")

    if not name or not slug:
        raise InvalidContent("Both name and slug are required")

    schema = validate_collection_schema(data.get("schema_json", []))

    collection = Collection()
    collection.tenant_id = tenant_id
    collection.name = name
    collection.slug = slug
    collection.description = data.get("description")
    collection.schema_json = schema

    try:
        with transactional():
            db.session.add(collection)
            db.session.flush()

            log_action(
                tenant_id=tenant_id,
                actor_id=actor_id,
                action="collection.create",
                entity_type="collection",
                entity_id=collection.id,
                payload={"slug": slug, "fields": [f["key"] for f in schema]},
            )
    except IntegrityError as exc:
        raise SlugConflict("A collection with this slug already exists") from exc

    return collection


def update_collection(
    *,
    tenant_id: str,
    collection_id: str,
    actor_id: Optional[str],
    data: Dict[str, Any],
) -> Collection:
    """
    Update collection metadata or its field schema.

    Removing a field from the schema never touches item data: the old
    values stay on the items as orphan keys and show up as warnings.
    """
    changed_fields: list[str] = []

    try:
        with transactional():
            collection = get_collection(tenant_id=tenant_id, collection_id=collection_id)

            for field in ALLOWED_COLLECTION_FIELDS:
                if field not in data or getattr(collection, field) == data[field]:
                    continue
                value = data[field]
                if field in ("name", "slug") and not value:
                    raise InvalidContent(f"{field} cannot be empty")
                if field == "schema_json":
                    value = validate_collection_schema(value)
                setattr(collection, field, value)
                changed_fields.append(field)

            if not changed_fields:
                raise InvalidContent("No valid fields provided for update")

            log_action(
                tenant_id=tenant_id,
                actor_id=actor_id,
                action="collection.update",
                entity_type="collection",
                entity_id=collection.id,
                payload={"fields": changed_fields},
            )
    except IntegrityError as exc:
        raise SlugConflict("A collection with this slug already exists") from exc

    return collection


def delete_collection(
    *,
    tenant_id: str,
    collection_id: str,
    actor_id: Optional[str],
) -> None:
    """Soft-delete a collection together with its live items."""
    with transactional():
        collection = get_collection(tenant_id=tenant_id, collection_id=collection_id)
        collection.soft_delete()

        items = collection.items.filter(CollectionItem.deleted_at.is_(None)).all()
        for item in items:
            item.soft_delete()

        log_action(
            tenant_id=tenant_id,
            actor_id=actor_id,
            action="collection.delete",
            entity_type="collection",
            entity_id=collection.id,
            payload={"items": len(items)},
        )


def create_item(
    *,
    tenant_id: str,
    collection_id: str,
    actor_id: Optional[str],
    data: Optional[Dict[str, Any]] = None,
) -> Tuple[CollectionItem, Optional[CollectionItemRevision]]:
    """
    Create an item in DRAFT state. Initial data, when given, becomes
    revision 1. Required fields are only enforced on publish.
    """
    revision = None

    with transactional():
        collection = get_collection(tenant_id=tenant_id, collection_id=collection_id)

        item = CollectionItem()
        item.tenant_id = tenant_id
        item.collection = collection
        item.status = DRAFT
        item.head_version = 0

        if data is not None:
            data = COLLECTION_ITEM.validate(item, data, publish=False)

        db.session.add(item)
        db.session.flush()

        if data is not None:
            revision = RevisionStore(COLLECTION_ITEM).create_revision(
                item,
                data,
                note="Initial creation",
                actor_id=actor_id,
            )

        log_action(
            tenant_id=tenant_id,
            actor_id=actor_id,
            action="collection_item.create",
            entity_type="collection_item",
            entity_id=item.id,
            payload={"collection_id": collection.id, "version": item.head_version},
        )

    return item, revision


def delete_item(
    *,
    tenant_id: str,
    item_id: str,
    actor_id: Optional[str],
) -> None:
    with transactional():
        item = RevisionStore(COLLECTION_ITEM).lock_document(
            tenant_id=tenant_id, document_id=item_id
        )
        item.soft_delete()

        log_action(
            tenant_id=tenant_id,
            actor_id=actor_id,
            action="collection_item.delete",
            entity_type="collection_item",
            entity_id=item.id,
            payload={"collection_id": item.collection_id},
        )
