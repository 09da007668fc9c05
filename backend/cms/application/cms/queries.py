# cms/application/cms/queries.py
"""
Read side: editor state, revision history and public reads.

Editor reads return the latest revision (drafts included) together with an
advisory compatibility report. Public reads return only published content
and treat drafts, unpublished and deleted documents as missing.
"""
from typing import Any, Dict, Optional
from cms.models.collection import Collection
from cms.models.collection_item import CollectionItem
from cms.models.page import Page
from cms.domain.compat import check_against_registry, check_record_compatibility
from cms.domain.documents import COLLECTION_ITEM, PAGE, DocumentKind
from cms.domain.exceptions import CollectionNotFound, DocumentNotFound
from cms.domain.lifecycle.document import PUBLISHED
from cms.domain.revisions import RevisionStore
from cms.registry import get_registry


def get_document(kind: DocumentKind, *, tenant_id: str, document_id: str):
    document = kind.model.query.filter_by(
        id=document_id,
        tenant_id=tenant_id,
        deleted_at=None,
    ).first()

    if document is None:
        raise DocumentNotFound(document_id)
    return document


def list_revisions(kind: DocumentKind, *, tenant_id: str, document_id: str):
    document = get_document(kind, tenant_id=tenant_id, document_id=document_id)
    return RevisionStore(kind).list_revisions(document)


def get_revision(kind: DocumentKind, *, tenant_id: str, document_id: str, revision_id: str):
    document = get_document(kind, tenant_id=tenant_id, document_id=document_id)
    return RevisionStore(kind).get_revision(document, revision_id)


def _compatibility(kind: DocumentKind, document, snapshot):
    if kind is PAGE:
        return check_against_registry(snapshot, get_registry())
    return check_record_compatibility(document.collection.schema_json or [], snapshot)


def get_editor_state(kind: DocumentKind, *, tenant_id: str, document_id: str) -> Dict[str, Any]:
    """
    Latest revision content for editing. A document without revisions
    opens with the kind's empty snapshot.
    """
    document = get_document(kind, tenant_id=tenant_id, document_id=document_id)
    latest = RevisionStore(kind).latest_revision(document)

    snapshot = latest.get_snapshot() if latest else kind.empty_snapshot()

    return {
        "document": document,
        "revision": latest,
        "content": snapshot,
        "compatibility": _compatibility(kind, document, snapshot),
    }


def list_pages(*, tenant_id: str, status: Optional[str] = None):
    query = Page.query.filter_by(tenant_id=tenant_id, deleted_at=None)
    if status:
        query = query.filter_by(status=status)
    return query


def list_collections(*, tenant_id: str):
    return Collection.query.filter_by(tenant_id=tenant_id, deleted_at=None)


def list_items(*, tenant_id: str, collection_id: str, status: Optional[str] = None):
    query = CollectionItem.query.filter_by(
        tenant_id=tenant_id,
        collection_id=collection_id,
        deleted_at=None,
    )
    if status:
        query = query.filter_by(status=status)
    return query


# ------------------------
# Public reads
# ------------------------

def get_published_page(*, tenant_id: str, slug: str) -> Page:
    page = Page.query.filter_by(
        tenant_id=tenant_id,
        slug=slug,
        status=PUBLISHED,
        deleted_at=None,
    ).first()

    if page is None:
        raise DocumentNotFound(slug)
    return page


def _published_collection(tenant_id: str, collection_slug: str) -> Collection:
    collection = Collection.query.filter_by(
        tenant_id=tenant_id,
        slug=collection_slug,
        deleted_at=None,
    ).first()

    if collection is None:
        raise CollectionNotFound(collection_slug)
    return collection


def list_published_items(*, tenant_id: str, collection_slug: str):
    collection = _published_collection(tenant_id, collection_slug)
    return collection, list_items(
        tenant_id=tenant_id,
        collection_id=collection.id,
        status=PUBLISHED,
    )


def get_published_item(*, tenant_id: str, collection_slug: str, item_id: str) -> CollectionItem:
    collection = _published_collection(tenant_id, collection_slug)

    item = CollectionItem.query.filter_by(
        id=item_id,
        tenant_id=tenant_id,
        collection_id=collection.id,
        status=PUBLISHED,
        deleted_at=None,
    ).first()

    if item is None:
        raise DocumentNotFound(item_id)
    return item
