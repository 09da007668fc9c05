"""
Revision-tracked document kinds.

Pages and collection items share one revision/publish engine; a DocumentKind
tells the engine which tables to use and how a snapshot is validated.
"""

from dataclasses import dataclass
from typing import Any, Callable

from cms.domain.content.builder import create_empty_builder_content
from cms.domain.invariants.collection_item import assert_item_data
from cms.domain.invariants.page import assert_page_content
from cms.models.collection_item import CollectionItem
from cms.models.collection_item_revision import CollectionItemRevision
from cms.models.page import Page
from cms.models.page_revision import PageRevision


@dataclass(frozen=True)
class DocumentKind:
    name: str
    model: Any
    revision_model: Any
    document_fk: str
    snapshot_field: str
    validate: Callable[..., Any]
    empty_snapshot: Callable[[], Any]

    def revision_query(self, document):
        return self.revision_model.query.filter(
            getattr(self.revision_model, self.document_fk) == document.id
        )


def _validate_page(document, snapshot, publish=False):
    return assert_page_content(snapshot)


def _validate_item(document, snapshot, publish=False):
    return assert_item_data(document.collection, snapshot, publish=publish)


PAGE = DocumentKind(
    name="page",
    model=Page,
    revision_model=PageRevision,
    document_fk="page_id",
    snapshot_field="content_json",
    validate=_validate_page,
    empty_snapshot=create_empty_builder_content,
)

COLLECTION_ITEM = DocumentKind(
    name="collection_item",
    model=CollectionItem,
    revision_model=CollectionItemRevision,
    document_fk="item_id",
    snapshot_field="data_json",
    validate=_validate_item,
    empty_snapshot=dict,
)
