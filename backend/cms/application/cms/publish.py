# cms/application/cms/publish.py
import copy
from typing import Any, Optional
from cms.domain.documents import DocumentKind
from cms.domain.lifecycle.document import DRAFT, PUBLISHED, assert_transition
from cms.domain.revisions import RevisionStore
from cms.models.base import utc_now
from cms.utils.audit import log_action
from cms.utils.transaction import transactional


def publish(
    kind: DocumentKind,
    *,
    tenant_id: str,
    document_id: str,
    actor_id: Optional[str],
    content: Any = None,
):
    """
    Publishes a document.

    Responsibilities:
    - snapshot exactly what is published as a new revision; when no content
      is passed the latest revision's content is republished
    - lifecycle transition enforcement
    - move the published pointer to the new revision
    - audit logging
    """
    store = RevisionStore(kind)

    with transactional():
        # 1. Fetch document with row-level lock
        document = store.lock_document(tenant_id=tenant_id, document_id=document_id)

        # 2. Lifecycle transition enforcement
        assert_transition(from_status=document.status, to_status=PUBLISHED)

        if content is None:
            latest = store.latest_revision(document)
            content = copy.deepcopy(latest.get_snapshot()) if latest else kind.empty_snapshot()

        # 3. Publish-time validation, before anything is written
        snapshot = kind.validate(document, content, publish=True)

        # 4. Immutable revision of the published content
        revision = store.create_revision(
            document,
            snapshot,
            note="Published",
            actor_id=actor_id,
        )

        # 5. Status flip and published pointer
        document.status = PUBLISHED
        document.published_revision_id = revision.id
        document.published_version = revision.version
        document.published_content = copy.deepcopy(snapshot)
        document.published_at = utc_now()

        # 6. Audit logging
        log_action(
            tenant_id=tenant_id,
            actor_id=actor_id,
            action=f"{kind.name}.publish",
            entity_type=kind.name,
            entity_id=document.id,
            payload={"version": revision.version},
        )

    return document, revision


def unpublish(
    kind: DocumentKind,
    *,
    tenant_id: str,
    document_id: str,
    actor_id: Optional[str],
):
    """
    Takes a document offline. No revision is created; history is untouched
    and a later publish starts from the latest revision.
    """
    store = RevisionStore(kind)

    with transactional():
        document = store.lock_document(tenant_id=tenant_id, document_id=document_id)

        assert_transition(from_status=document.status, to_status=DRAFT)

        previous_version = document.published_version

        document.status = DRAFT
        document.published_revision_id = None
        document.published_version = None
        document.published_content = None
        document.published_at = None
        document.updated_at = utc_now()

        log_action(
            tenant_id=tenant_id,
            actor_id=actor_id,
            action=f"{kind.name}.unpublish",
            entity_type=kind.name,
            entity_id=document.id,
            payload={"version": previous_version},
        )

    return document
