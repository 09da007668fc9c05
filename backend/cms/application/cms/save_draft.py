from typing import Any, Optional
from cms.domain.documents import DocumentKind
from cms.domain.revisions import RevisionStore
from cms.utils.audit import log_action
from cms.utils.transaction import transactional


def save_draft(
    kind: DocumentKind,
    *,
    tenant_id: str,
    document_id: str,
    actor_id: Optional[str],
    content: Any,
    note: Optional[str] = None,
):
    """
    Store content as a new revision. Status and the published pointer are
    left untouched, so public readers keep seeing the last published content.

    Concurrent saves are last-write-wins: each one simply takes the next
    version number.
    """
    store = RevisionStore(kind)

    with transactional():
        document = store.lock_document(tenant_id=tenant_id, document_id=document_id)

        # Reject before anything is written
        snapshot = kind.validate(document, content, publish=False)

        revision = store.create_revision(
            document,
            snapshot,
            note=note or "Draft save",
            actor_id=actor_id,
        )

        log_action(
            tenant_id=tenant_id,
            actor_id=actor_id,
            action=f"{kind.name}.save_draft",
            entity_type=kind.name,
            entity_id=document.id,
            payload={"version": revision.version},
        )

    return document, revision
