# cms/application/cms/rollback.py
from typing import Optional
from cms.domain.documents import DocumentKind
from cms.domain.revisions import RevisionStore
from cms.utils.audit import log_action
from cms.utils.transaction import transactional


def rollback(
    kind: DocumentKind,
    *,
    tenant_id: str,
    document_id: str,
    revision_id: str,
    actor_id: Optional[str],
):
    """
    Roll a document back to an earlier revision.

    The old content is copied into a new revision at the next version, so
    undoing a rollback is just another rollback. Status and the published
    pointer are unchanged; publish afterwards to make it live.

    Fails closed: an unknown document or revision raises before any write.
    """
    store = RevisionStore(kind)

    with transactional():
        document = store.lock_document(tenant_id=tenant_id, document_id=document_id)

        revision = store.rollback(document, revision_id, actor_id=actor_id)

        log_action(
            tenant_id=tenant_id,
            actor_id=actor_id,
            action=f"{kind.name}.rollback",
            entity_type=kind.name,
            entity_id=document.id,
            payload={
                "revision_id": revision_id,
                "to_version": revision.version,
            },
        )

    return document, revision
