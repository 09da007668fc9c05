from typing import Optional
from cms.domain.documents import PAGE
from cms.domain.revisions import RevisionStore
from cms.utils.audit import log_action
from cms.utils.transaction import transactional


def delete_page(
    *,
    tenant_id: str,
    page_id: str,
    actor_id: Optional[str],
) -> None:
    """
    Soft-delete a page.

    Revision history is kept; a deleted page is no longer editable and no
    longer served to public readers.
    """
    with transactional():
        page = RevisionStore(PAGE).lock_document(tenant_id=tenant_id, document_id=page_id)
        page.soft_delete()

        log_action(
            tenant_id=tenant_id,
            actor_id=actor_id,
            action="page.delete",
            entity_type="page",
            entity_id=page.id,
            payload={"status": page.status, "version": page.head_version},
        )
