from typing import Any, Dict, Optional
from sqlalchemy.exc import IntegrityError
from cms.models.page import Page
from cms.domain.documents import PAGE
from cms.domain.exceptions import InvalidContent, SlugConflict
from cms.domain.revisions import RevisionStore
from cms.utils.audit import log_action
from cms.utils.transaction import transactional


# Content and status change only through save_draft / publish / unpublish
ALLOWED_UPDATE_FIELDS = ("title", "slug", "seo")


def update_page(
    *,
    tenant_id: str,
    page_id: str,
    actor_id: Optional[str],
    data: Dict[str, Any],
) -> Page:
    """
    Update page metadata. Does not create a revision.

    Design rules:
    - Only whitelisted fields are mutable
    - No silent no-op updates
    """
    changed_fields: list[str] = []

    try:
        with transactional():
            page = RevisionStore(PAGE).lock_document(tenant_id=tenant_id, document_id=page_id)

            for field in ALLOWED_UPDATE_FIELDS:
                if field in data and getattr(page, field) != data[field]:
                    if field in ("title", "slug") and not data[field]:
                        raise InvalidContent(f"{field} cannot be empty")
                    setattr(page, field, data[field])
                    changed_fields.append(field)

            if not changed_fields:
                # Explicitly fail instead of silently succeeding
                raise InvalidContent("No valid fields provided for update")

            log_action(
                tenant_id=tenant_id,
                actor_id=actor_id,
                action="page.update",
                entity_type="page",
                entity_id=page.id,
                payload={"fields": changed_fields},
            )

    except IntegrityError as exc:
        raise SlugConflict("A page with this slug already exists") from exc

    return page
