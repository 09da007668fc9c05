from typing import Any, Dict, Optional, Tuple
from sqlalchemy.exc import IntegrityError
from cms.extensions import db
from cms.models.page import Page
from cms.models.page_revision import PageRevision
from cms.domain.documents import PAGE
from cms.domain.exceptions import InvalidContent, SlugConflict
from cms.domain.lifecycle.document import DRAFT
from cms.domain.revisions import RevisionStore
from cms.utils.audit import log_action
from cms.utils.transaction import transactional


def create_page(
    *,
    tenant_id: str,
    actor_id: Optional[str],
    data: Dict[str, Any],
) -> Tuple[Page, Optional[PageRevision]]:
    """
    Create a new CMS page in DRAFT state.

    A page starts without revisions. When initial content is supplied it is
    validated and stored as revision 1 in the same transaction.

    Edge cases handled:
    - Missing required fields
    - Duplicate slug per tenant
    - Invalid initial content (nothing is created)
    """

    title: str | None = data.get("title")
    slug: str | None = data.get("slug")

    if not title or not slug:
        raise InvalidContent("Both title and slug are required")

    initial_content = data.get("content")
    if initial_content is not None:
        initial_content = PAGE.validate(None, initial_content)

    page = Page()
    page.tenant_id = tenant_id
    page.title = title
    page.slug = slug
    page.seo = data.get("seo") or {}
    page.status = DRAFT
    page.head_version = 0

    revision = None
    try:
        with transactional():
            db.session.add(page)
            db.session.flush()  # ensures page.id is available

            if initial_content is not None:
                revision = RevisionStore(PAGE).create_revision(
                    page,
                    initial_content,
                    note="Initial creation",
                    actor_id=actor_id,
                )

            log_action(
                tenant_id=tenant_id,
                actor_id=actor_id,
                action="page.create",
                entity_type="page",
                entity_id=page.id,
                payload={
                    "title": page.title,
                    "slug": page.slug,
                    "version": page.head_version,
                },
            )

        return page, revision

    except IntegrityError as exc:
        # Raised by the (tenant_id, slug) unique constraint
        raise SlugConflict("A page with this slug already exists") from exc
