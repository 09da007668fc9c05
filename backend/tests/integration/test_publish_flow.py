import pytest

from cms.application.cms import queries
from cms.application.cms.create_page import create_page
from cms.application.cms.delete_page import delete_page
from cms.application.cms.publish import publish, unpublish
from cms.application.cms.rollback import rollback
from cms.application.cms.save_draft import save_draft
from cms.application.cms.update_page import update_page
from cms.domain.documents import PAGE
from cms.domain.exceptions import (
    DocumentNotFound,
    IllegalTransition,
    InvalidContent,
    SlugConflict,
)
from cms.models.audit_log import AuditLog


@pytest.fixture
def page_id(tenant_id, admin_id):
    page, _ = create_page(
        tenant_id=tenant_id,
        actor_id=admin_id,
        data={"title": "Home", "slug": "home"},
    )
    return page.id


@pytest.fixture
def ops(tenant_id, admin_id, page_id):
    """Page operations bound to the fixture page."""
    ids = dict(tenant_id=tenant_id, document_id=page_id, actor_id=admin_id)

    class Ops:
        def save(self, content):
            return save_draft(PAGE, content=content, **ids)

        def publish(self, content=None):
            return publish(PAGE, content=content, **ids)

        def unpublish(self):
            return unpublish(PAGE, **ids)

        def rollback(self, revision_id):
            return rollback(PAGE, revision_id=revision_id, **ids)

    return Ops()


def _hero(content_factory, headline):
    return content_factory(("hero", "hero-1", {"headline": headline}))


def _public_headline(tenant_id, slug="home"):
    page = queries.get_published_page(tenant_id=tenant_id, slug=slug)
    return page.published_content["data"]["content"][0]["props"]["headline"]


def test_publish_scenario(ops, tenant_id, content_factory):
    _, v1 = ops.save(_hero(content_factory, "Draft one"))
    assert v1.version == 1

    page, v2 = ops.publish(_hero(content_factory, "Live"))
    assert v2.version == 2
    assert v2.note == "Published"
    assert page.status == "PUBLISHED"
    assert page.published_revision_id == v2.id
    assert page.published_version == 2
    assert page.published_at is not None

    page, v3 = ops.save(_hero(content_factory, "Work in progress"))
    assert v3.version == 3
    assert page.status == "PUBLISHED"
    assert page.published_version == 2

    assert _public_headline(tenant_id) == "Live"


def test_draft_page_is_not_public(ops, tenant_id, content_factory):
    ops.save(_hero(content_factory, "Secret"))

    with pytest.raises(DocumentNotFound):
        queries.get_published_page(tenant_id=tenant_id, slug="home")


def test_publish_without_content_uses_latest_revision(ops, tenant_id, content_factory):
    ops.save(_hero(content_factory, "Latest"))

    page, revision = ops.publish()

    assert revision.version == 2
    assert revision.get_snapshot()["data"]["content"][0]["props"]["headline"] == "Latest"
    assert _public_headline(tenant_id) == "Latest"


def test_publish_without_any_revision_publishes_empty_content(ops):
    page, revision = ops.publish()

    assert revision.version == 1
    assert page.published_content == {"schemaVersion": 1, "data": {"content": [], "root": {}}}


def test_invalid_publish_is_rejected_before_any_write(ops, tenant_id, page_id, content_factory):
    ops.save(_hero(content_factory, "Fine"))

    with pytest.raises(InvalidContent):
        ops.publish({"schemaVersion": 9, "data": {"content": []}})

    page = queries.get_document(PAGE, tenant_id=tenant_id, document_id=page_id)
    assert page.status == "DRAFT"
    assert page.head_version == 1


def test_republish_moves_pointer(ops, tenant_id, content_factory):
    ops.publish(_hero(content_factory, "First"))
    page, revision = ops.publish(_hero(content_factory, "Second"))

    assert page.published_version == revision.version == 2
    assert _public_headline(tenant_id) == "Second"


def test_unpublish(ops, tenant_id, content_factory):
    ops.publish(_hero(content_factory, "Live"))

    page = ops.unpublish()

    assert page.status == "DRAFT"
    assert page.published_revision_id is None
    assert page.published_content is None
    assert page.head_version == 1
    with pytest.raises(DocumentNotFound):
        queries.get_published_page(tenant_id=tenant_id, slug="home")


def test_unpublish_draft_is_illegal(ops):
    with pytest.raises(IllegalTransition):
        ops.unpublish()


def test_rollback_keeps_published_pointer(ops, tenant_id, content_factory):
    _, first = ops.save(_hero(content_factory, "Old"))
    ops.publish(_hero(content_factory, "Live"))

    page, revision = ops.rollback(first.id)

    assert revision.version == 3
    assert page.status == "PUBLISHED"
    assert page.published_version == 2
    assert _public_headline(tenant_id) == "Live"


def test_published_content_survives_trimming(ops, tenant_id, content_factory):
    ops.publish(_hero(content_factory, "Live"))
    for i in range(12):
        ops.save(_hero(content_factory, f"draft {i}"))

    # Revision 1 has been trimmed; public readers still get it
    assert _public_headline(tenant_id) == "Live"


def test_tenant_isolation(ops, other_tenant_id, content_factory):
    ops.publish(_hero(content_factory, "Acme only"))

    with pytest.raises(DocumentNotFound):
        queries.get_published_page(tenant_id=other_tenant_id, slug="home")


def test_deleted_page_is_not_public(ops, tenant_id, admin_id, page_id, content_factory):
    ops.publish(_hero(content_factory, "Live"))

    delete_page(tenant_id=tenant_id, page_id=page_id, actor_id=admin_id)

    with pytest.raises(DocumentNotFound):
        queries.get_published_page(tenant_id=tenant_id, slug="home")
    with pytest.raises(DocumentNotFound):
        ops.save(_hero(content_factory, "Too late"))


def test_deleted_page_releases_its_slug(ops, tenant_id, admin_id, page_id, content_factory):
    ops.publish(_hero(content_factory, "Old"))
    delete_page(tenant_id=tenant_id, page_id=page_id, actor_id=admin_id)

    page, _ = create_page(tenant_id=tenant_id, actor_id=admin_id, data={"title": "New", "slug": "home"})
    assert page.id != page_id

    # Deleted rows may share a slug; only one live page may hold it
    delete_page(tenant_id=tenant_id, page_id=page.id, actor_id=admin_id)
    live, _ = create_page(tenant_id=tenant_id, actor_id=admin_id, data={"title": "Third", "slug": "home"})
    with pytest.raises(SlugConflict):
        create_page(tenant_id=tenant_id, actor_id=admin_id, data={"title": "Dup", "slug": "home"})

    with pytest.raises(DocumentNotFound):
        queries.get_published_page(tenant_id=tenant_id, slug="home")
    assert queries.get_document(PAGE, tenant_id=tenant_id, document_id=live.id).title == "Third"


def test_editor_state_reports_compatibility(ops, tenant_id, page_id, content_factory):
    ops.save(content_factory(
        ("hero", "hero-1", {}),
        ("nonexistent-slug", "x-1", {}),
    ))

    state = queries.get_editor_state(PAGE, tenant_id=tenant_id, document_id=page_id)

    assert state["revision"].version == 1
    assert state["compatibility"].warnings == [
        'Component "nonexistent-slug" is not in the current registry'
    ]


def test_editor_state_of_new_page(tenant_id, page_id):
    state = queries.get_editor_state(PAGE, tenant_id=tenant_id, document_id=page_id)

    assert state["revision"] is None
    assert state["content"]["data"]["content"] == []
    assert state["compatibility"].valid


def test_slug_conflicts(tenant_id, admin_id, page_id, other_tenant_id):
    with pytest.raises(SlugConflict):
        create_page(tenant_id=tenant_id, actor_id=admin_id, data={"title": "Dup", "slug": "home"})

    # Slugs are unique per tenant only
    page, _ = create_page(
        tenant_id=other_tenant_id, actor_id=None, data={"title": "Home", "slug": "home"}
    )
    assert page.slug == "home"

    create_page(tenant_id=tenant_id, actor_id=admin_id, data={"title": "About", "slug": "about"})
    with pytest.raises(SlugConflict):
        update_page(tenant_id=tenant_id, page_id=page_id, actor_id=admin_id, data={"slug": "about"})


def test_update_page_requires_changes(tenant_id, admin_id, page_id):
    with pytest.raises(InvalidContent):
        update_page(tenant_id=tenant_id, page_id=page_id, actor_id=admin_id, data={"title": "Home"})

    page = update_page(
        tenant_id=tenant_id, page_id=page_id, actor_id=admin_id, data={"title": "Start"}
    )
    assert page.title == "Start"


def test_every_write_is_audited(ops, tenant_id, content_factory):
    _, first = ops.save(_hero(content_factory, "a"))
    ops.publish()
    ops.rollback(first.id)
    ops.unpublish()

    actions = [
        log.action
        for log in AuditLog.query.filter_by(tenant_id=tenant_id)
        .order_by(AuditLog.created_at.asc(), AuditLog.action.asc())
        .all()
    ]

    assert set(actions) == {
        "page.create",
        "page.save_draft",
        "page.publish",
        "page.rollback",
        "page.unpublish",
    }
