# cms/normalizers/page.py
from .revision import normalize_publish_state


def normalize_page(page, admin=False):
    data = {
        "id": page.id,
        "title": page.title,
        "slug": page.slug,
        "seo": page.seo or {},
    }

    if admin:
        data.update(normalize_publish_state(page))
        data["created_at"] = page.created_at.isoformat()
        data["updated_at"] = page.updated_at.isoformat()

    return data


def normalize_editor_state(state):
    """GET /pages/<id> and GET /collections/<id>/items/<item_id> body."""
    revision = state["revision"]
    return {
        "content": state["content"],
        "version": revision.version if revision else None,
        "revision_id": revision.id if revision else None,
        "compatibility": state["compatibility"].to_dict(),
    }


def normalize_public_page(page):
    """Public payload: the published snapshot, never a draft."""
    return {
        "title": page.title,
        "slug": page.slug,
        "seo": page.seo or {},
        "version": page.published_version,
        "published_at": page.published_at.isoformat() if page.published_at else None,
        "content": page.published_content,
    }
