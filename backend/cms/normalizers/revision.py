# cms/normalizers/revision.py
from typing import Any, Dict


def _iso(value):
    return value.isoformat() if value is not None else None


def normalize_revision(revision, include_content=False) -> Dict[str, Any]:
    data = {
        "id": revision.id,
        "version": revision.version,
        "note": revision.note,
        "created_by": revision.created_by,
        "created_at": _iso(revision.created_at),
    }

    if include_content:
        data["content"] = revision.get_snapshot()

    return data


def normalize_publish_state(document) -> Dict[str, Any]:
    """Lifecycle fields shared by pages and collection items."""
    return {
        "status": document.status,
        "head_version": document.head_version,
        "head_revision_id": document.head_revision_id,
        "published_revision_id": document.published_revision_id,
        "published_version": document.published_version,
        "published_at": _iso(document.published_at),
    }
