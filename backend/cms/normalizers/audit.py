# cms/normalizers/audit.py
from typing import Any, Dict, Optional

from cms.models.audit_log import AuditLog

ENTITY_TYPES = ("page", "collection", "collection_item")


def _version_of(payload: Dict[str, Any]) -> Optional[int]:
    # rollback entries record the version they produced as to_version
    if "version" in payload:
        return payload["version"]
    return payload.get("to_version")


def normalize_audit_log(log: AuditLog) -> Dict[str, Any]:
    """
    Audit entries are written as "<entity_type>.<event>", e.g.
    "page.publish" or "collection_item.rollback". The event and the
    document version it touched are split out so clients can build a
    timeline without parsing the action string.
    """
    payload = log.payload or {}
    _, _, event = log.action.partition(".")

    return {
        "id": log.id,
        "action": log.action,
        "event": event or log.action,
        "entity_type": log.entity_type,
        "entity_id": log.entity_id,
        "actor_id": log.actor_id,
        "version": _version_of(payload),
        "payload": payload,
        "created_at": log.created_at.isoformat(),
    }
