from typing import Optional
from cms.extensions import db
from cms.models.audit_log import AuditLog

def log_action(
    *,
    tenant_id: str,
    actor_id: Optional[str],
    action: str,
    entity_type: str,
    entity_id: str,
    payload: dict | None = None
) -> AuditLog:
    """
    Adds an audit row to the current session.
    Callers invoke this inside their transactional() block so the audit
    entry commits or rolls back with the change it describes.
    """
    log = AuditLog()

    log.tenant_id = tenant_id
    log.actor_id = actor_id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id
    log.payload = payload or {}

    db.session.add(log)
    return log
