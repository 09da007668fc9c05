from flask import request, jsonify, g
from flask_jwt_extended import jwt_required
from werkzeug.exceptions import BadRequest
from cms.utils.decorators import tenant_required, roles_required
from cms.utils.pagination import paginate_cursor, parse_limit
from cms.models.audit_log import AuditLog
from cms.normalizers.audit import ENTITY_TYPES, normalize_audit_log
from cms.normalizers.pagination import normalize_pagination
from . import v1_bp


@v1_bp.route("/audit", methods=["GET"])
@jwt_required()
@tenant_required
@roles_required("admin")
def list_audit_logs():
    tenant = g.current_tenant

    query = AuditLog.query.filter(
        AuditLog.tenant_id == tenant.id
    )

    # Optional filters
    if action := request.args.get("action"):
        query = query.filter(AuditLog.action == action)

    if entity_type := request.args.get("entity_type"):
        if entity_type not in ENTITY_TYPES:
            raise BadRequest(f"entity_type must be one of {', '.join(ENTITY_TYPES)}")
        query = query.filter(AuditLog.entity_type == entity_type)

    if entity_id := request.args.get("entity_id"):
        query = query.filter(AuditLog.entity_id == entity_id)

    logs, cursor = paginate_cursor(
        query,
        model=AuditLog,
        limit=parse_limit(request.args.get("limit")),
        cursor=request.args.get("cursor"),
    )

    return jsonify(normalize_pagination(logs, normalize_audit_log, cursor=cursor)), 200
