# cms/api/v1/pages.py
from flask import g, request, jsonify, current_app
from flask_jwt_extended import jwt_required
from cms.utils.decorators import tenant_required, roles_required, feature_enabled
from cms.utils.pagination import paginate_cursor, parse_limit
from cms.models.page import Page
from cms.domain.documents import PAGE
from cms.application.cms.create_page import create_page as create_page_uc
from cms.application.cms.update_page import update_page as update_page_uc
from cms.application.cms.delete_page import delete_page as delete_page_uc
from cms.application.cms.save_draft import save_draft
from cms.application.cms.publish import publish, unpublish
from cms.application.cms.rollback import rollback
from cms.application.cms import queries
from cms.normalizers.page import normalize_page, normalize_editor_state
from cms.normalizers.revision import normalize_revision, normalize_publish_state
from cms.normalizers.pagination import normalize_pagination
from . import v1_bp

EDITOR_ROLES = ("admin", "editor")


# ------------------------
# Pages
# ------------------------

@v1_bp.route("/pages", methods=["POST"])
@jwt_required()
@tenant_required
@roles_required(*EDITOR_ROLES)
@feature_enabled("cms")
def create_page():
    data = request.get_json(silent=True) or {}

    page, revision = create_page_uc(
        tenant_id=g.current_tenant.id,
        actor_id=g.current_user_id,
        data=data,
    )

    return jsonify({
        "id": page.id,
        "version": revision.version if revision else None,
        "message": "Page created successfully"
    }), 201


@v1_bp.route("/pages", methods=["GET"])
@jwt_required()
@tenant_required
@roles_required(*EDITOR_ROLES)
@feature_enabled("cms")
def list_pages():
    query = queries.list_pages(
        tenant_id=g.current_tenant.id,
        status=request.args.get("status"),  # DRAFT | PUBLISHED | None
    )

    pages, cursor = paginate_cursor(
        query,
        model=Page,
        limit=parse_limit(request.args.get("limit")),
        cursor=request.args.get("cursor"),
    )

    return jsonify(
        normalize_pagination(pages, lambda p: normalize_page(p, admin=True), cursor=cursor)
    ), 200


@v1_bp.route("/pages/<page_id>", methods=["GET"])
@jwt_required()
@tenant_required
@roles_required(*EDITOR_ROLES)
@feature_enabled("cms")
def get_page(page_id):
    state = queries.get_editor_state(
        PAGE, tenant_id=g.current_tenant.id, document_id=page_id
    )

    data = normalize_page(state["document"], admin=True)
    data.update(normalize_editor_state(state))
    return jsonify(data), 200


@v1_bp.route("/pages/<page_id>", methods=["PATCH"])
@jwt_required()
@tenant_required
@roles_required(*EDITOR_ROLES)
@feature_enabled("cms")
def update_page(page_id):
    page = update_page_uc(
        tenant_id=g.current_tenant.id,
        page_id=page_id,
        actor_id=g.current_user_id,
        data=request.get_json(silent=True) or {},
    )

    return jsonify(normalize_page(page, admin=True)), 200


@v1_bp.route("/pages/<page_id>", methods=["DELETE"])
@jwt_required()
@tenant_required
@roles_required("admin")
@feature_enabled("cms")
def delete_page(page_id):
    delete_page_uc(
        tenant_id=g.current_tenant.id,
        page_id=page_id,
        actor_id=g.current_user_id,
    )

    return jsonify({"message": "Page deleted successfully"}), 200


# ------------------------
# Revisions & lifecycle
# ------------------------

@v1_bp.route("/pages/<page_id>/draft", methods=["PUT"])
@jwt_required()
@tenant_required
@roles_required(*EDITOR_ROLES)
@feature_enabled("cms")
def save_page_draft(page_id):
    data = request.get_json(silent=True) or {}

    page, revision = save_draft(
        PAGE,
        tenant_id=g.current_tenant.id,
        document_id=page_id,
        actor_id=g.current_user_id,
        content=data.get("content"),
        note=data.get("note"),
    )

    return jsonify({
        "revision": normalize_revision(revision),
        **normalize_publish_state(page),
    }), 200


@v1_bp.route("/pages/<page_id>/publish", methods=["POST"])
@jwt_required()
@tenant_required
@roles_required(*EDITOR_ROLES)
@feature_enabled("cms")
def publish_page(page_id):
    data = request.get_json(silent=True) or {}

    page, revision = publish(
        PAGE,
        tenant_id=g.current_tenant.id,
        document_id=page_id,
        actor_id=g.current_user_id,
        content=data.get("content"),
    )
    current_app.logger.info("Published page %s at v%d", page.id, revision.version)

    return jsonify({
        "message": "Page published",
        "revision": normalize_revision(revision),
        **normalize_publish_state(page),
    }), 200


@v1_bp.route("/pages/<page_id>/unpublish", methods=["POST"])
@jwt_required()
@tenant_required
@roles_required(*EDITOR_ROLES)
@feature_enabled("cms")
def unpublish_page(page_id):
    page = unpublish(
        PAGE,
        tenant_id=g.current_tenant.id,
        document_id=page_id,
        actor_id=g.current_user_id,
    )

    return jsonify({
        "message": "Page unpublished successfully",
        **normalize_publish_state(page),
    }), 200


@v1_bp.route("/pages/<page_id>/revisions", methods=["GET"])
@jwt_required()
@tenant_required
@roles_required(*EDITOR_ROLES)
@feature_enabled("cms")
def list_page_revisions(page_id):
    revisions = queries.list_revisions(
        PAGE, tenant_id=g.current_tenant.id, document_id=page_id
    )

    return jsonify({"data": [normalize_revision(r) for r in revisions]}), 200


@v1_bp.route("/pages/<page_id>/revisions/<revision_id>", methods=["GET"])
@jwt_required()
@tenant_required
@roles_required(*EDITOR_ROLES)
@feature_enabled("cms")
def get_page_revision(page_id, revision_id):
    revision = queries.get_revision(
        PAGE,
        tenant_id=g.current_tenant.id,
        document_id=page_id,
        revision_id=revision_id,
    )

    return jsonify(normalize_revision(revision, include_content=True)), 200


@v1_bp.route("/pages/<page_id>/rollback/<revision_id>", methods=["POST"])
@jwt_required()
@tenant_required
@roles_required(*EDITOR_ROLES)
@feature_enabled("cms")
def rollback_page(page_id, revision_id):
    page, revision = rollback(
        PAGE,
        tenant_id=g.current_tenant.id,
        document_id=page_id,
        revision_id=revision_id,
        actor_id=g.current_user_id,
    )

    return jsonify({
        "message": f"Rolled back as version {revision.version}",
        "revision": normalize_revision(revision),
        **normalize_publish_state(page),
    }), 200
