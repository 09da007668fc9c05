# cms/api/v1/collections.py
from flask import g, request, jsonify
from flask_jwt_extended import jwt_required
from cms.utils.decorators import tenant_required, roles_required, feature_enabled
from cms.utils.pagination import paginate_cursor, parse_limit
from cms.models.collection import Collection
from cms.models.collection_item import CollectionItem
from cms.domain.documents import COLLECTION_ITEM
from cms.domain.exceptions import DocumentNotFound
from cms.application.cms import collections as collections_uc
from cms.application.cms import queries
from cms.application.cms.save_draft import save_draft
from cms.application.cms.publish import publish, unpublish
from cms.application.cms.rollback import rollback
from cms.normalizers.collection import normalize_collection, normalize_item
from cms.normalizers.page import normalize_editor_state
from cms.normalizers.revision import normalize_revision, normalize_publish_state
from cms.normalizers.pagination import normalize_pagination
from . import v1_bp

EDITOR_ROLES = ("admin", "editor")


def _item_in_collection(collection_id, item_id):
    """Resolve an item and make sure it belongs to the collection in the URL."""
    collections_uc.get_collection(
        tenant_id=g.current_tenant.id, collection_id=collection_id
    )
    item = queries.get_document(
        COLLECTION_ITEM, tenant_id=g.current_tenant.id, document_id=item_id
    )
    if item.collection_id != collection_id:
        raise DocumentNotFound(item_id)
    return item


# ------------------------
# Collections
# ------------------------

@v1_bp.route("/collections", methods=["POST"])
@jwt_required()
@tenant_required
@roles_required("admin")
@feature_enabled("collections")
def create_collection():
    collection = collections_uc.create_collection(
        tenant_id=g.current_tenant.id,
        actor_id=g.current_user_id,
        data=request.get_json(silent=True) or {},
    )

    return jsonify(normalize_collection(collection)), 201


@v1_bp.route("/collections", methods=["GET"])
@jwt_required()
@tenant_required
@roles_required(*EDITOR_ROLES)
@feature_enabled("collections")
def list_collections():
    collections, cursor = paginate_cursor(
        queries.list_collections(tenant_id=g.current_tenant.id),
        model=Collection,
        limit=parse_limit(request.args.get("limit")),
        cursor=request.args.get("cursor"),
    )

    return jsonify(
        normalize_pagination(collections, normalize_collection, cursor=cursor)
    ), 200


@v1_bp.route("/collections/<collection_id>", methods=["GET"])
@jwt_required()
@tenant_required
@roles_required(*EDITOR_ROLES)
@feature_enabled("collections")
def get_collection(collection_id):
    collection = collections_uc.get_collection(
        tenant_id=g.current_tenant.id, collection_id=collection_id
    )
    return jsonify(normalize_collection(collection)), 200


@v1_bp.route("/collections/<collection_id>", methods=["PATCH"])
@jwt_required()
@tenant_required
@roles_required("admin")
@feature_enabled("collections")
def update_collection(collection_id):
    collection = collections_uc.update_collection(
        tenant_id=g.current_tenant.id,
        collection_id=collection_id,
        actor_id=g.current_user_id,
        data=request.get_json(silent=True) or {},
    )
    return jsonify(normalize_collection(collection)), 200


@v1_bp.route("/collections/<collection_id>", methods=["DELETE"])
@jwt_required()
@tenant_required
@roles_required("admin")
@feature_enabled("collections")
def delete_collection(collection_id):
    collections_uc.delete_collection(
        tenant_id=g.current_tenant.id,
        collection_id=collection_id,
        actor_id=g.current_user_id,
    )
    return jsonify({"message": "Collection deleted successfully"}), 200


# ------------------------
# Items
# ------------------------

@v1_bp.route("/collections/<collection_id>/items", methods=["POST"])
@jwt_required()
@tenant_required
@roles_required(*EDITOR_ROLES)
@feature_enabled("collections")
def create_item(collection_id):
    body = request.get_json(silent=True) or {}

    item, revision = collections_uc.create_item(
        tenant_id=g.current_tenant.id,
        collection_id=collection_id,
        actor_id=g.current_user_id,
        data=body.get("data"),
    )

    return jsonify({
        "id": item.id,
        "version": revision.version if revision else None,
        "message": "Item created successfully"
    }), 201


@v1_bp.route("/collections/<collection_id>/items", methods=["GET"])
@jwt_required()
@tenant_required
@roles_required(*EDITOR_ROLES)
@feature_enabled("collections")
def list_items(collection_id):
    collections_uc.get_collection(
        tenant_id=g.current_tenant.id, collection_id=collection_id
    )

    items, cursor = paginate_cursor(
        queries.list_items(
            tenant_id=g.current_tenant.id,
            collection_id=collection_id,
            status=request.args.get("status"),
        ),
        model=CollectionItem,
        limit=parse_limit(request.args.get("limit")),
        cursor=request.args.get("cursor"),
    )

    return jsonify(
        normalize_pagination(items, lambda i: normalize_item(i, admin=True), cursor=cursor)
    ), 200


@v1_bp.route("/collections/<collection_id>/items/<item_id>", methods=["GET"])
@jwt_required()
@tenant_required
@roles_required(*EDITOR_ROLES)
@feature_enabled("collections")
def get_item(collection_id, item_id):
    _item_in_collection(collection_id, item_id)

    state = queries.get_editor_state(
        COLLECTION_ITEM, tenant_id=g.current_tenant.id, document_id=item_id
    )

    data = normalize_item(state["document"], admin=True)
    data.update(normalize_editor_state(state))
    return jsonify(data), 200


@v1_bp.route("/collections/<collection_id>/items/<item_id>", methods=["DELETE"])
@jwt_required()
@tenant_required
@roles_required("admin")
@feature_enabled("collections")
def delete_item(collection_id, item_id):
    _item_in_collection(collection_id, item_id)

    collections_uc.delete_item(
        tenant_id=g.current_tenant.id,
        item_id=item_id,
        actor_id=g.current_user_id,
    )
    return jsonify({"message": "Item deleted successfully"}), 200


@v1_bp.route("/collections/<collection_id>/items/<item_id>/draft", methods=["PUT"])
@jwt_required()
@tenant_required
@roles_required(*EDITOR_ROLES)
@feature_enabled("collections")
def save_item_draft(collection_id, item_id):
    _item_in_collection(collection_id, item_id)
    body = request.get_json(silent=True) or {}

    item, revision = save_draft(
        COLLECTION_ITEM,
        tenant_id=g.current_tenant.id,
        document_id=item_id,
        actor_id=g.current_user_id,
        content=body.get("data"),
        note=body.get("note"),
    )

    return jsonify({
        "revision": normalize_revision(revision),
        **normalize_publish_state(item),
    }), 200


@v1_bp.route("/collections/<collection_id>/items/<item_id>/publish", methods=["POST"])
@jwt_required()
@tenant_required
@roles_required(*EDITOR_ROLES)
@feature_enabled("collections")
def publish_item(collection_id, item_id):
    _item_in_collection(collection_id, item_id)
    body = request.get_json(silent=True) or {}

    item, revision = publish(
        COLLECTION_ITEM,
        tenant_id=g.current_tenant.id,
        document_id=item_id,
        actor_id=g.current_user_id,
        content=body.get("data"),
    )

    return jsonify({
        "message": "Item published",
        "revision": normalize_revision(revision),
        **normalize_publish_state(item),
    }), 200


@v1_bp.route("/collections/<collection_id>/items/<item_id>/unpublish", methods=["POST"])
@jwt_required()
@tenant_required
@roles_required(*EDITOR_ROLES)
@feature_enabled("collections")
def unpublish_item(collection_id, item_id):
    _item_in_collection(collection_id, item_id)

    item = unpublish(
        COLLECTION_ITEM,
        tenant_id=g.current_tenant.id,
        document_id=item_id,
        actor_id=g.current_user_id,
    )

    return jsonify({
        "message": "Item unpublished successfully",
        **normalize_publish_state(item),
    }), 200


@v1_bp.route("/collections/<collection_id>/items/<item_id>/revisions", methods=["GET"])
@jwt_required()
@tenant_required
@roles_required(*EDITOR_ROLES)
@feature_enabled("collections")
def list_item_revisions(collection_id, item_id):
    _item_in_collection(collection_id, item_id)

    revisions = queries.list_revisions(
        COLLECTION_ITEM, tenant_id=g.current_tenant.id, document_id=item_id
    )
    return jsonify({"data": [normalize_revision(r) for r in revisions]}), 200


@v1_bp.route(
    "/collections/<collection_id>/items/<item_id>/rollback/<revision_id>",
    methods=["POST"],
)
@jwt_required()
@tenant_required
@roles_required(*EDITOR_ROLES)
@feature_enabled("collections")
def rollback_item(collection_id, item_id, revision_id):
    _item_in_collection(collection_id, item_id)

    item, revision = rollback(
        COLLECTION_ITEM,
        tenant_id=g.current_tenant.id,
        document_id=item_id,
        revision_id=revision_id,
        actor_id=g.current_user_id,
    )

    return jsonify({
        "message": f"Rolled back as version {revision.version}",
        "revision": normalize_revision(revision),
        **normalize_publish_state(item),
    }), 200
