# cms/api/v1/public.py
"""
Public read endpoints. No JWT; the tenant comes from X-Tenant-ID and only
published snapshots are returned.
"""
from flask import g, jsonify
from cms.utils.decorators import feature_enabled
from cms.models.collection_item import CollectionItem
from cms.application.cms import queries
from cms.normalizers.collection import normalize_item
from cms.normalizers.page import normalize_public_page
from . import v1_bp


@v1_bp.route("/public/pages/<slug>", methods=["GET"])
@feature_enabled("cms")
def get_public_page(slug):
    page = queries.get_published_page(tenant_id=g.current_tenant.id, slug=slug)
    return jsonify(normalize_public_page(page)), 200


@v1_bp.route("/public/collections/<collection_slug>/items", methods=["GET"])
@feature_enabled("collections")
def list_public_items(collection_slug):
    collection, query = queries.list_published_items(
        tenant_id=g.current_tenant.id, collection_slug=collection_slug
    )
    items = query.order_by(CollectionItem.published_at.desc()).all()

    return jsonify({
        "collection": {"name": collection.name, "slug": collection.slug},
        "data": [normalize_item(i) for i in items],
    }), 200


@v1_bp.route("/public/collections/<collection_slug>/items/<item_id>", methods=["GET"])
@feature_enabled("collections")
def get_public_item(collection_slug, item_id):
    item = queries.get_published_item(
        tenant_id=g.current_tenant.id,
        collection_slug=collection_slug,
        item_id=item_id,
    )
    return jsonify(normalize_item(item)), 200
