# cms/api/v1/registry.py
from flask import request, jsonify
from flask_jwt_extended import jwt_required
from cms.registry import get_registry
from cms.registry.renderer_config import build_default_props, map_prop_field
from cms.utils.decorators import tenant_required
from . import v1_bp


def _truthy(value):
    return (value or "").lower() in {"1", "true", "yes"}


@v1_bp.route("/registry/components", methods=["GET"])
@jwt_required()
@tenant_required
def list_components():
    registry = get_registry()

    if _truthy(request.args.get("include_deprecated")):
        definitions = registry.list_types()
    else:
        definitions = registry.available_types()

    return jsonify({
        "data": [d.summary() for d in definitions],
        "meta": {"fingerprint": registry.fingerprint},
    }), 200


@v1_bp.route("/registry/components/<slug>", methods=["GET"])
@jwt_required()
@tenant_required
def get_component(slug):
    definition = get_registry().get_type(slug)

    data = definition.to_dict()
    data["editor"] = {
        "fields": {p.name: map_prop_field(p) for p in definition.prop_schema},
        "default_props": build_default_props(definition),
    }
    return jsonify(data), 200


@v1_bp.route("/registry/categories", methods=["GET"])
@jwt_required()
@tenant_required
def list_categories():
    return jsonify(get_registry().categories()), 200
