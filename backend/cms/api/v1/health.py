from flask import jsonify
from cms.registry import get_registry
from . import v1_bp

@v1_bp.route('/health', methods=['GET'])
def health_check():
    registry = get_registry()
    return jsonify({
        "status": "ok",
        "service": "cms",
        "registry": {
            "components": len(registry),
            "fingerprint": registry.fingerprint,
        },
    })
