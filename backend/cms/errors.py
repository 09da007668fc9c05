from flask import jsonify
from cms.domain.exceptions import (
    IllegalTransition,
    InvalidContent,
    InvariantViolation,
    ResourceNotFound,
    SlugConflict,
)


def _error_response(error, status_code):
    response = jsonify({
        "error": type(error).__name__,
        "message": str(error)
    })
    response.status_code = status_code
    return response


def register_error_handlers(app):
    # Flask picks the most specific registered class, so the subclasses
    # below win over the InvariantViolation fallback.
    @app.errorhandler(InvalidContent)
    def handle_invalid_content(error):
        return _error_response(error, 422)

    @app.errorhandler(IllegalTransition)
    @app.errorhandler(SlugConflict)
    def handle_conflict(error):
        return _error_response(error, 409)

    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        return _error_response(error, 400)

    @app.errorhandler(ResourceNotFound)
    def handle_not_found(error):
        return _error_response(error, 404)
