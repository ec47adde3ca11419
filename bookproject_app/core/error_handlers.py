"""
Error types and Flask error handlers.

API paths (``/api/...``) always answer with the JSON envelope
``{success, message, code[, details]}``; page requests get a flash message
and are sent back to the reading goal page.
"""

from typing import Any, Dict, Optional

from flask import current_app, flash, jsonify, redirect, request, url_for

API_PREFIX = '/api/'


class BookProjectError(Exception):
    """Base error; subclasses set ``code`` and ``status_code``."""

    code = 'UNKNOWN_ERROR'
    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        return {
            'success': False,
            'message': self.message,
            'code': self.code,
            'details': self.details,
        }


class ValidationError(BookProjectError):
    """Input rejected before it reaches the calculator (negative counts, unknown goal type...)."""

    code = 'VALIDATION_ERROR'
    status_code = 400

    def __init__(self, message: str = 'Validation failed', errors: Optional[Dict] = None):
        super().__init__(message, {'errors': errors} if errors else None)


def error_response(message: str, code: str = 'ERROR', status_code: int = 400, details: Dict = None) -> tuple:
    response = {'success': False, 'message': message, 'code': code}
    if details:
        response['details'] = details
    return jsonify(response), status_code


def success_response(data: Any = None, message: str = None) -> dict:
    response = {'success': True, 'data': data}
    if message:
        response['message'] = message
    return response


def _is_api_request() -> bool:
    return request.path.startswith(API_PREFIX)


def register_error_handlers(app):
    """Register error handlers with Flask app."""

    @app.errorhandler(BookProjectError)
    def handle_bookproject_error(error):
        current_app.logger.warning("%s on %s: %s", error.code, request.path, error.message)
        if _is_api_request():
            return jsonify(error.to_dict()), error.status_code
        flash(error.message, 'error')
        return redirect(url_for('goals.goal_view'))

    @app.errorhandler(404)
    def handle_not_found(error):
        if _is_api_request():
            return error_response('Endpoint not found', 'NOT_FOUND', 404)
        return error

    @app.errorhandler(500)
    def handle_internal_error(error):
        current_app.logger.exception('Internal server error')
        if _is_api_request():
            return error_response('Internal server error', 'SERVER_ERROR', 500)
        return error
