"""
Error taxonomy for the API and the JSON error handlers that serialize it.

Services raise these exceptions; the handlers registered on the app turn
them into {'success': False, 'error': ...} responses with the matching
status code.
"""
import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class HealthHubError(Exception):
    """Base class for errors surfaced to API callers"""
    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_dict(self):
        return {'success': False, 'error': self.message}


class ValidationError(HealthHubError):
    """Missing or malformed input, rejected before any write"""
    status_code = 400
    default_message = 'Invalid request'

    def __init__(self, message=None, field=None):
        super().__init__(message)
        self.field = field

    def to_dict(self):
        payload = super().to_dict()
        if self.field:
            payload['field'] = self.field
        return payload


class AuthenticationError(HealthHubError):
    status_code = 401
    default_message = 'Authentication required'


class AuthorizationError(HealthHubError):
    status_code = 403
    default_message = 'Not authorized'


class NotFoundError(HealthHubError):
    status_code = 404
    default_message = 'Not found'


class UnexpectedError(HealthHubError):
    status_code = 500
    default_message = 'Internal server error. Check server logs for details.'


def _auth_failure(message):
    return jsonify(AuthenticationError(message).to_dict()), 401


def register_error_handlers(app, jwt):
    """Attach JSON error handlers to the app and the JWT manager"""

    @app.errorhandler(HealthHubError)
    def handle_healthhub_error(error):
        if error.status_code >= 500:
            logger.error("Request failed: %s", error.message)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({
            'success': False,
            'error': 'Endpoint not found'
        }), 404

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({
            'success': False,
            'error': error.description or error.name
        }), error.code

    @app.errorhandler(Exception)
    def handle_exception(e):
        logger.error(f"Unhandled exception: {e}", exc_info=True)
        return jsonify(UnexpectedError().to_dict()), 500

    # Token problems all surface as 401 with the same envelope
    @jwt.unauthorized_loader
    def missing_token(reason):
        return _auth_failure('Authentication required')

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return _auth_failure('Invalid token')

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return _auth_failure('Token has expired')

    @jwt.revoked_token_loader
    def revoked_token(jwt_header, jwt_payload):
        return _auth_failure('Token has been revoked')
