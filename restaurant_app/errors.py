"""
API Errors

Every error leaves the application as a JSON body with a ``message`` key.
Validation failures also carry an ``errors`` list of ``{field, message}``.
"""

import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base class for errors that map directly onto an HTTP response."""
    status_code = 500
    default_message = 'Server error'

    def __init__(self, message=None, errors=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.errors = errors

    def to_dict(self):
        body = {'message': self.message}
        if self.errors:
            body['errors'] = self.errors
        return body


class ValidationError(APIError):
    status_code = 400
    default_message = 'Invalid request data'


class AuthenticationError(APIError):
    status_code = 401
    default_message = 'Authentication required'


class ForbiddenError(APIError):
    status_code = 403
    default_message = 'Unauthorized access'


class NotFoundError(APIError):
    status_code = 404
    default_message = 'Not found'


def register_error_handlers(app):
    """Install JSON handlers for API errors, HTTP errors and crashes."""

    @app.errorhandler(APIError)
    def handle_api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({'message': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception('Unhandled error: %s', error)
        return jsonify({'message': 'Server error'}), 500
