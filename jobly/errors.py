import logging

from flask import jsonify

logger = logging.getLogger(__name__)


class JoblyError(Exception):
    """Base class for every error the application maps to an HTTP response."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class ConfigurationError(JoblyError):
    message = "Missing required configuration"


class StorageCorruptError(JoblyError):
    message = "Database file is not a readable database image"


class HandleClosedError(JoblyError):
    message = "Database handle is closed"


class QuerySyntaxError(JoblyError):
    message = "Malformed SQL statement"


class ConstraintViolationError(JoblyError):
    status_code = 400
    message = "Constraint violation"


class ValidationError(JoblyError):
    status_code = 400
    message = "Invalid request"


class NotFoundError(JoblyError):
    status_code = 404
    message = "Not found"


class AuthError(JoblyError):
    status_code = 401
    message = "Invalid credentials"


class TokenInvalidError(AuthError):
    status_code = 403
    message = "Invalid token"


class ForbiddenError(JoblyError):
    status_code = 403
    message = "Forbidden"


# errors whose detail must never reach the client
_INTERNAL = (StorageCorruptError, HandleClosedError, QuerySyntaxError, ConfigurationError)


def register_error_handlers(app):
    @app.errorhandler(JoblyError)
    def handle_jobly_error(e):
        if isinstance(e, _INTERNAL):
            logger.error("Storage error while handling request: %s", e, exc_info=e)
            return jsonify({"error": "Internal server error"}), 500
        return jsonify({"error": e.message}), e.status_code


def register_jwt_callbacks(jwt):
    @jwt.unauthorized_loader
    def missing_token(reason):
        return jsonify({"error": "Missing token"}), 401

    @jwt.invalid_token_loader
    def invalid_token(reason):
        logger.info("Rejected bearer token: %s", reason)
        return jsonify({"error": TokenInvalidError.message}), 403

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return jsonify({"error": "Token expired"}), 401
