from __future__ import annotations

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

_STATUS = (
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
    (ValidationError, 400),
)


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_ok(message: str, **extra):
    return jsonify({"success": True, "message": message, **extra})


def register_error_handlers(app: Flask) -> None:
    def handle_domain_error(e: DomainError):
        for exc_type, status in _STATUS:
            if isinstance(e, exc_type):
                return json_error(str(e), status)
        current_app.logger.error("Unhandled domain error: %s", e)
        return json_error("Internal server error", 500)

    def handle_http_error(e: HTTPException):
        return json_error(e.description or e.name, e.code or 500)

    def handle_unexpected(e: Exception):
        current_app.logger.exception("Unhandled error")
        return json_error("Internal server error", 500)

    app.register_error_handler(DomainError, handle_domain_error)
    app.register_error_handler(HTTPException, handle_http_error)
    app.register_error_handler(Exception, handle_unexpected)


def json_body() -> dict:
    """Request JSON object; a missing body reads as ``{}``, any other shape is rejected."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
