from __future__ import annotations

import logging

from flask import jsonify

from ..core.exceptions import (
    ConstraintViolationError,
    DomainError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_CODES = (
    (ValidationError, 400),
    (NotFoundError, 404),
    (ConstraintViolationError, 409),
    (StoreUnavailableError, 503),
)


def ok(**payload):
    return jsonify({"success": True, **payload}), 200


def fail(message: str, status_code: int):
    return jsonify({"success": False, "message": message}), status_code


def error_response(exc: Exception, *, action: str):
    """Turn an exception raised by a use case into a JSON error response."""

    for exc_type, status_code in _STATUS_CODES:
        if isinstance(exc, exc_type):
            if status_code >= 500:
                logger.error("%s failed: %s", action, exc)
            return fail(str(exc), status_code)

    if isinstance(exc, DomainError):
        return fail(str(exc), 400)

    logger.exception("%s failed", action)
    return fail(f"System error while trying to {action}", 500)
