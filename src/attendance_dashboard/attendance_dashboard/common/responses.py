from __future__ import annotations

from flask import jsonify

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    StoreError,
    ValidationError,
)

_STATUS_CODES = {
    ValidationError: 400,
    AuthenticationError: 401,
    AuthorizationError: 403,
    NotFoundError: 404,
    StoreError: 503,
}


def ok(payload: dict | None = None, *, status: int = 200):
    body = {"success": True}
    body.update(payload or {})
    return jsonify(body), status


def fail(message: str, *, status: int):
    return jsonify({"success": False, "message": message}), status


def domain_error(e: DomainError):
    """JSON response for a domain error; store failures stay non-fatal (503)."""
    for exc_type, status in _STATUS_CODES.items():
        if isinstance(e, exc_type):
            return fail(str(e), status=status)
    return fail(str(e), status=400)
