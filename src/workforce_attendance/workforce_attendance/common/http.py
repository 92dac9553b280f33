from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import (
    AuthorizationError,
    ConflictError,
    DomainError,
    LocationUnavailableError,
    NotFoundError,
    PersistenceError,
    PolicyBlockedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Most specific first: ConflictError is a PersistenceError.
_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (PolicyBlockedError, 409),
    (ConflictError, 409),
    (LocationUnavailableError, 422),
    (PersistenceError, 503),
)


def status_for(exc: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 400


def error_response(exc: DomainError):
    status = status_for(exc)
    if status >= 500:
        logger.error("Storage failure on %s %s: %s", request.method, request.path, exc)
    return jsonify({"success": False, "error": type(exc).__name__, "message": str(exc)}), status


def ok(status: int = 200, **payload):
    return jsonify({"success": True, **payload}), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def current_employee_id() -> int:
    return int(session["employee_id"])


def current_role() -> Role:
    try:
        return Role(session.get("role") or Role.EMPLOYEE.value)
    except ValueError:
        return Role.EMPLOYEE


def login_required(view):
    """The identity provider puts employee_id/role in the session; trust them as given."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "employee_id" not in session:
            return jsonify({"success": False, "message": "Please sign in to continue"}), 401
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "employee_id" not in session:
            return jsonify({"success": False, "message": "Please sign in to continue"}), 401
        if not current_role().is_admin:
            return jsonify({"success": False, "message": "Administrator access required"}), 403
        return view(*args, **kwargs)

    return wrapper


def refused(status: int = 409, **payload):
    return jsonify({"success": False, **payload}), status
