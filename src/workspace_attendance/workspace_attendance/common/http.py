from __future__ import annotations

import logging
from datetime import date
from functools import wraps
from typing import Optional

from flask import Flask, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    AuthorizationError,
    DomainError,
    DuplicateEntry,
    PendingTaskComments,
    StoreUnavailable,
    ValidationError,
)
from .datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"success": False, "code": "unauthenticated", "message": "Unauthorized"}), 401
        return view(*args, **kwargs)

    return wrapper


def current_user_id() -> str:
    return str(session["user_id"])


def request_payload() -> dict:
    return request.get_json(silent=True) or {}


def workspace_id_arg() -> str:
    value = request.args.get("workspaceId") or request_payload().get("workspaceId") or ""
    if not str(value).strip():
        raise ValidationError("Workspace ID is required")
    return str(value).strip()


def date_arg(name: str) -> Optional[date]:
    value = request.args.get(name)
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError as e:
        raise ValidationError(f"{name} must be a YYYY-MM-DD date") from e


def _status_for(error: DomainError) -> int:
    if isinstance(error, (PendingTaskComments, DuplicateEntry)):
        return 409
    if isinstance(error, ValidationError):
        return 400
    if isinstance(error, AuthorizationError):
        return 403
    if isinstance(error, StoreUnavailable):
        return 503
    return 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        body = {"success": False, "code": e.code, "message": str(e)}
        if isinstance(e, PendingTaskComments):
            body["items"] = e.item_ids
        return jsonify(body), _status_for(e)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"success": False, "code": "internal_error", "message": "Internal server error"}), 500
