from __future__ import annotations

from typing import Any

from flask import current_app, jsonify

from ..core.exceptions import DomainError, PersistenceError

INTERNAL_ERROR_MESSAGE = "Error interno del servidor"


def api_success(data: Any):
    return jsonify({"success": True, "data": data})


def api_error(message: str, status: int, *, code: str):
    return jsonify({"success": False, "error": message, "code": code}), status


def api_domain_error(exc: DomainError, *, persistence_message: str = INTERNAL_ERROR_MESSAGE):
    """Render a domain error as the JSON envelope.

    Persistence failures are logged and replaced by a generic message; every
    other domain error is actionable and shown verbatim.
    """

    if isinstance(exc, PersistenceError):
        current_app.logger.error("Persistence failure: %s", exc, exc_info=exc)
        return api_error(persistence_message, exc.http_status, code=exc.code)
    return api_error(str(exc), exc.http_status, code=exc.code)


def api_internal_error(exc: Exception):
    current_app.logger.error("Unexpected error", exc_info=exc)
    return api_error(INTERNAL_ERROR_MESSAGE, 500, code="INTERNAL")
