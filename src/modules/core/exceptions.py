"""API error contract.

Every error leaving the API has the shape ``{"error": str, "message": str}``
(``message`` omitted when empty).  Domain exceptions are translated by the
views; this module handles everything DRF routes through
``EXCEPTION_HANDLER``: parse/validation errors, unknown routes and
persistence failures.
"""

from __future__ import annotations

from decimal import InvalidOperation
from typing import Any

import structlog
from django.db import DatabaseError, IntegrityError
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = structlog.get_logger(__name__)

_ERROR_TITLES = {
    status.HTTP_400_BAD_REQUEST: "Invalid request",
    status.HTTP_404_NOT_FOUND: "Resource not found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method not allowed",
    status.HTTP_409_CONFLICT: "Conflict",
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: "Unsupported media type",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal server error",
}


def error_response(status_code: int, error: str, message: str = "") -> Response:
    """Build a response carrying the standard error body."""
    body: dict[str, str] = {"error": error}
    if message:
        body["message"] = message
    return Response(body, status=status_code)


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """DRF exception handler producing the ``{error, message}`` body."""
    if isinstance(exc, PydanticValidationError):
        return error_response(
            status.HTTP_400_BAD_REQUEST, "Validation failed", _format_pydantic(exc)
        )

    if isinstance(exc, IntegrityError):
        set_rollback()
        logger.warning("api.integrity_error", error=str(exc))
        return error_response(
            status.HTTP_409_CONFLICT, "Unique constraint violated", str(exc)
        )

    if isinstance(exc, InvalidOperation):
        set_rollback()
        logger.error("api.decimal_overflow", error=repr(exc))
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Persistence failure",
            "Amount does not fit its column.",
        )

    if isinstance(exc, DatabaseError):
        set_rollback()
        logger.error("api.persistence_error", error=str(exc))
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Persistence failure", str(exc)
        )

    response = exception_handler(exc, context)
    if response is None:
        return None

    title = _ERROR_TITLES.get(response.status_code, "Request failed")
    message = _flatten_detail(response.data)
    response.data = {"error": title}
    if message:
        response.data["message"] = message
    return response


def _format_pydantic(exc: PydanticValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        parts.append(f"{location}: {err['msg']}" if location else err["msg"])
    return "; ".join(parts)


def _flatten_detail(detail: Any, prefix: str = "") -> str:
    if isinstance(detail, dict):
        if set(detail) == {"detail"}:
            return _flatten_detail(detail["detail"], prefix)
        return "; ".join(
            _flatten_detail(value, f"{prefix}{key}: ") for key, value in detail.items()
        )
    if isinstance(detail, list):
        return "; ".join(_flatten_detail(item, prefix) for item in detail)
    return f"{prefix}{detail}"
