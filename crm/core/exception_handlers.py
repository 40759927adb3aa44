"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Every error leaves the API as
{"success": false, "error": {"message", "code", "details"?}}.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from crm.core.config import get_settings
from crm.domain.exceptions import CrmException

logger = logging.getLogger(__name__)

# Starlette HTTP status to error code for framework-raised errors
_HTTP_STATUS_CODE: dict[int, str] = {
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def error_response(
    status_code: int,
    message: str,
    code: str,
    details: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build the error envelope; details is omitted when empty."""
    error: dict[str, Any] = {"message": message, "code": code}
    if details:
        error["details"] = jsonable_encoder(details)
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error},
        headers=headers,
    )


def _crm_exception_handler(request: Request, exc: CrmException) -> JSONResponse:
    """Return the envelope with the exception's own status and code."""
    if exc.status_code >= 500:
        logger.error("%s: %s", exc.error_code, exc.message)
    return error_response(exc.status_code, exc.message, exc.error_code, exc.details)


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 with pydantic error details (field locations use camelCase aliases)."""
    details = [
        {"field": ".".join(str(p) for p in err.get("loc", ())), "message": err.get("msg")}
        for err in exc.errors()
    ]
    return error_response(400, "Validation failed", "VALIDATION_ERROR", details)


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return the envelope for routing errors (unknown route, wrong method)."""
    code = _HTTP_STATUS_CODE.get(exc.status_code, "HTTP_ERROR")
    if exc.status_code == 404 and exc.detail == "Not Found":
        message = f"Route {request.method} {request.url.path} not found"
    else:
        message = str(exc.detail)
    return error_response(exc.status_code, message, code, headers=exc.headers)


def _rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    return error_response(
        429, f"Rate limit exceeded: {exc.detail}", "RATE_LIMIT_EXCEEDED"
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include the exception text only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    message = str(exc) if settings.debug else "Internal server error"
    return error_response(500, message, "INTERNAL_ERROR")


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: CrmException (and subclasses),
    RequestValidationError, RateLimitExceeded, StarletteHTTPException,
    generic Exception.
    """
    app.add_exception_handler(CrmException, _crm_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
