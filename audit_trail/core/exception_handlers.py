"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and infrastructure
exceptions to HTTP responses (SRP, OCP for adding new handlers).
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from audit_trail.core.config import get_settings
from audit_trail.domain.exceptions import AuditTrailException
from audit_trail.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

# Map error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "RECORD_NOT_FOUND": 404,
    "RECORD_ALREADY_EXISTS": 409,
    "RECORD_STORE_UNAVAILABLE": 503,
    "RECORD_STORE_READ_ERROR": 502,
    "RECORD_STORE_WRITE_ERROR": 502,
}


def _audit_trail_exception_handler(
    request: Request, exc: AuditTrailException
) -> JSONResponse:
    """Return JSON from AuditTrailException.to_dict() with appropriate status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error("%s on %s: %s", exc.error_code, request.url.path, exc.message)
    return JSONResponse(
        status_code=status,
        content=exc.to_dict(),
    )


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 naming the first offending parameter (same shape as ValidationException)."""
    errors = jsonable_encoder(exc.errors())
    field = None
    if errors:
        loc = [str(part) for part in errors[0].get("loc", ()) if part not in ("query", "path", "body")]
        field = ".".join(loc) or None
    return JSONResponse(
        status_code=400,
        content={
            "error": "VALIDATION_ERROR",
            "message": f"Invalid value for {field}" if field else "Request validation failed",
            "details": {"field": field, "errors": errors},
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: AuditTrailException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(AuditTrailException, _audit_trail_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
