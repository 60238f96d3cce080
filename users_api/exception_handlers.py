"""
Name: FastAPI Exception Handlers

Responsibilities:
  - Convert internal exceptions to HTTP responses
  - Structured error responses (RFC 7807 style)
  - Centralized logging of errors with correlation IDs

Collaborators:
  - main.py: Registers these handlers
  - exceptions.py: UsersApiError, DatabaseError
  - error_responses.py: RFC 7807 body builders

Constraints:
  - All responses use RFC 7807 Problem Details format
  - 400 for request validation, 503 for database errors, 500 otherwise
  - Framework HTTP errors (404, 405) keep their status and headers
"""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_settings
from .error_responses import (
    AppHTTPException,
    ErrorCode,
    app_exception_handler,
    validation_error,
)
from .exceptions import DatabaseError, UsersApiError
from .logger import logger


def _request_id_from(request: Request) -> str | None:
    return getattr(getattr(request, "state", None), "request_id", None)


async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    """Handle database errors with structured response."""
    logger.error(
        "Database error",
        extra={
            "error_id": exc.error_id,
            "error_code": exc.error_code,
            "error_message": exc.message,
        },
    )
    app_exc = AppHTTPException(
        status_code=503,
        code=ErrorCode.DATABASE_ERROR,
        detail=exc.message,
        errors=[{"error_id": exc.error_id, "request_id": _request_id_from(request)}],
    )
    return await app_exception_handler(request, app_exc)


async def users_api_error_handler(
    request: Request, exc: UsersApiError
) -> JSONResponse:
    """Handle generic application errors."""
    logger.error(
        "Application error",
        extra={
            "error_id": exc.error_id,
            "error_code": exc.error_code,
            "error_message": exc.message,
        },
    )
    app_exc = AppHTTPException(
        status_code=500,
        code=ErrorCode.INTERNAL_ERROR,
        detail=exc.message,
        errors=[{"error_id": exc.error_id, "request_id": _request_id_from(request)}],
    )
    return await app_exception_handler(request, app_exc)


_STATUS_CODES = {
    400: ErrorCode.BAD_REQUEST,
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.METHOD_NOT_ALLOWED,
    413: ErrorCode.PAYLOAD_TOO_LARGE,
}


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Framework-raised HTTP errors (unknown route, wrong method)."""
    if exc.status_code in _STATUS_CODES:
        code = _STATUS_CODES[exc.status_code]
    elif exc.status_code < 500:
        code = ErrorCode.BAD_REQUEST
    else:
        code = ErrorCode.INTERNAL_ERROR
    app_exc = AppHTTPException(
        status_code=exc.status_code,
        code=code,
        detail=str(exc.detail),
    )
    app_exc.headers = exc.headers
    return await app_exception_handler(request, app_exc)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed query parameters or bodies are client errors (400)."""
    errors = [
        {
            "loc": [str(part) for part in err.get("loc", ())],
            "msg": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in exc.errors()
    ]
    logger.info("Request validation failed", extra={"validation_errors": errors})
    return await app_exception_handler(
        request, validation_error("Request validation failed.", errors)
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback handler for unhandled exceptions."""
    request_id = _request_id_from(request)
    logger.error(
        "Unhandled exception",
        exc_info=exc,
        extra={"error": str(exc)},
    )

    # R: Hide internals in production
    detail = (
        "An unexpected error occurred"
        if get_settings().is_production()
        else str(exc) or "An unexpected error occurred"
    )
    app_exc = AppHTTPException(
        status_code=500,
        code=ErrorCode.INTERNAL_ERROR,
        detail=detail,
        errors=[{"request_id": request_id}],
    )
    return await app_exception_handler(request, app_exc)


def register_exception_handlers(app) -> None:
    """
    Register all exception handlers on the FastAPI app.

    Usage:
        from .exception_handlers import register_exception_handlers
        register_exception_handlers(app)
    """
    app.add_exception_handler(DatabaseError, database_error_handler)
    app.add_exception_handler(UsersApiError, users_api_error_handler)
    app.add_exception_handler(AppHTTPException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
