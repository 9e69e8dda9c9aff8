"""
Exception Handlers for the FastAPI Application.

Every error leaves the API as an ``ApiError`` body:

- business rule violations (``ApiException`` subclasses) keep their status
  and message
- request validation failures become 400 with one violation per field
- database integrity violations become 409
- anything else is logged with an error ID and full traceback and becomes 500
"""

import traceback
from typing import List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from minicommerce_api.core.errors import ApiException
from minicommerce_api.core.logging_config import get_logger
from minicommerce_api.core.models.io.errors import ApiError, FieldViolation

logger = get_logger(__name__)

VALIDATION_FAILED = "Validation failed"
INTEGRITY_VIOLATION = "Data integrity violation"
UNEXPECTED_ERROR = "Unexpected error"


def error_response(
    request: Request, status_code: int, message: str, violations: Optional[List[FieldViolation]] = None
) -> JSONResponse:
    body = ApiError.build(status_code, message, request.url.path, violations)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def api_exception_handler(request: Request, exc: ApiException) -> JSONResponse:
    """Render a business rule violation with its own status and message."""
    logger.debug(f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}")
    return error_response(request, exc.status_code, exc.message)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Render request validation errors as 400 with field violations.

    The violation's field is the last element of the error location, e.g.
    ``quantity`` for ``("body", "items", 0, "quantity")``.
    """
    violations = []
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = str(loc[-1]) if loc else ""
        violations.append(FieldViolation(field=field, message=error.get("msg", "")))
    return error_response(request, status.HTTP_400_BAD_REQUEST, VALIDATION_FAILED, violations)


async def integrity_exception_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Render a constraint violation that no service translated as 409."""
    logger.warning(f"Integrity violation in {request.method} {request.url.path}: {exc.orig}")
    return error_response(request, status.HTTP_409_CONFLICT, INTEGRITY_VIOLATION)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework HTTP errors (unknown route, wrong method, ...) in the same shape."""
    response = error_response(request, exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    This handler is called for any unhandled exception in the application.
    It logs the full error context under an error ID; the client only sees a
    generic message.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with a 500 ``ApiError`` body
    """
    error_id = id(exc)

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {str(exc)}",
        exc_info=True,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
        },
    )

    return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR)


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(ApiException, api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
