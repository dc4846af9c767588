"""Error Handlers — every failure leaves the API in the Pollen8Error envelope.

Invariants:
    - Pollen8Error → its own to_response(), status from http_status
    - RequestValidationError → InputValidationError envelope (400) plus field details
    - Exception (catch-all) → INTERNAL_ERROR envelope (500), never leaks internals
    - 4xx domain errors log at WARNING, 5xx at ERROR; error context fields
      (user_id, invite_id, operation) travel as structured log extras

Design Decisions:
    - Validation and catch-all responses are built from Pollen8Error instances,
      so clients parse one shape (code, category, severity, timestamp, context)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from pollen8.core.errors import (
    ErrorCategory, ErrorSeverity, InputValidationError, Pollen8Error,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(Pollen8Error, pollen8_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


def _log_extra(request: Request, exc: Pollen8Error) -> dict:
    ctx = exc.context
    return {
        "error_code": exc.code,
        "path": request.url.path,
        "user_id": ctx.user_id,
        "invite_id": ctx.invite_id,
        "operation": ctx.operation,
    }


def _respond(request: Request, exc: Pollen8Error, body: dict | None = None):
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(f"{exc.code}: {exc.message}", extra=_log_extra(request, exc))
    return JSONResponse(
        status_code=exc.http_status, content=body or exc.to_response(),
    )


async def pollen8_error_handler(request: Request, exc: Pollen8Error):
    return _respond(request, exc)


async def validation_error_handler(
    request: Request, exc: RequestValidationError,
):
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    first_field = details[0]["field"] if details else "request"
    error = InputValidationError("Invalid request data", first_field)
    body = error.to_response()
    body["error"]["details"] = details
    return _respond(request, error, body)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True, extra={"path": request.url.path},
    )
    error = Pollen8Error(
        "An unexpected error occurred", "INTERNAL_ERROR",
        ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    return JSONResponse(status_code=error.http_status, content=error.to_response())
