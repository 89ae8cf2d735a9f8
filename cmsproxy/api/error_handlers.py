"""Global exception handlers.

- ProxyError subclasses -> their own status and ``{"error": {...}}`` envelope
- RequestValidationError -> 400 with field-level details
- anything else -> 500 without internal detail
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cmsproxy.errors import ProxyError, ValidationError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Attach every handler to *app*."""

    @app.exception_handler(ProxyError)
    async def proxy_error_handler(request: Request, exc: ProxyError) -> JSONResponse:
        logger.info(
            "%s %s -> %d %s: %s",
            request.method, request.url.path, exc.http_status, exc.code, exc.message,
            extra={"path": request.url.path, "error_code": exc.code},
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning(
            "Validation error on %s: %s", request.url.path, exc.errors(),
            extra={"path": request.url.path, "error_code": ValidationError.code},
        )
        error = ValidationError.from_pydantic(exc.errors())
        return JSONResponse(status_code=error.http_status, content=error.to_response())

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception on %s: %s", request.url.path, exc,
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                },
            },
        )
