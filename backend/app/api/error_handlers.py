"""Error Handlers: global exception handlers for the gateway.

Invariants:
    - GatewayError → its own status + {"error": message}, logged at the level its
      severity names; the internal detail goes to the log only
    - Unmatched route (Starlette 404/405) → 404 {"error": "Route not found"}
    - RequestValidationError → 400 {"error": "Invalid request data"}
    - Exception (catch-all) → 500 {"error": "Internal server error"}, never leaks internal details
    - Every server-side fault is logged with traceback before the response is sent

Design Decisions:
    - Layered handlers: domain (GatewayError), routing (HTTPException), validation (Pydantic),
      catch-all (Exception)
    - Extracted from main.py (ADR: ExMA import fan-out < 10)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.dispatch_outcome import INTERNAL_ERROR_BODY
from app.core.errors import (
    ErrorContext, ErrorSeverity, GatewayError, RouteNotFoundError,
)

logger = logging.getLogger(__name__)

UNMATCHED_STATUSES = frozenset({
    status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
})

SEVERITY_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_gateway_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_gateway_error_handler(app: FastAPI) -> None:
    """Register typed gateway error handler."""

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        """Handle all typed gateway errors; log level follows severity."""
        logger.log(
            SEVERITY_LOG_LEVELS[exc.severity],
            f"GatewayError: {exc.detail or exc.message}",
            extra={
                "error_code": exc.code,
                "error_category": exc.category.value,
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (no route matched)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Unmatched paths and methods collapse to the not-found envelope."""
        if exc.status_code in UNMATCHED_STATUSES:
            err = RouteNotFoundError(
                ErrorContext(path=request.url.path, method=request.method),
            )
            logger.log(
                SEVERITY_LOG_LEVELS[err.severity],
                f"No route for {err.context.method} {err.context.path}",
                extra={"error_code": err.code, "path": err.context.path},
            )
            return JSONResponse(
                status_code=err.http_status, content=err.to_response(),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request data"},
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Server error on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=INTERNAL_ERROR_BODY,
        )
