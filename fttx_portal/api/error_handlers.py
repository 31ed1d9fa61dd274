"""Error Handlers — global exception handlers for the portal API.

Invariants:
    - TemplateRenderError → 500 text/plain with the raw render error as body
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Render errors are not logged here; the raw message is the whole response
    - Extracted from main.py (ADR: import fan-out < 10)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

from fttx_portal.core.errors import ErrorSeverity, TemplateRenderError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_render_error_handler(app)
    _register_generic_error_handler(app)


def _register_render_error_handler(app: FastAPI) -> None:
    """Register template render failure handler."""

    @app.exception_handler(TemplateRenderError)
    async def render_error_handler(request: Request, exc: TemplateRenderError):
        return PlainTextResponse(
            exc.message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
