"""FastAPI integration: logging setup and global exception handlers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from fastapi.responses import JSONResponse

from internal_errors.config import Settings
from internal_errors.exceptions import InternalError, InvocationError

if TYPE_CHECKING:
    from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Configure application logging."""
    level = logging.DEBUG if debug else logging.INFO
    fmt = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    logging.basicConfig(
        level=level,
        format=fmt,
        stream=sys.stdout,
        force=True,
    )


def install_exception_handlers(app: FastAPI, settings: Settings | None = None) -> None:
    """Register handlers that turn internal failures into generic 500 responses.

    The full message and traceback are logged server-side; clients only see
    ``settings.internal_error_detail`` unless ``expose_internal_details`` is on.
    """
    if settings is None:
        settings = Settings()
    settings.validate_runtime_safety()

    def _detail(exc: Exception) -> str:
        if settings.expose_internal_details:
            return str(exc) or settings.internal_error_detail
        return settings.internal_error_detail

    @app.exception_handler(InternalError)
    async def internal_error_handler(request: Request, exc: InternalError) -> JSONResponse:
        logger.error(
            "InternalError in %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": _detail(exc)},
        )

    @app.exception_handler(InvocationError)
    async def invocation_error_handler(request: Request, exc: InvocationError) -> JSONResponse:
        logger.error(
            "[BUG] Unclassified InvocationError in %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": _detail(exc)},
        )
