"""
facegen: FastAPI application.

Serves deterministic SVG avatars:

- GET {API_PREFIX}/avatar/{identifier}?size=N   SVG document
- GET {API_PREFIX}/avatar/{identifier}/info     feature metadata
- GET /health, /health/live                     probes
"""

from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings
from .errors import AvatarAPIError
from .health import router as health_router
from .models import ErrorResponse
from .router import router as avatar_router

logger = logging.getLogger("facegen")


app = FastAPI(
    title="facegen",
    description="Deterministic SVG avatars derived from opaque identifiers.",
    version=settings.SERVICE_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.include_router(health_router)
app.include_router(avatar_router, prefix=settings.API_PREFIX)


def _envelope(status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, status_code=status_code)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


# ----------------------------
# Error handling
# ----------------------------


@app.exception_handler(AvatarAPIError)
async def avatar_error_handler(request: Request, exc: AvatarAPIError):
    """Render route-level errors as the standard envelope."""
    return _envelope(exc.status_code, exc.error, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Return consistent JSON error responses for framework errors (404, 405...)."""
    try:
        title = HTTPStatus(exc.status_code).phrase
    except ValueError:
        title = "Error"
    return _envelope(exc.status_code, title, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
    return _envelope(500, "Internal Server Error", "Internal server error.")


# =============================================================================
# STARTUP / SHUTDOWN EVENTS
# =============================================================================


@app.on_event("startup")
async def startup_event():
    """Application startup tasks."""
    logging.basicConfig(level=settings.LOG_LEVEL)

    logger.info(f"Starting {settings.SERVICE_NAME} v{settings.SERVICE_VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(
        f"Avatar sizes: default={settings.DEFAULT_SIZE} "
        f"bounds=[{settings.MIN_SIZE}, {settings.MAX_SIZE}]"
    )


@app.on_event("shutdown")
async def shutdown_event():
    """Application shutdown tasks."""
    logger.info(f"Shutting down {settings.SERVICE_NAME}")
