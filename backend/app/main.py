"""
Memos Backend — FastAPI Application Factory
============================================

What:  Creates and configures the FastAPI application instance.
Why:   Middleware, exception handlers, routers and lifecycle in one place.
How:   create_app() returns a configured FastAPI instance; `app` is the
       module-level instance uvicorn serves (uvicorn app.main:app).

Exception Handlers:
    ValidationError   → 400   UnauthorizedError → 401
    NotFoundError     → 404   DatabaseError     → 500
    ActivityError     → 500   Exception         → 500 (generic message)

Lifecycle:
    Startup:  configure logging, log the effective configuration
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.database import dispose_engine
from app.exceptions import (
    ActivityError,
    DatabaseError,
    MemosError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from app.routes import health, tag

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the whole process.

    Format: 2024-01-15T12:00:00 [INFO] app.services.tag_service: Tag 'work' upserted for user 1
    Called once from the lifespan, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers are noisy at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("Memos tag backend %s starting up", __version__)
    logger.info("Database: %s", _redact_url(settings.database_url))
    logger.info("User id header: %s", settings.user_id_header)

    yield

    logger.info("Memos tag backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


def _redact_url(url: str) -> str:
    """Hide the password in a database URL before logging it."""
    scheme, sep, rest = url.partition("://")
    if not sep or "@" not in rest:
        return url
    credentials, _, host = rest.rpartition("@")
    user = credentials.split(":", 1)[0]
    return f"{scheme}://{user}:***@{host}"


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    details: Optional[dict] = None,
) -> JSONResponse:
    rid = request_id_var.get("") or getattr(request.state, "request_id", "")
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": message,
            "details": details,
            "request_id": rid,
        },
        headers={REQUEST_ID_HEADER: rid} if rid else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map the MemosError hierarchy to HTTP responses.

    Server-side failures log the chained cause with its traceback; the
    response only carries the operation-level message.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("Validation error on %s: %s", request.url.path, exc.message)
        return _error_response(request, 400, "validation_error", exc.message, exc.context or None)

    @app.exception_handler(UnauthorizedError)
    async def handle_unauthorized(request: Request, exc: UnauthorizedError):
        return _error_response(request, 401, "unauthorized", exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(request, 404, "not_found", exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "Database error: %s | Context: %s",
            exc.message,
            exc.context,
            exc_info=exc.__cause__,
        )
        return _error_response(request, 500, "server_error", exc.message)

    @app.exception_handler(ActivityError)
    async def handle_activity_error(request: Request, exc: ActivityError):
        logger.error(
            "Activity error: %s | Context: %s",
            exc.message,
            exc.context,
            exc_info=exc.__cause__,
        )
        return _error_response(request, 500, "server_error", exc.message)

    @app.exception_handler(MemosError)
    async def handle_memos_error(request: Request, exc: MemosError):
        logger.error("Unhandled application error: %s", exc.message)
        return _error_response(request, 500, "server_error", exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("Unexpected error: %s", str(exc), exc_info=True)
        return _error_response(
            request,
            500,
            "internal_server_error",
            "An unexpected error occurred. Please try again or contact support.",
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    app = FastAPI(
        title="Memos Tag API",
        description=(
            "User-scoped tags for memos: create, list, delete, and hashtag "
            "suggestions drawn from existing memo content."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware executes in reverse order of addition:
    # RequestID → Logging → CORS → route
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(tag.router)
    app.include_router(health.router)

    return app


app = create_app()
