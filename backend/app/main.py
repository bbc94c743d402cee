"""
Hauge API — FastAPI Application Factory
========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() validates configuration, builds the
       token codec, and registers middleware, exception handlers and routes.
Who:   uvicorn (uvicorn app.main:app), the `hauge-api` console script, tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌──────┐ ┌──────┐        │
    │  │ Req ID   │→│ Logging  │→│ GZip │→│ CORS │        │
    │  └──────────┘ └──────────┘ └──────┘ └──────┘        │
    │                                                     │
    │  Routes:                                            │
    │  /users  /users/{id}  /users/{id}/posts[-with-user] │
    │  /posts  /auth/register  /auth/login  /health       │
    │                                                     │
    │  Exception Handlers:                                │
    │  HaugeError → its status │ 422 → 400 │ other → 500  │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Construction (import time):
    1. Validate configuration; a missing JWT_SECRET aborts the process
    2. Build the TokenCodec and attach it to app.state
    Startup:
    3. Initialize logging
    Shutdown:
    4. Dispose database engine (close all connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import AsyncGenerator, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.config import Settings, settings
from app.database import dispose_engine
from app.exceptions import HaugeError, ValidationError
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.routes import auth, health, posts, users
from app.services.token_codec import TokenCodec

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Library loggers are noisy at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.ERROR)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    cfg: Settings = app.state.settings
    setup_logging(cfg.log_level)
    logger.info("=" * 60)
    logger.info("Hauge API %s starting up...", __version__)
    logger.info("Server ready at http://%s:%d", cfg.backend_host, cfg.backend_port)
    logger.info("API docs: http://%s:%d/api-docs", cfg.backend_host, cfg.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("Hauge API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(message: str, details: Optional[List[str]] = None) -> dict:
    body = {"error": message}
    if details is not None:
        body["details"] = details
    return body


def _request_validation_messages(exc: RequestValidationError) -> List[str]:
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return messages


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to HTTP responses.

    Handler hierarchy:
        ValidationError         → 400 {"error": "Validation failed", "details": [...]}
        HaugeError subclasses   → exc.status_code {"error": exc.message}
        RequestValidationError  → 400 (FastAPI's own parameter checks)
        HTTPException           → its status (unknown routes, wrong methods)
        Exception (fallback)    → 500, traceback logged server-side only
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.info("[%s] Validation failed: %s", rid, exc.details)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.message, exc.details),
        )

    @app.exception_handler(HaugeError)
    async def handle_app_error(request: Request, exc: HaugeError):
        rid = request_id_var.get("")
        if exc.status_code >= 500:
            # Context stays in the log, never in the response
            logger.error("[%s] %s: %s | Context: %s",
                         rid, type(exc).__name__, exc.message, exc.context)
        else:
            logger.info("[%s] %s: %s", rid, type(exc).__name__, exc.message)
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.message),
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content=_error_body("Validation failed", _request_validation_messages(exc)),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        message = "Not found" if exc.status_code == 404 else str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(message),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=_error_body("Internal server error"),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(cfg: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Raises:
        ConfigurationError: JWT_SECRET is missing. Deliberately not caught;
                            the server must not start without it.
    """
    cfg = cfg or settings
    cfg.validate_required_for_production()

    app = FastAPI(
        title="Hauge API",
        description="Users, posts and bearer-token authentication.",
        version=__version__,
        docs_url="/api-docs",
        redoc_url=None,
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = cfg
    app.state.token_codec = TokenCodec(
        secret=cfg.jwt_secret,
        algorithm=cfg.jwt_algorithm,
        expires_in=timedelta(hours=cfg.jwt_expires_hours),
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins_list,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(users.router)
    app.include_router(posts.router)
    app.include_router(auth.router)
    app.include_router(health.router)

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured address."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


# uvicorn expects `app.main:app` to be importable
app = create_app()
