"""
Application entry point.

Builds the FastAPI application from:
- Routers (one per bounded context, plus health)
- Error handlers (centralized error-to-HTTP classification)
- Middleware (request context, security headers, rate limiting, error fallback)
- Logging configuration and the dependency container
- Storage engine (opened at startup; failure aborts startup)
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import Settings, settings as default_settings
from app.core.container import build_container
from app.infrastructure.database import check_connection, create_db_engine, create_schema
from app.interfaces.blog.router import router as blog_router
from app.interfaces.health import router as health_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.middleware import (
    RequestContextMiddleware,
    SecurityHeadersMiddleware,
    UnhandledErrorMiddleware,
)
from app.shared.security.rate_limiting import build_limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open the storage engine, close it on shutdown.

    An unreachable store is fatal: the error is logged and re-raised so
    the server never starts serving.
    """
    engine: Optional[Engine] = app.state.engine
    if engine is None:
        settings: Settings = app.state.settings
        engine = create_db_engine(settings.get_postgresql_url(), echo=settings.sql_echo)
    try:
        check_connection(engine)
    except SQLAlchemyError:
        logger.critical("Failed to connect database; aborting startup.", exc_info=True)
        engine.dispose()
        raise
    create_schema(engine)
    app.state.engine = engine

    yield

    engine.dispose()


def create_app(
    settings: Optional[Settings] = None, engine: Optional[Engine] = None
) -> FastAPI:
    """Assemble the blog service.

    Wires settings, container, middleware, error handlers and routers.

    Args:
        settings: Settings to use; defaults to the environment-loaded ones.
        engine: Pre-built storage engine; built from settings at startup when omitted.

    Returns:
        The ready-to-serve application.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.container = build_container(settings)
    app.state.engine = engine

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Middleware (last added runs first) ---
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestContextMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(blog_router)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "app.main:app",
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
    )
