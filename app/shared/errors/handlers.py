"""
Centralized error handlers for FastAPI.

Every error that escapes a route is run through the classifier and
answered with `{"code": ..., "message": ...}`.
No stack traces or internal details are exposed to clients; the full
error text is logged server-side only.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.domain.blog.errors import BlogDomainError
from app.shared.errors.classifier import classify

logger = logging.getLogger(__name__)


def classified_response(request: Request, exc: Exception) -> JSONResponse:
    """Classify `exc`, log its cause and build the client response."""
    api_error = classify(exc)
    if api_error.status_code >= 500:
        logger.error(
            "%s %s -> %d: %r",
            request.method,
            request.url.path,
            api_error.status_code,
            api_error.cause,
            exc_info=api_error.cause,
        )
    else:
        logger.warning(
            "%s %s -> %d: %s",
            request.method,
            request.url.path,
            api_error.status_code,
            api_error.cause,
        )
    return JSONResponse(status_code=api_error.status_code, content=api_error.to_body())


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(BlogDomainError)
    async def handle_blog_domain(request: Request, exc: BlogDomainError) -> JSONResponse:
        """Handle domain errors such as a missing blog."""
        return classified_response(request, exc)

    @app.exception_handler(NotImplementedError)
    async def handle_not_implemented(
        request: Request, exc: NotImplementedError
    ) -> JSONResponse:
        """Handle actions that are routed but not implemented."""
        return classified_response(request, exc)

    @app.exception_handler(SQLAlchemyError)
    async def handle_storage(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        """Handle storage errors (duplicate keys, lost connections, ...)."""
        return classified_response(request, exc)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        return classified_response(request, exc)
