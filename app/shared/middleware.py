"""
HTTP middleware.

- RequestContextMiddleware: tags each request with an id (echoed in the
  `X-Request-ID` header), traces it and logs server errors.
- SecurityHeadersMiddleware: adds restrictive security headers to every
  response.
- UnhandledErrorMiddleware: turns errors no exception handler claimed
  into classified responses while still inside the two above.

No business logic. Pure cross-cutting concerns.
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.shared.errors.handlers import classified_response
from app.shared.logging import trace

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
}


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assigns a request id and logs the request outcome."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        response.headers[REQUEST_ID_HEADER] = request_id
        if response.status_code >= 500:
            logger.error(
                "request_id=%s %s %s -> %d (%.2f ms)",
                request_id,
                request.method,
                request.url.path,
                response.status_code,
                elapsed_ms,
            )
        else:
            trace(
                logger,
                "request_id=%s %s %s -> %d (%.2f ms)",
                request_id,
                request.method,
                request.url.path,
                response.status_code,
                elapsed_ms,
            )
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds secure HTTP headers to every response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Stamp SECURE_HEADERS onto the response."""
        response = await call_next(request)
        for header_name, header_value in SECURE_HEADERS.items():
            response.headers[header_name] = header_value
        return response


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Classifies errors that escaped every registered exception handler.

    Must be the innermost middleware so its response still passes through
    the request-context and security-header middlewares.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return classified_response(request, exc)
