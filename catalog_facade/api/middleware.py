"""Request context middleware for the catalog facade.

Every request gets a correlation ID, a timing log line and, if a handler
raises something no exception handler claimed, a 500 error envelope
that still carries the ID.
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

from catalog_facade.api.errors import REQUEST_ID_HEADER, error_response

logger = structlog.get_logger()


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind a request ID for the lifetime of one request.

    The ID comes from the ``X-Request-ID`` header or is generated. It is
    stored on ``request.state``, bound into the structlog context and
    returned on every response, including unhandled failures.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            # Logged while request_id is still bound.
            logger.exception(
                "Unhandled exception",
                method=request.method,
                path=request.url.path,
                error=str(exc),
            )
            response = error_response(
                request,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "INTERNAL_ERROR",
                "An internal error occurred",
            )

        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        structlog.contextvars.unbind_contextvars("request_id")

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application.

    Args:
        app: FastAPI application instance.
    """
    app.add_middleware(RequestContextMiddleware)
