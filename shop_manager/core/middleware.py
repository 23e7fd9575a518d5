"""
HTTP middleware: correlation ids and per-request access logging.
"""

import time
from typing import Callable

import structlog
from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger(__name__)

# Static UI assets are not worth an access log line each
QUIET_PREFIXES = ("/static/",)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each API request with its status code and duration."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        if path.startswith(QUIET_PREFIXES):
            return await call_next(request)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Request failed",
                method=request.method,
                path=path,
                process_time_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            raise

        logger.info(
            "Request completed",
            method=request.method,
            path=path,
            status_code=response.status_code,
            client_ip=request.client.host if request.client else "unknown",
            process_time_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response


def setup_middleware(app: FastAPI) -> None:
    """Install middleware. Starlette runs the last one added first."""
    app.add_middleware(RequestLoggingMiddleware)

    # Added last so the request id exists before the logging middleware runs
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        update_request_header=True,
    )
