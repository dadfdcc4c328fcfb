"""
FastAPI middleware for observability.

Correlation ID and request logging middleware.

Dependencies: fastapi, starlette
System role: Request/response observability injection
"""

import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging HTTP requests and responses."""

    async def dispatch(self, request: Request, call_next):
        """
        Log HTTP request and response with timing.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response object
        """
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        logger.info(f"{method} {path}")

        try:
            response: Response = await call_next(request)
        except Exception as e:
            process_time_ms = (time.perf_counter() - start_time) * 1000
            logger.exception(
                f"{method} {path} - Exception after {process_time_ms:.2f}ms",
                extra={"error_type": type(e).__name__},
            )
            raise

        process_time_ms = (time.perf_counter() - start_time) * 1000
        logger.info(f"{method} {path} - {response.status_code} ({process_time_ms:.2f}ms)")
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Middleware for correlation ID injection."""

    async def dispatch(self, request: Request, call_next):
        """
        Echo the caller's correlation ID, or a fresh one, on the response.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response with correlation ID header
        """
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        response: Response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
