"""
Middleware for request logging
"""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import clear_request_id, get_logger, get_request_id, set_request_id

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with a request id and log its outcome."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        set_request_id(request.headers.get("x-request-id"))
        started = time.perf_counter()

        try:
            response = await call_next(request)

            response.headers["X-Request-ID"] = get_request_id()
            # request_id is attached by the logging processor
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
                remote_addr=request.client.host if request.client else None,
            )
            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_id()
