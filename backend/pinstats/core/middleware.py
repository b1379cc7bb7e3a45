"""Request logging middleware."""

import time
import uuid

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from .logging import bind_request_context, clear_request_context

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id and logs its outcome and duration."""

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold  # seconds

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
        bind_request_context(
            request_id=request_id, method=request.method, path=request.url.path
        )
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=round((time.perf_counter() - start_time) * 1000),
            )
            clear_request_context()
            raise

        duration = time.perf_counter() - start_time
        logger.info(
            "Request completed",
            status_code=response.status_code,
            duration_ms=round(duration * 1000),
        )
        if duration > self.slow_request_threshold:
            logger.warning(
                "Slow request detected",
                duration_seconds=round(duration, 3),
                threshold=self.slow_request_threshold,
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        clear_request_context()
        return response
