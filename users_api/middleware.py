"""
Name: HTTP Middleware

Responsibilities:
  - Generate and propagate request_id (UUID)
  - Set request context for logging
  - Add X-Request-Id response header
  - Record request metrics (latency, count)
  - Reject oversized request bodies (413)

Collaborators:
  - context.py: ContextVars for request-scoped data
  - metrics.py: Prometheus counters and histograms
  - logger.py: Structured logging

Constraints:
  - RequestContextMiddleware must wrap everything else so every log line
    carries the request_id
  - Must clear context after response
"""

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from .context import (
    request_id_var,
    http_method_var,
    http_path_var,
    clear_context,
)
from .error_responses import ErrorCode, build_problem, problem_response
from .logger import logger
from .metrics import record_request_metrics


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    R: Middleware that establishes request context and records metrics.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        # R: Honor an upstream request id, otherwise mint one
        request_id = request.headers.get("x-request-id", "").strip() or str(
            uuid.uuid4()
        )

        request_id_var.set(request_id)
        http_method_var.set(request.method)
        http_path_var.set(request.url.path)

        # R: Also store in request.state for handlers that need it
        request.state.request_id = request_id

        start_time = time.perf_counter()

        try:
            response = await call_next(request)

            latency_seconds = time.perf_counter() - start_time
            response.headers["X-Request-Id"] = request_id

            logger.info(
                "request completed",
                extra={
                    "status_code": response.status_code,
                    "latency_ms": round(latency_seconds * 1000, 2),
                },
            )
            record_request_metrics(
                endpoint=request.url.path,
                method=request.method,
                status_code=response.status_code,
                latency_seconds=latency_seconds,
            )

            return response

        except Exception as exc:
            latency_seconds = time.perf_counter() - start_time
            logger.exception(
                "request failed",
                extra={
                    "latency_ms": round(latency_seconds * 1000, 2),
                    "error": str(exc),
                },
            )
            raise

        finally:
            clear_context()


class BodyLimitMiddleware(BaseHTTPMiddleware):
    """
    R: Reject requests whose declared Content-Length exceeds max_body_bytes.
    """

    def __init__(self, app, max_body_bytes: int | None = None):
        super().__init__(app)
        if max_body_bytes is None:
            from .config import get_settings

            max_body_bytes = get_settings().max_body_bytes
        self._max_bytes = max_body_bytes

    async def dispatch(self, request: Request, call_next) -> Response:
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit():
            if int(content_length) > self._max_bytes:
                logger.warning(
                    "payload too large",
                    extra={
                        "content_length": content_length,
                        "max_bytes": self._max_bytes,
                    },
                )
                error = build_problem(
                    code=ErrorCode.PAYLOAD_TOO_LARGE,
                    status=413,
                    detail=f"Payload exceeds maximum size of {self._max_bytes} bytes",
                    instance=str(request.url),
                )
                return problem_response(error)

        return await call_next(request)
