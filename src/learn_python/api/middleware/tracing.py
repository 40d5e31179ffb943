"""Per-request span and debug logging."""

import logging
import time
from typing import Awaitable, Callable

from fastapi import Request, Response
from opentelemetry import trace

logger = logging.getLogger(__name__)
tracer = trace.get_tracer("learn_python.api")


async def trace_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Wrap the request in a span and log method, path, status and duration.

    Without a configured tracer provider the span is a no-op.
    """
    method = request.method
    path = request.url.path
    start = time.perf_counter()

    with tracer.start_as_current_span(f"{method} {path}") as span:
        span.set_attribute("http.request.method", method)
        span.set_attribute("url.path", path)
        response = await call_next(request)
        span.set_attribute("http.response.status_code", response.status_code)

    duration_ms = (time.perf_counter() - start) * 1000
    logger.debug(f"{method} {path} -> {response.status_code} in {duration_ms:.2f}ms")
    return response
