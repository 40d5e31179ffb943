"""Request count and latency instrumentation."""

import time
from typing import Awaitable, Callable

from fastapi import Request, Response

from ..metrics import MetricsCollector

Interceptor = Callable[[Request, Callable[[Request], Awaitable[Response]]], Awaitable[Response]]


def metrics_middleware(collector: MetricsCollector) -> Interceptor:
    """Build an interceptor that feeds ``collector``.

    The counter is incremented before dispatch and the duration is recorded
    in a ``finally`` so failed requests are measured too.
    """

    async def record_metrics(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        collector.record_request_start()
        start = time.perf_counter()
        try:
            return await call_next(request)
        finally:
            collector.record_request_duration(time.perf_counter() - start)

    return record_metrics
