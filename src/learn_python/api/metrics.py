"""Application metrics collection and Prometheus exposition for Learn-Python API."""

import logging
from threading import Lock
from typing import Optional

from fastapi import APIRouter, Request, Response
from fastapi.responses import PlainTextResponse
from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)

logger = logging.getLogger(__name__)

# Pinned rather than prometheus_client.CONTENT_TYPE_LATEST, which tracks the
# newest exposition version the installed client supports.
METRICS_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"

REQUESTS_TOTAL_NAME = "http_requests_total"
REQUEST_DURATION_NAME = "http_request_duration_seconds"


class MetricsCollector:
    """Owns the process-wide registry plus the request counter and histogram.

    prometheus_client metrics are thread-safe, so concurrent requests update
    them without extra locking. The lock only guards registration.
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry if registry is not None else CollectorRegistry()
        self.requests_total = Counter(
            REQUESTS_TOTAL_NAME, "Total number of HTTP requests", registry=None
        )
        self.request_duration = Histogram(
            REQUEST_DURATION_NAME, "HTTP request duration in seconds", registry=None
        )
        self._lock = Lock()
        self._registered = False

    @property
    def registered(self) -> bool:
        return self._registered

    def register(self) -> None:
        """Register all collectors with the registry; later calls are no-ops."""
        with self._lock:
            if self._registered:
                return
            self.registry.register(self.requests_total)
            self.registry.register(self.request_duration)
            ProcessCollector(registry=self.registry)
            PlatformCollector(registry=self.registry)
            self._registered = True

    def record_request_start(self) -> None:
        """Count a request as it enters the pipeline."""
        self.requests_total.inc()

    def record_request_duration(self, seconds: float) -> None:
        """Record how long the full downstream handling took."""
        self.request_duration.observe(seconds)

    def requests_total_value(self) -> float:
        """Current value of the request counter."""
        return self.registry.get_sample_value(REQUESTS_TOTAL_NAME) or 0.0

    def render(self) -> bytes:
        """Serialize every registered metric in the text exposition format."""
        return generate_latest(self.registry)


def init_metrics() -> MetricsCollector:
    """Create and register the metrics collector.

    Called exactly once per application from ``create_app``, before the server
    starts accepting connections.
    """
    collector = MetricsCollector()
    collector.register()
    logger.info("Prometheus metrics initialized")
    return collector


router = APIRouter()


@router.get(
    "/metrics",
    response_class=Response,
    summary="Prometheus metrics endpoint",
    tags=["monitoring"],
)
async def get_metrics(request: Request) -> Response:
    """Expose all registered metrics for a Prometheus scraper."""
    collector: MetricsCollector = request.app.state.metrics_collector
    try:
        payload = collector.render()
    except Exception as e:
        logger.error(f"Failed to encode metrics: {e}")
        return PlainTextResponse(f"Failed to encode metrics: {e}", status_code=500)

    return Response(content=payload, media_type=METRICS_CONTENT_TYPE)
