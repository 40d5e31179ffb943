"""
Middleware package for Learn-Python API.

Provides:
- instrumentation.py: Request counter and latency histogram
- security.py: Fixed security response headers
- tracing.py: Per-request span and debug logging
"""

from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..metrics import MetricsCollector
from .instrumentation import Interceptor, metrics_middleware
from .security import SECURITY_HEADERS, security_headers
from .tracing import trace_requests

__all__ = [
    "SECURITY_HEADERS",
    "build_pipeline",
    "install_middleware",
    "metrics_middleware",
    "security_headers",
    "trace_requests",
]


def build_pipeline(collector: MetricsCollector) -> List[Interceptor]:
    """Interceptors in request order, outermost first.

    Metrics sit outermost so the recorded duration covers everything below,
    security headers included.
    """
    return [
        metrics_middleware(collector),
        security_headers,
        trace_requests,
    ]


def install_middleware(app: FastAPI, collector: MetricsCollector) -> None:
    """Register CORS and the interceptor pipeline on ``app``."""
    # Starlette wraps each newly added middleware around the existing stack,
    # so register innermost first.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    for interceptor in reversed(build_pipeline(collector)):
        app.middleware("http")(interceptor)
