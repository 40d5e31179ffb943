"""Optional OpenTelemetry tracer setup.

Tracing is only enabled when an OTLP collector endpoint is configured.
Setup problems are logged and the service carries on untraced.
"""

import logging
from typing import Optional

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

logger = logging.getLogger(__name__)

TRACES_PATH = "/v1/traces"


def traces_url(endpoint: str) -> str:
    """Append the OTLP/HTTP traces path to a collector base URL."""
    endpoint = endpoint.rstrip("/")
    if endpoint.endswith(TRACES_PATH):
        return endpoint
    return f"{endpoint}{TRACES_PATH}"


def init_tracer(endpoint: Optional[str], service_name: str) -> Optional[TracerProvider]:
    """Install a global tracer provider exporting to ``endpoint``.

    Returns:
        The installed provider, or None when the endpoint is unset or setup
        failed.
    """
    if not endpoint:
        logger.info("OpenTelemetry: OTEL_EXPORTER_OTLP_ENDPOINT not set, skipping OTLP configuration")
        return None

    logger.info(f"OpenTelemetry: configuring OTLP exporter with endpoint {endpoint}")
    try:
        exporter = OTLPSpanExporter(endpoint=traces_url(endpoint))
        provider = TracerProvider(resource=Resource.create({SERVICE_NAME: service_name}))
        provider.add_span_processor(BatchSpanProcessor(exporter))
        trace.set_tracer_provider(provider)
    except Exception as e:
        logger.warning(f"Failed to initialize OpenTelemetry tracer: {e}")
        return None

    logger.info("OpenTelemetry: tracer initialized")
    return provider


def shutdown_tracer(provider: Optional[TracerProvider]) -> None:
    """Flush pending spans and shut the provider down."""
    if provider is None:
        return
    try:
        provider.shutdown()
    except Exception as e:
        logger.warning(f"Failed to shut down OpenTelemetry tracer: {e}")
