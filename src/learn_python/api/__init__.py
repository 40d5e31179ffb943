"""
Learn-Python HTTP API Service

Every JSON route answers with the same ``ApiResponse`` envelope and every
request passes through the same middleware pipeline.

Architecture:
- server.py: FastAPI application setup and process entry point
- models.py: Pydantic response envelope and payload models
- state.py: Immutable process state shared by handlers
- config.py: Environment-driven service configuration
- system.py: Host memory and system snapshot
- welcome.py, health.py, version.py, echo.py: Route handlers
- metrics.py: Prometheus registry and exposition endpoint
- openapi.py: Cached OpenAPI document
- error_handling.py: Framework errors rendered as error envelopes
- telemetry.py: Optional OpenTelemetry tracer setup
- middleware/: Security headers, metrics and request tracing interceptors
"""
