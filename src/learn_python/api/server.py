"""FastAPI application setup and routing for Learn-Python API."""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from . import echo, health, metrics, version, welcome
from .config import Config
from .error_handling import install_exception_handlers
from .middleware import install_middleware
from .models import utc_now_rfc3339
from .openapi import API_DESCRIPTION, API_TITLE, OPENAPI_URL, install_openapi
from .state import APP_NAME, AppState
from .telemetry import init_tracer, shutdown_tracer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Start tracing before serving and flush it after the last request drains."""
    config: Config = app.state.config
    provider = init_tracer(config.otel_exporter_otlp_endpoint, APP_NAME)
    yield
    logger.info("Shutting down gracefully...")
    shutdown_tracer(provider)


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    if config is None:
        config = Config.from_env()

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=config.app_version,
        openapi_url=OPENAPI_URL,
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.app_state = AppState.create(config.app_version, config.environment)
    app.state.metrics_collector = metrics.init_metrics()

    install_middleware(app, app.state.metrics_collector)
    install_exception_handlers(app)

    # Routes, in the order the welcome page lists them
    app.include_router(welcome.router)
    app.include_router(health.router)
    app.include_router(version.router)
    app.include_router(echo.router)
    app.include_router(metrics.router)

    install_openapi(app)
    return app


app = create_app()


def main():
    """Entry point for learn-python command."""
    import uvicorn

    config = app.state.config

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    logger.info(f"Server starting at http://{config.host}:{config.port}/")
    logger.info(f"Environment: {config.environment}")
    logger.info(f"Version: {config.app_version}")
    logger.info(f"Started at: {utc_now_rfc3339()}")

    try:
        uvicorn.run(
            "learn_python.api.server:app",
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
            reload=False,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Server startup failed: {e}")
        sys.exit(1)

    logger.info("Server stopped")


if __name__ == "__main__":
    main()
