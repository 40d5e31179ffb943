"""Liveness and system information endpoints."""

import platform

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from .config import Config
from .models import (
    ApiResponse,
    DetailedSystemInfo,
    EnvironmentInfo,
    HealthData,
    InfoData,
)
from .state import AppState, get_app_state, get_config
from .system import memory_snapshot, system_snapshot

HEALTHY = "healthy"

router = APIRouter()


@router.get(
    "/ping",
    response_class=PlainTextResponse,
    summary="Simple ping-pong response",
    tags=["health"],
)
async def ping() -> PlainTextResponse:
    """Plain text ``pong``, outside the JSON envelope."""
    return PlainTextResponse("pong")


@router.get(
    "/healthz",
    response_model=ApiResponse[HealthData],
    response_model_exclude_none=True,
    summary="Health check endpoint",
    tags=["health"],
)
def healthz(state: AppState = Depends(get_app_state)) -> ApiResponse[HealthData]:
    """
    Liveness probe with uptime and host memory.

    The status is always ``healthy``: answering at all is the liveness signal.
    """
    health = HealthData(
        status=HEALTHY,
        uptime=state.uptime(),
        memory=memory_snapshot(),
        system=system_snapshot(),
    )
    return ApiResponse[HealthData].ok(health)


@router.get(
    "/info",
    response_model=ApiResponse[InfoData],
    response_model_exclude_none=True,
    summary="Application and system information",
    tags=["info"],
)
def info(
    state: AppState = Depends(get_app_state),
    config: Config = Depends(get_config),
) -> ApiResponse[InfoData]:
    """Application identity, host details and the configured bind address."""
    system = system_snapshot()

    data = InfoData(
        status=HEALTHY,
        application=state.app_info,
        system=DetailedSystemInfo(
            os=system.os,
            arch=system.arch,
            hostname=system.hostname,
            cpu_count=system.cpu_count,
            uptime=state.uptime(),
            memory=memory_snapshot(),
        ),
        environment=EnvironmentInfo(
            python_version=platform.python_version(),
            port=str(config.port),
            host=config.host,
        ),
    )
    return ApiResponse[InfoData].ok(data)
