"""Version information and build metadata for Learn-Python API."""

import os

from fastapi import APIRouter, Depends

from .models import ApiResponse, VersionData
from .state import AppState, get_app_state

UNKNOWN = "unknown"


def _build_value(name: str) -> str:
    return os.environ.get(name) or UNKNOWN


# Baked into the image at build time (Dockerfile ARG -> ENV) and resolved once
# at import; they do not follow later changes to the environment.
BUILD_DATE = _build_value("BUILD_DATE")
VCS_REF = _build_value("VCS_REF")

router = APIRouter()


@router.get(
    "/version",
    response_model=ApiResponse[VersionData],
    response_model_exclude_none=True,
    summary="Application version information",
    tags=["info"],
)
async def get_version(state: AppState = Depends(get_app_state)) -> ApiResponse[VersionData]:
    """
    Get the application version and build metadata.

    Returns:
        Envelope with the configured version, the build date and the commit
        the image was built from (``unknown`` when not provided at build time)
    """
    return ApiResponse[VersionData].ok(
        VersionData(
            version=state.app_info.version,
            build_date=BUILD_DATE,
            commit=VCS_REF,
        )
    )
