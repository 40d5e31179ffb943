"""Echo endpoint."""

from fastapi import APIRouter

from .models import ApiResponse, EchoRequest, EchoResponse, utc_now_rfc3339

router = APIRouter()


@router.post(
    "/echo",
    response_model=ApiResponse[EchoResponse],
    response_model_exclude_none=True,
    summary="Echo back the request body",
    tags=["utility"],
    responses={400: {"description": "Invalid request body"}},
)
async def echo(payload: EchoRequest) -> ApiResponse[EchoResponse]:
    """Return the posted message with the time it was received."""
    return ApiResponse[EchoResponse].ok(
        EchoResponse(message=payload.message, received_at=utc_now_rfc3339())
    )
