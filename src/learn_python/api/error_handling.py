"""Render framework-level errors as error envelopes."""

import logging
from typing import Any, Dict, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .models import ApiResponse

logger = logging.getLogger(__name__)

JSON_INVALID = "json_invalid"


def describe_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """Join pydantic error entries into one readable message.

    Args:
        errors: Entries from ``RequestValidationError.errors()``

    Returns:
        Messages of the form ``"body.message: Field required"`` joined by ``"; "``
    """
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


def validation_status_code(errors: Sequence[Dict[str, Any]]) -> int:
    """400 when the body is not JSON at all, 422 when it has the wrong shape."""
    if any(error.get("type") == JSON_INVALID for error in errors):
        return 400
    return 422


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    message = describe_validation_errors(errors)
    logger.debug(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(
        status_code=validation_status_code(errors),
        content=ApiResponse.failure(message).to_content(),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ApiResponse.failure(str(exc.detail)).to_content(),
        headers=getattr(exc, "headers", None),
    )


def install_exception_handlers(app: FastAPI) -> None:
    """Register the envelope-producing handlers on ``app``."""
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
