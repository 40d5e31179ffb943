"""Welcome page listing the documented API surface."""

from typing import List

from fastapi import APIRouter

from .models import ApiResponse, Documentation, Endpoint, Links, WelcomeData

REPOSITORY_URL = "https://github.com/dxas90/learn-python"

# Must match the routes registered in server.create_app and the OpenAPI document.
ENDPOINTS: List[Endpoint] = [
    Endpoint(path="/", method="GET", description="API welcome and documentation"),
    Endpoint(path="/ping", method="GET", description="Simple ping-pong response"),
    Endpoint(path="/healthz", method="GET", description="Health check endpoint"),
    Endpoint(path="/info", method="GET", description="Application and system information"),
    Endpoint(path="/version", method="GET", description="Application version information"),
    Endpoint(path="/echo", method="POST", description="Echo back the request body"),
    Endpoint(path="/metrics", method="GET", description="Prometheus metrics endpoint"),
    Endpoint(path="/openapi.json", method="GET", description="OpenAPI specification"),
]

router = APIRouter()


@router.get(
    "/",
    response_model=ApiResponse[WelcomeData],
    response_model_exclude_none=True,
    summary="API welcome and documentation",
    tags=["info"],
)
async def index() -> ApiResponse[WelcomeData]:
    """Return the welcome message with links and the endpoint list."""
    welcome = WelcomeData(
        message="Welcome to learn-python API",
        description="A simple Python microservice for learning and demonstration",
        documentation=Documentation(swagger=None, postman=None),
        links=Links(repository=REPOSITORY_URL, issues=f"{REPOSITORY_URL}/issues"),
        endpoints=list(ENDPOINTS),
    )
    return ApiResponse[WelcomeData].ok(welcome)
