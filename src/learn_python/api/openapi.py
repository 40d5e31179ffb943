"""OpenAPI document for Learn-Python API, generated once and cached on the app."""

from typing import Any, Callable, Dict, List

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

API_TITLE = "Learn-Python API"
API_DESCRIPTION = "A simple Python microservice for learning and demonstration"
OPENAPI_URL = "/openapi.json"

TAGS: List[Dict[str, str]] = [
    {"name": "health", "description": "Health check endpoints"},
    {"name": "info", "description": "Information endpoints"},
    {"name": "utility", "description": "Utility endpoints"},
    {"name": "monitoring", "description": "Monitoring endpoints"},
]

SERVERS: List[Dict[str, str]] = [
    {"url": "http://localhost:8080", "description": "Local server"},
]


def _openapi_path_item() -> Dict[str, Any]:
    # The framework serves the document itself and leaves it out of the schema.
    return {
        "get": {
            "tags": ["info"],
            "summary": "OpenAPI specification",
            "operationId": "openapi_json",
            "responses": {
                "200": {
                    "description": "OpenAPI document",
                    "content": {"application/json": {"schema": {"type": "object"}}},
                }
            },
        }
    }


def build_openapi(app: FastAPI) -> Dict[str, Any]:
    """Generate the document for every route registered on ``app``."""
    schema = get_openapi(
        title=API_TITLE,
        version=app.version,
        description=API_DESCRIPTION,
        routes=app.routes,
        tags=TAGS,
        servers=SERVERS,
    )
    schema.setdefault("paths", {})[OPENAPI_URL] = _openapi_path_item()
    return schema


def install_openapi(app: FastAPI) -> Callable[[], Dict[str, Any]]:
    """Replace ``app.openapi`` with a builder that caches its first result."""

    def openapi() -> Dict[str, Any]:
        if app.openapi_schema is None:
            app.openapi_schema = build_openapi(app)
        return app.openapi_schema

    app.openapi = openapi
    return openapi
