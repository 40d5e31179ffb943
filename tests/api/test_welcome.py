"""Tests for the welcome page."""

from learn_python.api.welcome import ENDPOINTS

EXPECTED_ENDPOINTS = [
    ("/", "GET", "API welcome and documentation"),
    ("/ping", "GET", "Simple ping-pong response"),
    ("/healthz", "GET", "Health check endpoint"),
    ("/info", "GET", "Application and system information"),
    ("/version", "GET", "Application version information"),
    ("/echo", "POST", "Echo back the request body"),
    ("/metrics", "GET", "Prometheus metrics endpoint"),
    ("/openapi.json", "GET", "OpenAPI specification"),
]


def test_index_success(client):
    """Test: Welcome page is a success envelope."""
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    body = response.json()

    assert body["success"] is True
    assert "error" not in body
    assert body["data"]["message"] == "Welcome to learn-python API"
    assert body["data"]["links"]["issues"].endswith("/issues")


def test_index_lists_all_endpoints(client):
    """Test: The endpoint list is exactly the documented eight routes."""
    endpoints = client.get("/").json()["data"]["endpoints"]

    assert [(e["path"], e["method"], e["description"]) for e in endpoints] == EXPECTED_ENDPOINTS


def test_index_documentation_links_unset(client):
    """Test: Unset swagger/postman links are omitted from the payload."""
    documentation = client.get("/").json()["data"]["documentation"]

    assert documentation == {}


def test_listed_endpoints_are_served(client):
    """Test: Every listed endpoint is actually routed."""
    for endpoint in ENDPOINTS:
        if endpoint.method == "POST":
            response = client.post(endpoint.path, json={"message": "x"})
        else:
            response = client.get(endpoint.path)
        assert response.status_code == 200, endpoint.path
