"""Tests for framework errors rendered as envelopes."""

from learn_python.api.error_handling import describe_validation_errors, validation_status_code


def test_unknown_route_is_error_envelope(client):
    """Test: 404s use the error envelope."""
    response = client.get("/nope")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Not Found"
    assert "data" not in body


def test_wrong_method_is_error_envelope(client):
    """Test: 405s use the error envelope."""
    response = client.get("/echo")

    assert response.status_code == 405
    body = response.json()
    assert body["success"] is False
    assert "data" not in body


def test_describe_validation_errors():
    """Test: Error entries are joined with their location."""
    message = describe_validation_errors(
        [
            {"type": "missing", "loc": ("body", "message"), "msg": "Field required"},
            {"type": "string_type", "loc": (), "msg": "Input should be a valid string"},
        ]
    )

    assert message == "body.message: Field required; Input should be a valid string"


def test_validation_status_codes():
    """Test: Unparsable JSON is 400, wrong shape is 422."""
    assert validation_status_code([{"type": "json_invalid"}]) == 400
    assert validation_status_code([{"type": "missing"}]) == 422
