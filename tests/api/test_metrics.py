"""Tests for Prometheus metrics collection and exposition."""

import asyncio
import re
from unittest.mock import patch

import httpx
import pytest

from learn_python.api.metrics import MetricsCollector, init_metrics


def counter_value(text: str) -> float:
    match = re.search(r"^http_requests_total ([0-9.e+]+)$", text, re.MULTILINE)
    assert match, "http_requests_total sample missing"
    return float(match.group(1))


class TestMetricsCollector:
    """Test the collector outside of HTTP."""

    def test_init_metrics_registers_collectors(self):
        """Test: init_metrics returns a registered collector with zeroed counters."""
        collector = init_metrics()

        assert collector.registered is True
        assert collector.requests_total_value() == 0.0

    def test_register_is_idempotent(self):
        """Test: Registering twice does not raise duplicate timeseries errors."""
        collector = MetricsCollector()
        collector.register()
        collector.register()

        collector.record_request_start()
        assert collector.requests_total_value() == 1.0

    def test_collectors_are_isolated(self):
        """Test: Each collector owns a separate registry."""
        first = init_metrics()
        second = init_metrics()

        first.record_request_start()

        assert first.requests_total_value() == 1.0
        assert second.requests_total_value() == 0.0

    def test_duration_histogram_records(self):
        """Test: Observed durations land in the histogram."""
        collector = init_metrics()
        collector.record_request_duration(0.25)

        assert collector.registry.get_sample_value("http_request_duration_seconds_count") == 1.0
        assert collector.registry.get_sample_value("http_request_duration_seconds_sum") == 0.25


def test_metrics_endpoint_exposition(client):
    """Test: Metrics are exposed in the text format after a request."""
    client.get("/ping")
    response = client.get("/metrics")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain; version=0.0.4")
    assert "http_requests_total" in response.text
    assert "http_request_duration_seconds" in response.text


def test_metrics_counter_monotonic(client):
    """Test: The request counter never decreases across scrapes."""
    values = []
    for _ in range(3):
        client.get("/healthz")
        values.append(counter_value(client.get("/metrics").text))

    assert values == sorted(values)
    assert values[-1] > values[0]


def test_metrics_counts_every_request(app, client):
    """Test: Each request through the pipeline increments the counter once."""
    collector = app.state.metrics_collector
    before = collector.requests_total_value()

    for path in ("/", "/ping", "/version"):
        client.get(path)

    assert collector.requests_total_value() == before + 3


def test_metrics_encoding_failure_returns_500(app, client):
    """Test: Encoding errors are reported as a 500 with the error text."""
    with patch.object(MetricsCollector, "render", side_effect=RuntimeError("registry broken")):
        response = client.get("/metrics")

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Failed to encode metrics: registry broken"


@pytest.mark.asyncio
async def test_concurrent_pings_are_all_counted(app):
    """Test: 100 simultaneous pings succeed and are each counted exactly once."""
    collector = app.state.metrics_collector
    before = collector.requests_total_value()

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        responses = await asyncio.gather(*(client.get("/ping") for _ in range(100)))

    assert all(r.status_code == 200 for r in responses)
    assert all(r.text == "pong" for r in responses)
    assert collector.requests_total_value() == before + 100
