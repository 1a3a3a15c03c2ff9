"""Tests for Prometheus metrics endpoint and the quotes-calculated counter."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY

from ratecard.observability.metrics import record_quote, setup_metrics


@pytest.fixture()
def metrics_app() -> FastAPI:
    """Create a minimal FastAPI app with Prometheus instrumentation."""
    app = FastAPI()

    @app.get("/hello")
    async def hello():
        return {"msg": "hello"}

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    setup_metrics(app)
    return app


@pytest.fixture()
def metrics_client(metrics_app: FastAPI) -> TestClient:
    """TestClient for the metrics-enabled app."""
    return TestClient(metrics_app)


def _quotes_counted(pricing_model: str) -> float:
    """Current value of the quotes counter for one label (0 before first use)."""
    value = REGISTRY.get_sample_value(
        "ratecard_quotes_calculated_total", {"pricing_model": pricing_model}
    )
    return value or 0.0


def test_metrics_endpoint_returns_prometheus_format(metrics_client: TestClient) -> None:
    """GET /metrics returns 200 with HTTP and quote metrics."""
    metrics_client.get("/hello")
    record_quote("flat_fee")
    resp = metrics_client.get("/metrics")
    assert resp.status_code == 200
    body = resp.text
    assert "http_request" in body
    assert "ratecard_quotes_calculated_total" in body


def test_excluded_handlers_not_in_metrics(metrics_client: TestClient) -> None:
    """/health does NOT appear as a handler label in metrics output."""
    metrics_client.get("/health")
    resp = metrics_client.get("/metrics")
    lines = [
        line
        for line in resp.text.splitlines()
        if "http_request_duration" in line and 'handler="' in line
    ]
    for line in lines:
        assert '/health"' not in line, f"/health found in metrics: {line}"


def test_record_quote_increments_by_model() -> None:
    """record_quote increments only the counter for its pricing model."""
    before_retainer = _quotes_counted("retainer")
    before_ugc = _quotes_counted("ugc")

    record_quote("retainer")
    record_quote("retainer")

    assert _quotes_counted("retainer") == before_retainer + 2.0
    assert _quotes_counted("ugc") == before_ugc
