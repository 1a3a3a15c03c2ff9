"""Prometheus metrics for the rate card service.

Provides:
- ``setup_metrics(app)``: Attach prometheus-fastapi-instrumentator to a FastAPI
  app, exposing ``/metrics`` with HTTP request duration/count.
- ``QUOTES_CALCULATED``: Counter of priced quotes, labelled by pricing model.
"""

from __future__ import annotations

from fastapi import FastAPI
from prometheus_client import Counter
from prometheus_fastapi_instrumentator import Instrumentator

QUOTES_CALCULATED: Counter = Counter(
    "ratecard_quotes_calculated_total",
    "Total number of quotes priced, by pricing model",
    ["pricing_model"],
)


def record_quote(pricing_model: str) -> None:
    """Count one priced quote for *pricing_model*."""
    QUOTES_CALCULATED.labels(pricing_model=pricing_model).inc()


def setup_metrics(app: FastAPI) -> None:
    """Instrument *app* with Prometheus HTTP metrics and expose ``/metrics``.

    The health and metrics endpoints are excluded from instrumentation.

    Args:
        app: The FastAPI application to instrument.
    """
    Instrumentator(
        should_group_status_codes=True,
        should_ignore_untemplated=True,
        excluded_handlers=["/health", "/metrics"],
    ).instrument(app).expose(app, include_in_schema=False, should_gzip=True)
