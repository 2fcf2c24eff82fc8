"""Prometheus metrics for the ToMusic API client.

Counts every API call by operation and outcome so a dashboard can tell
"the server said no" apart from "we never reached the server".

Metrics:
    tomusic_api_requests_total     Counter by operation and outcome
    tomusic_api_latency_seconds    Histogram of request wall-clock time

Outcomes:
    success          2xx with a JSON object body
    http_error       non-2xx status
    malformed        2xx whose body is not a JSON object
    transport_error  no HTTP status received

Usage::

    from infrastructure.metrics import LatencyTimer, record_api_request

    with LatencyTimer() as t:
        response = send()
    record_api_request(operation="generate", outcome="success", latency_seconds=t.elapsed)
"""

from __future__ import annotations

import time

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

OUTCOMES: frozenset[str] = frozenset({"success", "http_error", "malformed", "transport_error"})

# Separate from the process-wide default registry
REGISTRY = CollectorRegistry()

api_requests_total = Counter(
    "tomusic_api_requests_total",
    "ToMusic API requests by operation and outcome",
    ["operation", "outcome"],
    registry=REGISTRY,
)

api_latency_seconds = Histogram(
    "tomusic_api_latency_seconds",
    "ToMusic API request latency in seconds",
    ["operation"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0],
    registry=REGISTRY,
)


def record_api_request(
    *,
    operation: str,
    outcome: str,
    latency_seconds: float,
) -> None:
    """Record a completed (or failed) API call.

    Args:
        operation: Operation label, e.g. "generate", "track_info", "upload".
        outcome: One of ``OUTCOMES``.
        latency_seconds: Wall-clock time of the HTTP exchange.

    Raises:
        ValueError: If outcome is not a known outcome label.
    """
    if outcome not in OUTCOMES:
        raise ValueError(f"Unknown outcome {outcome!r}, valid options: {sorted(OUTCOMES)}")
    api_requests_total.labels(operation=operation, outcome=outcome).inc()
    api_latency_seconds.labels(operation=operation).observe(latency_seconds)


def get_metrics_response() -> tuple[bytes, str]:
    """Generate Prometheus text exposition format.

    Returns:
        Tuple of (body_bytes, content_type_string).
    """
    return generate_latest(REGISTRY), CONTENT_TYPE_LATEST


class LatencyTimer:
    """Context manager for measuring latency.

    ``elapsed`` is set on exit, including when the block raises.
    """

    def __init__(self) -> None:
        """Initialize timer."""
        self._start: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> LatencyTimer:
        """Start timing."""
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args: object) -> None:
        """Stop timing and record elapsed seconds."""
        self.elapsed = time.perf_counter() - self._start
