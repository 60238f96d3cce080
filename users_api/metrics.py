"""
Name: Prometheus Metrics

Responsibilities:
  - Define and expose Prometheus metrics
  - Record request latency and count

Collaborators:
  - middleware.py: Records request metrics
  - main.py: /metrics endpoint

Constraints:
  - Low cardinality labels only (endpoint, method, status - NOT user id)

Notes:
  - Metrics live in a private CollectorRegistry so tests can import the
    module repeatedly without duplicate registration errors
"""

import re

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

_registry = CollectorRegistry()

# R: Request counter with endpoint and status labels
_requests_total = Counter(
    "users_api_requests_total",
    "Total HTTP requests",
    ["endpoint", "method", "status"],
    registry=_registry,
)

# R: Request latency histogram (seconds)
# Buckets: 5ms, 10ms, 25ms, 50ms, 100ms, 250ms, 500ms, 1s, 2.5s
_request_latency = Histogram(
    "users_api_request_latency_seconds",
    "HTTP request latency in seconds",
    ["endpoint", "method"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
    registry=_registry,
)

_OBJECT_ID_SEGMENT = re.compile(r"/[0-9a-f]{24}(?=/|$)", re.IGNORECASE)


def record_request_metrics(
    endpoint: str,
    method: str,
    status_code: int,
    latency_seconds: float,
) -> None:
    """
    R: Record HTTP request metrics.

    Args:
        endpoint: Request path (e.g., "/api/users")
        method: HTTP method (e.g., "GET")
        status_code: Response status code
        latency_seconds: Request duration in seconds
    """
    normalized = normalize_endpoint(endpoint)

    _requests_total.labels(
        endpoint=normalized,
        method=method,
        status=status_bucket(status_code),
    ).inc()
    _request_latency.labels(endpoint=normalized, method=method).observe(
        latency_seconds
    )


def normalize_endpoint(path: str) -> str:
    """
    R: Normalize endpoint path to prevent high cardinality.

    /api/users/5889... -> /api/users/{id}
    """
    return _OBJECT_ID_SEGMENT.sub("/{id}", path)


def status_bucket(code: int) -> str:
    """R: Bucket status code (2xx, 4xx, 5xx)."""
    if 200 <= code < 300:
        return "2xx"
    elif 400 <= code < 500:
        return "4xx"
    elif 500 <= code < 600:
        return "5xx"
    return "other"


def get_metrics_response() -> tuple[bytes, str]:
    """
    R: Generate Prometheus metrics response.

    Returns:
        Tuple of (body_bytes, content_type)
    """
    return generate_latest(_registry), CONTENT_TYPE_LATEST
