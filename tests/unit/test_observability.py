"""
Name: Request Context, Metrics and Body Limit Tests

Responsibilities:
  - Verify X-Request-Id generation and propagation
  - Verify oversized bodies are rejected with 413
  - Verify endpoint normalization and status buckets for metrics
  - Verify JSON log formatting and redaction
"""

import json
import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from users_api.context import request_id_var
from users_api.logger import JSONFormatter
from users_api.metrics import get_metrics_response, normalize_endpoint, status_bucket
from users_api.middleware import BodyLimitMiddleware, RequestContextMiddleware


pytestmark = pytest.mark.unit


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    app.add_middleware(BodyLimitMiddleware, max_body_bytes=32)
    app.add_middleware(RequestContextMiddleware)

    @app.get("/echo")
    def echo():
        return {"request_id": request_id_var.get()}

    @app.post("/echo")
    def echo_body(payload: dict):
        return payload

    return TestClient(app)


def test_request_id_generated(client):
    res = client.get("/echo")

    request_id = res.headers["X-Request-Id"]
    assert request_id
    assert res.json()["request_id"] == request_id


def test_request_id_propagated(client):
    res = client.get("/echo", headers={"X-Request-Id": "abc-123"})

    assert res.headers["X-Request-Id"] == "abc-123"
    assert res.json()["request_id"] == "abc-123"


def test_small_body_passes(client):
    res = client.post("/echo", json={"a": 1})

    assert res.status_code == 200


def test_oversized_body_is_413(client):
    res = client.post("/echo", json={"name": "x" * 100})

    assert res.status_code == 413
    assert res.headers["content-type"].startswith("application/problem+json")
    assert res.json()["code"] == "PAYLOAD_TOO_LARGE"
    assert res.headers["X-Request-Id"]


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/api/users", "/api/users"),
        ("/api/users/588935f5c668650dc77df581", "/api/users/{id}"),
        ("/api/users/588935F5C668650DC77DF581", "/api/users/{id}"),
        ("/api/users/bad", "/api/users/bad"),
    ],
)
def test_normalize_endpoint(path, expected):
    assert normalize_endpoint(path) == expected


@pytest.mark.parametrize(
    "code, bucket", [(200, "2xx"), (201, "2xx"), (404, "4xx"), (503, "5xx"), (302, "other")]
)
def test_status_bucket(code, bucket):
    assert status_bucket(code) == bucket


def test_metrics_exposed_after_request(client):
    client.get("/echo")

    body, content_type = get_metrics_response()

    assert content_type.startswith("text/plain")
    assert b"users_api_requests_total" in body
    assert b"users_api_request_latency_seconds" in body


def test_json_formatter_redacts_sensitive_keys():
    record = logging.LogRecord(
        name="users-api",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="connecting",
        args=(),
        exc_info=None,
    )
    record.password = "hunter2"
    record.mongo_addr = "localhost"

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "connecting"
    assert payload["password"] == "***REDACTED***"
    assert payload["mongo_addr"] == "localhost"
