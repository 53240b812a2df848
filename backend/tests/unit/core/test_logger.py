"""Unit tests for JSON logging and request correlation."""

from __future__ import annotations

import json
import logging

from catalog.core.logger import JSONFormatter, ensure_request_id
from flask import g


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("catalog.test", logging.INFO, __file__, 1, "auth.login", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_emits_single_json_line():
    line = JSONFormatter().format(_record(request_id="rid-1", event="auth.login", user_id=3))
    payload = json.loads(line)

    assert "\n" not in line
    assert payload["message"] == "auth.login"
    assert payload["level"] == "INFO"
    assert payload["request_id"] == "rid-1"
    assert payload["event"] == "auth.login"
    assert payload["user_id"] == 3


def test_formatter_skips_unknown_extras():
    payload = json.loads(JSONFormatter().format(_record(password="hunter2")))
    assert "password" not in payload


def test_request_id_from_header_is_reused(app):
    with app.test_request_context(headers={"X-Correlation-ID": "corr-42"}):
        g.pop("request_id", None)
        assert ensure_request_id() == "corr-42"
        assert ensure_request_id() == "corr-42"


def test_request_id_generated_when_absent(app):
    with app.test_request_context():
        g.pop("request_id", None)
        first = ensure_request_id()
        assert first
        assert ensure_request_id() == first


def test_response_echoes_request_id(client):
    response = client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"
