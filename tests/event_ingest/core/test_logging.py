"""Tests for structlog setup and per-request log context."""
import json

import pytest
import structlog
from fastapi import FastAPI
from fastapi.testclient import TestClient

from event_ingest.core.logging import (
    _drop_health_debug,
    get_logger,
    request_context_middleware,
    setup_logging,
)


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


def _last_entry(capsys) -> dict:
    return json.loads(capsys.readouterr().out.strip().splitlines()[-1])


def test_json_logs_carry_service_fields(capsys):
    setup_logging("event-ingest-service", "9.9.9", log_level="INFO", log_format="json")

    get_logger("tests").info("Received event", entity_type="user")

    entry = _last_entry(capsys)
    assert entry["event"] == "Received event"
    assert entry["service"] == "event-ingest-service"
    assert entry["version"] == "9.9.9"
    assert entry["entity_type"] == "user"
    assert entry["logger_name"] == "tests"
    assert entry["level"] == "info"


def test_log_level_filters_debug(capsys):
    setup_logging("event-ingest-service", log_level="INFO", log_format="json")

    get_logger().debug("hidden")

    assert capsys.readouterr().out == ""


def test_health_debug_entries_dropped():
    with pytest.raises(structlog.DropEvent):
        _drop_health_debug(None, "debug", {"path": "/health"})

    event_dict = {"path": "/event"}
    assert _drop_health_debug(None, "debug", event_dict) is event_dict
    info_dict = {"path": "/health"}
    assert _drop_health_debug(None, "info", info_dict) is info_dict


class TestRequestContextMiddleware:
    @pytest.fixture
    def client(self):
        app = FastAPI()
        app.middleware("http")(request_context_middleware)

        @app.post("/event")
        async def handler():
            get_logger().info("handled")
            return {}

        return TestClient(app)

    def test_request_fields_bound_while_handling(self, client, capsys):
        setup_logging("event-ingest-service", log_format="json")

        response = client.post("/event", headers={"X-Request-ID": "req-7"})

        entry = _last_entry(capsys)
        assert entry["request_id"] == "req-7"
        assert entry["method"] == "POST"
        assert entry["path"] == "/event"
        assert response.headers["X-Request-ID"] == "req-7"

    def test_request_id_generated_when_absent(self, client):
        response = client.post("/event")
        assert len(response.headers["X-Request-ID"]) == 32

    def test_request_fields_unbound_afterwards(self, client, capsys):
        setup_logging("event-ingest-service", log_format="json")
        client.post("/event", headers={"X-Request-ID": "req-8"})

        get_logger().info("after")

        entry = _last_entry(capsys)
        assert "request_id" not in entry
        assert entry["service"] == "event-ingest-service"
