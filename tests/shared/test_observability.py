# tests\shared\test_observability.py
from unittest.mock import MagicMock

import httpx
import structlog
from opentelemetry.trace import StatusCode

from pricing_gateway.shared.config import settings
from pricing_gateway.shared.logging_config import (
    add_service_context,
    bind_request_context,
    bind_session_context,
)
from pricing_gateway.shared.telemetry import mark_span_failed


class TestLogContext:

    def teardown_method(self):
        structlog.contextvars.clear_contextvars()

    def test_request_context_is_bound(self):
        bind_request_context("POST", "/api/pricing/apply")
        bind_session_context("header")

        assert structlog.contextvars.get_contextvars() == {
            "method": "POST",
            "path": "/api/pricing/apply",
            "session_source": "header",
        }

    def test_new_request_starts_clean(self):
        """
        Scenario: A second request is bound after a first one set a locale and session.
        Expected: Nothing from the first request survives.
        """
        bind_request_context("GET", "/en/products", "en")
        bind_session_context("cookie")

        bind_request_context("GET", "/dashboard")

        assert structlog.contextvars.get_contextvars() == {"method": "GET", "path": "/dashboard"}

    def test_service_context_does_not_override(self):
        event = add_service_context(None, "info", {"event": "x", "service": "other"})

        assert event["service"] == "other"
        assert event["env"] == settings.APP_ENV.value


def test_mark_span_failed_records_cause():
    span = MagicMock()
    error = httpx.ConnectError("refused")

    mark_span_failed(span, error, "transport")

    span.record_exception.assert_called_once_with(error)
    status = span.set_status.call_args[0][0]
    assert status.status_code == StatusCode.ERROR
    assert status.description == "transport"
