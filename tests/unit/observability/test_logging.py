"""Unit tests for observability logging – structlog configuration and correlation processor."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from kafka_rpc.observability.correlation import CorrelationContext, RequestContext
from kafka_rpc.observability.logging import CorrelationProcessor, configure_logging, get_logger


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


# ---------------------------------------------------------------------------
# CorrelationProcessor
# ---------------------------------------------------------------------------


class TestCorrelationProcessor:
    def test_no_context_leaves_event_untouched(self) -> None:
        event = {"event": "x"}
        assert CorrelationProcessor()(None, "info", event) == {"event": "x"}

    def test_injects_request_context(self) -> None:
        ctx = RequestContext(correlation_id="cid-1", topic="wants-get-sample", event_type="WantsGetSampleEvent")
        with CorrelationContext.scope(ctx):
            event = CorrelationProcessor()(None, "info", {"event": "x"})
        assert event == {
            "event": "x",
            "correlation_id": "cid-1",
            "request_topic": "wants-get-sample",
            "event_type": "WantsGetSampleEvent",
        }

    def test_explicit_fields_win(self) -> None:
        with CorrelationContext.scope(RequestContext(correlation_id="ambient")):
            event = CorrelationProcessor()(None, "info", {"event": "x", "correlation_id": "explicit"})
        assert event["correlation_id"] == "explicit"
        assert "request_topic" not in event

    def test_missing_correlation_id_is_not_injected(self) -> None:
        with CorrelationContext.scope(RequestContext(correlation_id=None, topic="t")):
            event = CorrelationProcessor()(None, "info", {"event": "x"})
        assert event == {"event": "x", "request_topic": "t"}


# ---------------------------------------------------------------------------
# get_logger
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("tests", service="sample-service").info("rpc.test", topic="t")
        assert logs == [{"event": "rpc.test", "log_level": "info", "service": "sample-service", "topic": "t"}]

    def test_without_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger().warning("rpc.plain")
        assert logs[0]["event"] == "rpc.plain"


# ---------------------------------------------------------------------------
# configure_logging
# ---------------------------------------------------------------------------


class TestConfigureLogging:
    def test_json_output_carries_correlation(self, restore_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(logging.DEBUG, json=True)
        log = structlog.get_logger("kafka_rpc.tests")
        with CorrelationContext.scope(RequestContext(correlation_id="cid-json", topic="wants-x")):
            log.info("rpc.request.handled", reply=True)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "rpc.request.handled"
        assert record["level"] == "info"
        assert record["logger"] == "kafka_rpc.tests"
        assert record["correlation_id"] == "cid-json"
        assert record["request_topic"] == "wants-x"
        assert record["reply"] is True
        assert "timestamp" in record

    def test_level_filters_records(self, restore_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(logging.WARNING, json=True)
        log = structlog.get_logger("kafka_rpc.tests")
        log.info("rpc.hidden")
        log.warning("rpc.visible")
        err = capsys.readouterr().err
        assert "rpc.visible" in err
        assert "rpc.hidden" not in err

    def test_console_renderer(self, restore_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json=False)
        structlog.get_logger("kafka_rpc.tests").info("rpc.console")
        assert "rpc.console" in capsys.readouterr().err
