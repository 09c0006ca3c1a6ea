"""Unit tests for logging configuration and the JSON formatter."""
from __future__ import annotations

import json
import logging
import sys

import pytest
from opentelemetry.trace import NonRecordingSpan, SpanContext, TraceFlags, use_span

from algolia_client.core.settings import LoggingSettings
from algolia_client.infra.logging import JSONFormatter, build_logging_config, setup_logging
from algolia_client.infra.logging import config as logging_config


def make_record(msg: str = "GET /1/indexes -> 200", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="algolia_client.infra.external.base_client",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.mark.unit
class TestJSONFormatter:
    """Test suite for JSONFormatter."""

    def test_basic_fields(self):
        """Test level, logger, message and UTC timestamp."""
        data = json.loads(JSONFormatter().format(make_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "algolia_client.infra.external.base_client"
        assert data["message"] == "GET /1/indexes -> 200"
        assert data["timestamp"].endswith("Z")

    def test_extra_and_static_fields(self):
        """Test that extra payloads and static fields become top-level keys."""
        formatter = JSONFormatter(static={"service": "algolia-client"})

        data = json.loads(formatter.format(make_record(host="APP-dsn.algolia.net", status=200)))

        assert data["host"] == "APP-dsn.algolia.net"
        assert data["status"] == 200
        assert data["service"] == "algolia-client"
        assert "msg" not in data

    def test_exception_on_one_line(self):
        """Test that tracebacks do not break the JSONL format."""
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record()
            record.exc_info = sys.exc_info()

        output = JSONFormatter().format(record)

        assert "\n" not in output
        assert "ValueError: boom" in json.loads(output)["exception"]

    def test_trace_correlation(self):
        """Test that trace and span ids are added inside an active span."""
        context = SpanContext(
            trace_id=0x1234,
            span_id=0x56,
            is_remote=False,
            trace_flags=TraceFlags(TraceFlags.SAMPLED),
        )

        with use_span(NonRecordingSpan(context)):
            data = json.loads(JSONFormatter().format(make_record()))

        assert data["trace_id"] == format(0x1234, "032x")
        assert data["span_id"] == format(0x56, "016x")


@pytest.mark.unit
class TestLoggingConfig:
    """Test suite for dictConfig construction."""

    def test_console_only(self):
        config = build_logging_config(
            log_level="info",
            console_level="debug",
            file_level="info",
            http_level="warning",
            file_path=None,
            json_logs=False,
            console_enabled=True,
            include_function_name=False,
            file_max_bytes=1024,
            file_backup_count=1,
            service_name="algolia-client",
        )

        assert list(config["handlers"]) == ["console"]
        assert config["handlers"]["console"]["level"] == "DEBUG"
        assert config["handlers"]["console"]["formatter"] == "text"
        assert config["root"]["level"] == "INFO"
        assert config["loggers"]["httpx"]["level"] == "WARNING"

    def test_file_handler_always_json(self, tmp_path):
        config = build_logging_config(
            log_level="WARNING",
            console_level="WARNING",
            file_level="ERROR",
            http_level="INFO",
            file_path=tmp_path / "client.jsonl",
            json_logs=False,
            console_enabled=False,
            include_function_name=True,
            file_max_bytes=2048,
            file_backup_count=3,
            service_name="svc",
        )

        handler = config["handlers"]["file"]
        assert handler["formatter"] == "json"
        assert handler["maxBytes"] == 2048
        assert config["loggers"]["httpcore"]["level"] == "INFO"
        assert config["formatters"]["json"]["static"] == {"service": "svc"}
        assert config["formatters"]["json"]["fmt_keys"]["function"] == "funcName"

    def test_setup_logging_runs_once(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging_config, "_LOGGING_INITIALIZED", False)
        monkeypatch.setattr(logging_config, "configure_logging", lambda **kw: calls.append(kw))

        setup_logging(LoggingSettings(level="DEBUG"))
        setup_logging(LoggingSettings(level="ERROR"))
        setup_logging(LoggingSettings(level="ERROR"), force=True, json_logs=True)

        assert [c["log_level"] for c in calls] == ["DEBUG", "ERROR"]
        assert calls[1]["json_logs"] is True
