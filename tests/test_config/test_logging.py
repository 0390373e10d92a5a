"""Testes para config.logging.

Cobre: configure_logging, get_logger, CorrelationIdFilter, create_json_formatter.
"""

from __future__ import annotations

import io
import json
import logging

import httpx
import pytest
from pythonjsonlogger.json import JsonFormatter

from line_bot.config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)
from line_bot.config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS
from line_bot.connectors import HttpClientConfig, LineHttpClient


def _record(msg: str = "message") -> logging.LogRecord:
    return logging.LogRecord(
        name="line_bot.test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        """Configura logging com nível padrão INFO."""
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_configure_logging_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)
        assert isinstance(handler.formatter, JsonFormatter)

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "line_bot_sdk"


class TestGetLogger:
    def test_get_logger_same_name_returns_same_instance(self) -> None:
        """Mesmo nome retorna mesma instância."""
        assert get_logger("line_bot.client") is get_logger("line_bot.client")
        assert get_logger("line_bot.client").name == "line_bot.client"


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_filter_adds_correlation_id_from_getter(self) -> None:
        filter_ = CorrelationIdFilter("my_service", lambda: "corr-123")
        record = _record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        """Filter preserva correlation_id passado via extra."""
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        record = _record()
        CorrelationIdFilter("service_name").filter(record)
        assert record.correlation_id == ""

    def test_none_from_extra_falls_back_to_getter(self) -> None:
        record = _record()
        record.correlation_id = None
        CorrelationIdFilter("svc", lambda: "webhook-1").filter(record)
        assert record.correlation_id == "webhook-1"


class TestJsonFormatter:
    def test_output_has_renamed_fields(self) -> None:
        record = _record("Mensagens enviadas")
        CorrelationIdFilter("line_bot_sdk", lambda: "req-1").filter(record)

        output = json.loads(create_json_formatter().format(record))

        assert output["level"] == "INFO"
        assert output["logger"] == "line_bot.test"
        assert output["message"] == "Mensagens enviadas"
        assert output["correlation_id"] == "req-1"
        assert output["service"] == "line_bot_sdk"

    def test_field_constants(self) -> None:
        assert "correlation_id" in REQUIRED_LOG_FIELDS
        assert FIELD_RENAME_MAP["levelname"] == "level"
        assert FIELD_RENAME_MAP["name"] == "logger"

    def test_non_ascii_is_kept(self) -> None:
        output = create_json_formatter().format(_record("Requisição não enviada"))
        assert "Requisição não enviada" in output
        assert "timestamp" in json.loads(output)


class TestRequestIdCorrelation:
    """O x-line-request-id da resposta vira o correlation_id do log."""

    @pytest.mark.asyncio
    async def test_line_request_id_is_logged_as_correlation_id(self) -> None:
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(create_json_formatter())
        handler.addFilter(CorrelationIdFilter("line_bot_sdk", lambda: "fallback"))

        connector_logger = logging.getLogger("line_bot.connectors.line_logging")
        previous_level = connector_logger.level
        connector_logger.addHandler(handler)
        connector_logger.setLevel(logging.DEBUG)

        def respond(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={}, headers={"x-line-request-id": "req-abc-123"})

        client = LineHttpClient(
            "token",
            config=HttpClientConfig(max_retries=0),
            transport=httpx.MockTransport(respond),
        )
        try:
            await client.call("POST", "/v2/bot/message/push", {"to": "U1", "messages": []})
        finally:
            connector_logger.removeHandler(handler)
            connector_logger.setLevel(previous_level)

        lines = [json.loads(line) for line in stream.getvalue().splitlines() if line]
        assert lines, "nenhum log emitido"
        record = lines[-1]
        assert record["correlation_id"] == "req-abc-123"
        assert record["service"] == "line_bot_sdk"
        assert record["endpoint"] == "/v2/bot/message/push"
        assert record["status_code"] == 200
        assert "token" not in stream.getvalue()
