"""Testes para config.logging.

Cobre: configure_logging, get_logger, CorrelationIdFilter,
create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest

from botmatic.config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)
from botmatic.config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS
from botmatic.observability import reset_correlation_id, set_correlation_id


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def _record(msg: str = "botmatic_call", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord("botmatic.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Sem LOG_LEVEL, nível padrão é INFO."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_configure_logging_reads_log_level_env(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Sem nível explícito, usa LOG_LEVEL das settings."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        configure_logging()
        assert logging.getLogger().level == logging.DEBUG

    def test_explicit_level_overrides_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        configure_logging(level="ERROR")
        assert logging.getLogger().level == logging.ERROR

    def test_invalid_log_level_env_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "verbose")
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging()

    def test_configure_logging_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_configure_logging_replaces_handlers(self) -> None:
        """configure_logging substitui handlers existentes."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)

    def test_default_getter_reads_context(self) -> None:
        """Sem getter explícito, usa o correlation_id do contexto."""
        configure_logging()
        corr_filter = logging.getLogger().handlers[0].filters[0]

        token = set_correlation_id("ctx-123")
        try:
            record = _record()
            corr_filter.filter(record)
        finally:
            reset_correlation_id(token)

        assert record.correlation_id == "ctx-123"

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "botmatic_client"


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_returns_named_logger(self) -> None:
        logger = get_logger("botmatic.connectors.client")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "botmatic.connectors.client"
        assert logger is get_logger("botmatic.connectors.client")


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_injects_service_and_correlation_id(self) -> None:
        record = _record()
        assert CorrelationIdFilter("svc", lambda: "abc").filter(record) is True
        assert record.service == "svc"
        assert record.correlation_id == "abc"

    def test_preserves_explicit_correlation_id(self) -> None:
        record = _record(correlation_id="explicit")
        CorrelationIdFilter("svc", lambda: "abc").filter(record)
        assert record.correlation_id == "explicit"

    def test_default_getter_is_empty(self) -> None:
        record = _record()
        CorrelationIdFilter("svc").filter(record)
        assert record.correlation_id == ""


class TestJsonFormatter:
    """Testes para create_json_formatter."""

    def test_output_has_required_fields_renamed(self) -> None:
        formatter = create_json_formatter()
        record = _record(correlation_id="c-1", service="botmatic_client", status_code=404)

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "botmatic_call"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "botmatic.test"
        assert payload["correlation_id"] == "c-1"
        assert payload["service"] == "botmatic_client"
        assert payload["status_code"] == 404

    def test_rename_map(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}
        assert "correlation_id" in REQUIRED_LOG_FIELDS
