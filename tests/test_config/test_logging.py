"""Testes para config.logging.

Cobre: configure_logging, get_logger, CorrelationIdFilter,
SensitiveFieldFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    SensitiveFieldFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS
from config.logging.filters import REDACTED


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="interaction_dispatched",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_configure_logging_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_configure_logging_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_configure_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_configure_logging_installs_filters(self) -> None:
        configure_logging(correlation_id_getter=lambda: "cid")
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)
        assert any(isinstance(f, SensitiveFieldFilter) for f in handler.filters)

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "sms-discord-bridge"


class TestGetLogger:
    def test_get_logger_returns_named_logger(self) -> None:
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"


class TestCorrelationIdFilter:
    def test_injects_service_and_correlation_id(self) -> None:
        record = _record()
        assert CorrelationIdFilter("svc", lambda: "cid-1").filter(record) is True
        assert record.service == "svc"
        assert record.correlation_id == "cid-1"

    def test_preserves_explicit_correlation_id(self) -> None:
        record = _record(correlation_id="explicit")
        CorrelationIdFilter("svc", lambda: "from-context").filter(record)
        assert record.correlation_id == "explicit"

    def test_without_getter_uses_empty_string(self) -> None:
        record = _record()
        CorrelationIdFilter("svc").filter(record)
        assert record.correlation_id == ""


class TestSensitiveFieldFilter:
    def test_redacts_sensitive_fields(self) -> None:
        record = _record(to_number="+5511999999999", signature="ab" * 64, reason="x")
        assert SensitiveFieldFilter().filter(record) is True
        assert record.to_number == REDACTED
        assert record.signature == REDACTED
        assert record.reason == "x"

    def test_ignores_absent_and_empty_fields(self) -> None:
        record = _record(content="")
        SensitiveFieldFilter().filter(record)
        assert record.content == ""
        assert not hasattr(record, "from_number")


class TestJsonFormatter:
    def test_output_has_required_fields_renamed(self) -> None:
        record = _record(correlation_id="cid", service="svc")
        output = json.loads(create_json_formatter().format(record))

        assert output["level"] == "INFO"
        assert output["logger"] == "test.logger"
        assert output["message"] == "interaction_dispatched"
        assert output["correlation_id"] == "cid"
        assert output["service"] == "svc"

    def test_field_constants(self) -> None:
        assert "correlation_id" in REQUIRED_LOG_FIELDS
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}
