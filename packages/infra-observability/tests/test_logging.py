"""Unit tests for selvis.infra.observability.logging."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest
from structlog.testing import capture_logs

from selvis.infra.observability.logging import (
    ChatColorProcessor,
    LoggingSettings,
    configure_logging,
    get_logger,
    get_logging_settings,
    strip_chat_codes,
)


class TestLoggingSettings:
    @pytest.mark.unit
    def test_default_values(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            settings = LoggingSettings()
            assert settings.log_level == "INFO"
            assert settings.environment == "development"

    @pytest.mark.unit
    def test_use_json_logs_production(self) -> None:
        settings = LoggingSettings(environment="production")
        assert settings.use_json_logs is True

    @pytest.mark.unit
    def test_use_json_logs_development(self) -> None:
        settings = LoggingSettings(environment="development")
        assert settings.use_json_logs is False

    @pytest.mark.unit
    def test_log_level_int(self) -> None:
        settings = LoggingSettings(log_level="DEBUG")
        assert settings.log_level_int == logging.DEBUG

    @pytest.mark.unit
    def test_normalize_log_level_lowercase(self) -> None:
        settings = LoggingSettings(log_level="debug")
        assert settings.log_level == "DEBUG"

    @pytest.mark.unit
    def test_invalid_log_level(self) -> None:
        with pytest.raises(Exception):  # noqa: B017
            LoggingSettings(log_level="INVALID")

    @pytest.mark.unit
    def test_from_env_vars(self) -> None:
        env = {"LOG_LEVEL": "WARNING", "ENVIRONMENT": "production"}
        with patch.dict("os.environ", env, clear=True):
            settings = LoggingSettings()
            assert settings.log_level == "WARNING"
            assert settings.environment == "production"


class TestChatColorProcessor:
    @pytest.mark.unit
    def test_strips_codes(self) -> None:
        processor = ChatColorProcessor()
        event_dict: dict[str, object] = {"event": "sent", "text": "§aYour visualizer§r"}
        result = processor(None, "info", event_dict)
        assert result["text"] == "Your visualizer"

    @pytest.mark.unit
    def test_uppercase_codes(self) -> None:
        assert strip_chat_codes("§CStop§L!") == "Stop!"

    @pytest.mark.unit
    def test_preserves_alternate_codes(self) -> None:
        processor = ChatColorProcessor()
        event_dict: dict[str, object] = {"event": "raw", "value": "&aEnabled"}
        result = processor(None, "info", event_dict)
        assert result["value"] == "&aEnabled"

    @pytest.mark.unit
    def test_ignores_non_strings(self) -> None:
        processor = ChatColorProcessor()
        event_dict: dict[str, object] = {"event": "loaded", "settings": 23}
        result = processor(None, "info", event_dict)
        assert result["settings"] == 23


class TestConfigureLogging:
    @pytest.mark.unit
    def test_configure_with_default_settings(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            get_logging_settings.cache_clear()
            configure_logging()
        assert logging.getLogger().level == logging.INFO
        get_logging_settings.cache_clear()

    @pytest.mark.unit
    def test_configure_with_custom_settings(self) -> None:
        settings = LoggingSettings(log_level="DEBUG", environment="production")
        configure_logging(settings)
        assert logging.getLogger().level == logging.DEBUG

    @pytest.mark.unit
    def test_root_level_follows_settings(self) -> None:
        configure_logging(LoggingSettings(log_level="WARNING"))
        assert logging.getLogger().level == logging.WARNING
        configure_logging(LoggingSettings(log_level="INFO"))
        assert logging.getLogger().level == logging.INFO


class TestGetLogger:
    @pytest.mark.unit
    def test_returns_bound_logger(self) -> None:
        configure_logging(LoggingSettings(log_level="DEBUG"))
        logger = get_logger("test.module")
        # Logger should be a structlog bound logger
        assert logger is not None

    @pytest.mark.unit
    def test_named_logger_records_name(self) -> None:
        configure_logging(LoggingSettings(log_level="DEBUG"))
        logger = get_logger("selvis.infra.persistence.yaml_store")
        with capture_logs() as logs:
            logger.info("settings_document_saved")
        assert logs == [
            {
                "event": "settings_document_saved",
                "log_level": "info",
                "logger_name": "selvis.infra.persistence.yaml_store",
            }
        ]

    @pytest.mark.unit
    def test_returns_unbound_logger_when_no_name(self) -> None:
        configure_logging(LoggingSettings(log_level="DEBUG"))
        logger = get_logger()
        assert logger is not None
