"""Selvis Infra Observability -- structlog logging configuration."""

from __future__ import annotations

from selvis.infra.observability.logging import (
    ChatColorProcessor,
    LoggingSettings,
    configure_logging,
    get_logger,
    get_logging_settings,
    strip_chat_codes,
)

__all__ = [
    "ChatColorProcessor",
    "LoggingSettings",
    "configure_logging",
    "get_logger",
    "get_logging_settings",
    "strip_chat_codes",
]
