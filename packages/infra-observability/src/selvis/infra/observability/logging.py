"""Structured logging configuration using structlog.

This module provides environment-aware structured logging with:
- JSON output for production environments
- Console output with colors for development
- Chat colour codes stripped from logged strings
- Standard library loggers (used by the domain and application layers)
  sharing the same level

Usage:
    # During application startup
    from selvis.infra.observability.logging import configure_logging
    configure_logging()

    # In infrastructure code
    from selvis.infra.observability import get_logger
    logger = get_logger(__name__)
    logger.info("settings_document_saved", path="config.yml")
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from collections.abc import MutableMapping

# Type alias for structlog processor
Processor = structlog.types.Processor

# Section-sign format codes as produced by chat colour translation
_CHAT_CODE = re.compile(r"§[0-9a-fk-orx]", re.IGNORECASE)

STDLIB_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class LoggingSettings(BaseSettings):
    """Log level and output format for selvis, read from ``LOG_LEVEL`` and
    ``ENVIRONMENT``. Production renders JSON; anything else renders console
    output.
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        populate_by_name=True,
    )

    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Minimum log level to output",
    )
    environment: str = Field(
        default="development",
        alias="ENVIRONMENT",
        description="Environment name for format selection",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        if isinstance(v, str):
            return v.upper()
        return str(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v not in valid_levels:
            msg = f"log_level must be one of {valid_levels}"
            raise ValueError(msg)
        return v

    @property
    def use_json_logs(self) -> bool:
        """True for the production environment."""
        return self.environment == "production"

    @property
    def log_level_int(self) -> int:
        """Log level as a ``logging`` module constant."""
        return getattr(logging, self.log_level, logging.INFO)


class ChatColorProcessor:
    """Structlog processor removing chat colour codes from string values.

    Configured messages are logged after colour translation; the raw
    ``§a`` sequences only add noise to console and JSON output.

    Example:
        >>> processor = ChatColorProcessor()
        >>> processor(None, "info", {"event": "sent", "text": "§aEnabled"})["text"]
        'Enabled'
    """

    def __call__(
        self,
        logger: Any,
        method_name: str,
        event_dict: MutableMapping[str, Any],
    ) -> MutableMapping[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, str) and "§" in value:
                event_dict[key] = strip_chat_codes(value)
        return event_dict


def strip_chat_codes(text: str) -> str:
    """Remove section-sign format codes from ``text``."""
    return _CHAT_CODE.sub("", text)


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached LoggingSettings instance.

    Clear cache with ``get_logging_settings.cache_clear()`` for testing.
    """
    return LoggingSettings()


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog and the standard library root logger.

    Configures structlog with:
    - Context variable merging
    - Log level filtering
    - ISO 8601 timestamps (UTC)
    - Chat colour code stripping
    - Environment-aware rendering (JSON for production, console otherwise)

    The standard library root logger gets the same level so warnings from
    the settings registry are emitted alongside structlog output.

    Should be called once during application startup.

    Args:
        settings: Optional LoggingSettings instance. If not provided,
            settings are loaded from environment variables.
    """
    if settings is None:
        settings = get_logging_settings()

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        ChatColorProcessor(),
        structlog.processors.format_exc_info,
    ]

    if settings.use_json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level_int),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format=STDLIB_FORMAT)
    logging.getLogger().setLevel(settings.log_level_int)


def get_logger(name: str | None = None) -> structlog.typing.WrappedLogger:
    """Get a structlog logger bound to the given name.

    Args:
        name: Logger name (typically __name__ from calling module).
            If None, returns unbound logger.

    Returns:
        Lazy structlog logger carrying the name as ``logger_name``. Safe to
        create at import time: configuration is looked up on first use.
    """
    if name is not None:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()
