"""Settings-document location using Pydantic settings.

This module provides type-safe configuration for where the YAML settings
document lives and how it is written. Settings are loaded from environment
variables and validated using Pydantic.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_YAML_SUFFIXES = frozenset({".yml", ".yaml"})


class StoreSettings(BaseSettings):
    """Configuration for the YAML settings document.

    Environment Variables:
        SELVIS_CONFIG_PATH: Path of the settings document
            (default: plugins/SelectionVisualizer/config.yml)
        SELVIS_CONFIG_TEMPLATE_PATH: Optional document copied into place
            when the settings document does not exist yet
        SELVIS_CONFIG_INDENT: YAML indentation width (default: 2)

    Example:
        >>> settings = StoreSettings(config_path="visualizer.yml")
        >>> settings.config_path.name
        'visualizer.yml'
    """

    model_config = SettingsConfigDict(
        env_prefix="SELVIS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    config_path: Path = Field(
        default=Path("plugins/SelectionVisualizer/config.yml"),
        description="Path of the YAML settings document",
    )
    config_template_path: Path | None = Field(
        default=None,
        description="Document copied into place when the settings document is missing",
    )
    config_indent: int = Field(
        default=2,
        ge=2,
        le=8,
        description="YAML indentation width",
    )

    @field_validator("config_path", "config_template_path")
    @classmethod
    def validate_yaml_suffix(cls, v: Path | None) -> Path | None:
        """Require a ``.yml`` or ``.yaml`` document."""
        if v is not None and v.suffix.lower() not in _YAML_SUFFIXES:
            msg = f"Settings document must be a .yml or .yaml file: {v}"
            raise ValueError(msg)
        return v


@lru_cache(maxsize=1)
def get_store_settings() -> StoreSettings:
    """Get cached StoreSettings instance.

    Clear cache with ``get_store_settings.cache_clear()`` for testing.
    """
    return StoreSettings()
