"""Catalog configuration using Pydantic settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from selvis.infra.catalog.host_version import HostVersion


class CatalogSettings(BaseSettings):
    """Configuration for the built-in effect and material catalogs.

    Environment Variables:
        SELVIS_HOST_VERSION: Version of the running host, e.g. ``1.16.5``
            or a full server version string (default: 1.20.4)
    """

    model_config = SettingsConfigDict(
        env_prefix="SELVIS_",
        extra="ignore",
    )

    host_version: str = Field(
        default="1.20.4",
        description="Version of the running host",
    )

    @field_validator("host_version")
    @classmethod
    def validate_host_version(cls, v: str) -> str:
        """Reject strings without a parseable version."""
        HostVersion.parse(v)
        return v

    @property
    def version(self) -> HostVersion:
        return HostVersion.parse(self.host_version)


@lru_cache(maxsize=1)
def get_catalog_settings() -> CatalogSettings:
    """Get cached CatalogSettings instance.

    Clear cache with ``get_catalog_settings.cache_clear()`` for testing.
    """
    return CatalogSettings()
