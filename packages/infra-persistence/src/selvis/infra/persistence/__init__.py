"""Selvis Infra Persistence -- YAML settings document and its settings."""

from selvis.infra.persistence.store_settings import StoreSettings, get_store_settings
from selvis.infra.persistence.yaml_store import YamlSettingsStore

__all__ = [
    "StoreSettings",
    "YamlSettingsStore",
    "get_store_settings",
]
