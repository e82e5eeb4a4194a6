"""Selection visualizer application context.

Wires the YAML settings document, the built-in catalogs, the settings
registry and the per-player override table, then loads the settings.

Usage::

    from examples.selection_visualizer.context import create_visualizer_context

    context = create_visualizer_context()
    context.registry.particle_effect
    context.overrides.toggle(player)
    message = context.reload()
"""

from __future__ import annotations

from dataclasses import dataclass

from selvis.foundation.application import PlayerOverrideTable, SettingsRegistry
from selvis.infra.catalog import (
    BuiltinEffectCatalog,
    BuiltinMaterialCatalog,
    CatalogSettings,
    get_catalog_settings,
)
from selvis.infra.observability import LoggingSettings, configure_logging, get_logger
from selvis.infra.persistence import StoreSettings, YamlSettingsStore, get_store_settings

logger = get_logger(__name__)


@dataclass(frozen=True)
class VisualizerContext:
    """Loaded settings registry and the collaborators sharing its document.

    Attributes:
        registry: Loaded settings registry.
        overrides: Per-player toggles stored in the same document.
        store: The backing YAML document.
    """

    registry: SettingsRegistry
    overrides: PlayerOverrideTable
    store: YamlSettingsStore

    def reload(self) -> str:
        """Re-read the document, rebuild the settings, return the reload message."""
        snapshot = self.registry.reload_config(reload=True)
        logger.info("settings_reloaded", path=str(self.store.path), settings=len(snapshot))
        return self.registry.lang_config_reloaded


def create_visualizer_context(
    store_settings: StoreSettings | None = None,
    catalog_settings: CatalogSettings | None = None,
    logging_settings: LoggingSettings | None = None,
    *,
    configure: bool = True,
) -> VisualizerContext:
    """Create and load a visualizer context.

    Args:
        store_settings: Document location. Loaded from the environment if
            not provided.
        catalog_settings: Host version for the effect catalog. Loaded from
            the environment if not provided.
        logging_settings: Passed to ``configure_logging()``.
        configure: Configure logging before loading. Disable when the
            host application has already configured it.

    Raises:
        SettingsDocumentError: If the document exists but cannot be parsed.
    """
    if configure:
        configure_logging(logging_settings)
    if store_settings is None:
        store_settings = get_store_settings()
    if catalog_settings is None:
        catalog_settings = get_catalog_settings()

    store = YamlSettingsStore.from_settings(store_settings)
    registry = SettingsRegistry(
        store,
        BuiltinEffectCatalog(catalog_settings.version),
        BuiltinMaterialCatalog(),
    )
    snapshot = registry.load()
    logger.info(
        "settings_loaded",
        path=str(store.path),
        host_version=str(catalog_settings.version),
        settings=len(snapshot),
        particle_effect=registry.particle_effect.name,
    )
    return VisualizerContext(registry=registry, overrides=PlayerOverrideTable(store), store=store)
