"""Domain port interfaces for the registry's collaborators.

Ports define the interfaces the domain and application layers use to talk
to the backing document and to the host's effect and material catalogs.
Implementations (adapters) live in infrastructure packages.
"""

from selvis.foundation.domain.ports.effect_catalog import EffectCatalogPort
from selvis.foundation.domain.ports.material_catalog import MaterialCatalogPort
from selvis.foundation.domain.ports.settings_store import SettingsStorePort

__all__ = ["EffectCatalogPort", "MaterialCatalogPort", "SettingsStorePort"]
