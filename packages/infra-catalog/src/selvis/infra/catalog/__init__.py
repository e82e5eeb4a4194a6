"""Built-in particle effect and material catalogs.

Implements ``EffectCatalogPort`` and ``MaterialCatalogPort`` from static
tables, with particle availability gated on the running host version.
"""

from selvis.infra.catalog.catalog_settings import CatalogSettings, get_catalog_settings
from selvis.infra.catalog.host_version import HostVersion
from selvis.infra.catalog.materials import (
    BuiltinMaterialCatalog,
    Material,
    normalize_material_name,
)
from selvis.infra.catalog.particles import (
    BUILTIN_PARTICLES,
    BuiltinEffectCatalog,
    ParticleSpec,
)

__all__ = [
    "BUILTIN_PARTICLES",
    "BuiltinEffectCatalog",
    "BuiltinMaterialCatalog",
    "CatalogSettings",
    "HostVersion",
    "Material",
    "ParticleSpec",
    "get_catalog_settings",
    "normalize_material_name",
]
