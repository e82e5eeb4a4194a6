"""Selvis Foundation Domain -- pure Python settings primitives.

This package provides the building blocks of the visualizer settings
registry: setting descriptors and the fixed schema, the immutable settings
snapshot, particle effect and payload value objects, identifiers,
exceptions, and the port interfaces of the registry's collaborators.
"""

from selvis.foundation.domain.chat_colors import (
    COLOR_CHAR,
    translate_alternate_color_codes,
)
from selvis.foundation.domain.effects import (
    Color,
    EffectPayload,
    ItemStack,
    MaterialData,
    ParticleEffect,
    PayloadShape,
)
from selvis.foundation.domain.exceptions import (
    DomainError,
    SchemaError,
    SettingsDocumentError,
    SettingsNotLoadedError,
)
from selvis.foundation.domain.identifiers import PlayerId
from selvis.foundation.domain.ports import (
    EffectCatalogPort,
    MaterialCatalogPort,
    SettingsStorePort,
)
from selvis.foundation.domain.schema import (
    EFFECT_KEY,
    EFFECT_PAYLOAD_KEY,
    SETTINGS_SCHEMA,
    SettingsSchema,
    build_schema,
    get_descriptor,
)
from selvis.foundation.domain.setting_descriptors import (
    BooleanSetting,
    EffectSetting,
    FloatSetting,
    IntegerSetting,
    SettingDescriptor,
    SettingKey,
    SettingType,
    StringSetting,
    matches_type,
)
from selvis.foundation.domain.snapshot import SettingsSnapshot

__all__ = [
    "COLOR_CHAR",
    "EFFECT_KEY",
    "EFFECT_PAYLOAD_KEY",
    "SETTINGS_SCHEMA",
    "BooleanSetting",
    "Color",
    "DomainError",
    "EffectCatalogPort",
    "EffectPayload",
    "EffectSetting",
    "FloatSetting",
    "IntegerSetting",
    "ItemStack",
    "MaterialCatalogPort",
    "MaterialData",
    "ParticleEffect",
    "PayloadShape",
    "PlayerId",
    "SchemaError",
    "SettingDescriptor",
    "SettingKey",
    "SettingType",
    "SettingsDocumentError",
    "SettingsNotLoadedError",
    "SettingsSchema",
    "SettingsSnapshot",
    "SettingsStorePort",
    "StringSetting",
    "build_schema",
    "get_descriptor",
    "matches_type",
    "translate_alternate_color_codes",
]
