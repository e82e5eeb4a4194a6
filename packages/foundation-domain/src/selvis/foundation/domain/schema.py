"""The fixed settings schema of the selection visualizer.

``SETTINGS_SCHEMA`` is the single source of truth for which settings exist,
their document keys, value types and defaults. It is built once at import
time and never mutated. Colour codes in string defaults are kept verbatim:
translation happens when settings are materialized.

Example:
    >>> from selvis.foundation.domain.schema import SETTINGS_SCHEMA
    >>> from selvis.foundation.domain.setting_descriptors import SettingKey
    >>> SETTINGS_SCHEMA.get(SettingKey.MAX_SIZE).default
    10000
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from selvis.foundation.domain.exceptions import SchemaError
from selvis.foundation.domain.setting_descriptors import (
    BooleanSetting,
    EffectSetting,
    FloatSetting,
    IntegerSetting,
    SettingKey,
    SettingType,
    StringSetting,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from selvis.foundation.domain.setting_descriptors import SettingDescriptor


@dataclass(frozen=True)
class SettingsSchema:
    """Ordered, immutable collection of setting descriptors.

    Attributes:
        descriptors: Descriptors in declaration order.
        effect_key: Key of the single effect-typed descriptor.
        payload_key: Key of the string descriptor holding the effect payload.
    """

    descriptors: tuple[SettingDescriptor, ...]
    effect_key: SettingKey
    payload_key: SettingKey

    def __iter__(self) -> Iterator[SettingDescriptor]:
        return iter(self.descriptors)

    def __len__(self) -> int:
        return len(self.descriptors)

    def get(self, key: SettingKey | str) -> SettingDescriptor:
        """Return the descriptor registered under ``key``.

        Raises:
            KeyError: If no descriptor uses ``key``.
        """
        for descriptor in self.descriptors:
            if descriptor.key == key:
                return descriptor
        raise KeyError(key)

    @property
    def effect(self) -> EffectSetting:
        """The effect descriptor."""
        descriptor = self.get(self.effect_key)
        assert isinstance(descriptor, EffectSetting)
        return descriptor


def build_schema(
    *descriptors: SettingDescriptor,
    payload_key: SettingKey = SettingKey.PARTICLE_DATA,
) -> SettingsSchema:
    """Validate descriptors and assemble a ``SettingsSchema``.

    Args:
        *descriptors: Setting descriptors in the order they should be read.
        payload_key: Key of the string descriptor carrying the effect payload.

    Returns:
        The validated schema.

    Raises:
        SchemaError: If keys repeat, there is not exactly one effect
            descriptor, or the payload descriptor is missing or not a string.
    """
    seen: set[str] = set()
    for descriptor in descriptors:
        if descriptor.key in seen:
            raise SchemaError("Duplicate setting key", key=descriptor.key.value)
        seen.add(descriptor.key)

    effects = [d for d in descriptors if d.type == SettingType.EFFECT]
    if len(effects) != 1:
        raise SchemaError(
            "Schema must declare exactly one effect setting",
            effect_keys=[d.key.value for d in effects],
        )

    payload = next((d for d in descriptors if d.key == payload_key), None)
    if payload is None or payload.type != SettingType.STRING:
        raise SchemaError(
            "Effect payload setting must be a declared string setting",
            key=payload_key.value,
        )

    return SettingsSchema(
        descriptors=tuple(descriptors),
        effect_key=effects[0].key,
        payload_key=payload_key,
    )


SETTINGS_SCHEMA: SettingsSchema = build_schema(
    BooleanSetting(key=SettingKey.UPDATE_CHECKER, default=True),
    FloatSetting(
        key=SettingKey.GAP_BETWEEN_POINTS,
        default=0.5,
        description="Size of the space left between two points.",
    ),
    FloatSetting(
        key=SettingKey.VERTICAL_GAP,
        default=1.0,
        description="Size of the vertical space left between two points.",
    ),
    IntegerSetting(
        key=SettingKey.UPDATE_PARTICLES_INTERVAL,
        default=5,
        description="Ticks between particle updates sent to the client.",
    ),
    IntegerSetting(
        key=SettingKey.UPDATE_SELECTION_INTERVAL,
        default=20,
        description="Ticks between selection updates sent to the client.",
    ),
    BooleanSetting(key=SettingKey.CUBOID_LINES, default=True),
    BooleanSetting(key=SettingKey.POLYGON_LINES, default=True),
    BooleanSetting(key=SettingKey.CYLINDER_LINES, default=True),
    BooleanSetting(key=SettingKey.ELLIPSOID_LINES, default=True),
    BooleanSetting(key=SettingKey.CUBOID_TOP_BOTTOM, default=True),
    BooleanSetting(key=SettingKey.CYLINDER_TOP_BOTTOM, default=True),
    BooleanSetting(
        key=SettingKey.CHECK_FOR_AXE,
        default=False,
        description="Only visualize while the selection tool is held.",
    ),
    EffectSetting(key=SettingKey.PARTICLE_EFFECT, default="REDSTONE"),
    IntegerSetting(
        key=SettingKey.PARTICLE_DISTANCE,
        default=32,
        description="Maximum distance selection particles are visible from.",
    ),
    IntegerSetting(
        key=SettingKey.MAX_SIZE,
        default=10000,
        description="Maximum size of a visualized selection.",
    ),
    StringSetting(
        key=SettingKey.LANG_VISUALIZER_ENABLED,
        default="&aYour visualizer has been enabled.",
    ),
    StringSetting(
        key=SettingKey.LANG_VISUALIZER_DISABLED,
        default="&cYour visualizer has been disabled.",
    ),
    StringSetting(
        key=SettingKey.LANG_PLAYERS_ONLY,
        default="&cOnly a player can toggle his visualizer.",
    ),
    StringSetting(
        key=SettingKey.LANG_MAX_SELECTION,
        default="&6The visualizer only works with selections up to a size of %blocks% blocks",
    ),
    StringSetting(
        key=SettingKey.LANG_CONFIG_RELOADED,
        default="&aConfiguration for visualizer was reloaded from the disk.",
    ),
    StringSetting(
        key=SettingKey.LANG_NO_PERMISSION,
        default="&cYou don't have the permission to use this command.",
    ),
    IntegerSetting(
        key=SettingKey.PARTICLE_FADE_DELAY,
        default=0,
        description="Hide particles after this many seconds (0 disables fading).",
    ),
    StringSetting(
        key=SettingKey.PARTICLE_DATA,
        default="255,0,0",
        description="Extra particle data: an R,G,B colour or a material name.",
    ),
)
"""The visualizer settings schema, in document order."""

EFFECT_KEY: SettingKey = SETTINGS_SCHEMA.effect_key
EFFECT_PAYLOAD_KEY: SettingKey = SETTINGS_SCHEMA.payload_key


def get_descriptor(key: SettingKey | str) -> SettingDescriptor:
    """Return the descriptor of ``key`` in ``SETTINGS_SCHEMA``.

    Raises:
        KeyError: If ``key`` is not a known setting.
    """
    return SETTINGS_SCHEMA.get(key)
