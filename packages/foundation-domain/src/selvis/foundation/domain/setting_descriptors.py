"""Typed setting descriptors for the visualizer settings schema.

Each descriptor binds a dotted document key to a value type and a default.
Descriptors are Pydantic models discriminated on ``type`` so a default whose
runtime shape disagrees with its declared type is rejected when the schema is
built, not when settings are read.

Example:
    >>> from selvis.foundation.domain.setting_descriptors import (
    ...     IntegerSetting,
    ...     SettingKey,
    ... )
    >>> IntegerSetting(key=SettingKey.MAX_SIZE, default=10000).type
    'integer'
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class SettingKey(StrEnum):
    """Dotted document paths of every known setting."""

    UPDATE_CHECKER = "updateChecker"
    GAP_BETWEEN_POINTS = "gapBetweenPoints"
    VERTICAL_GAP = "verticalGap"
    UPDATE_PARTICLES_INTERVAL = "updateParticlesInterval"
    UPDATE_SELECTION_INTERVAL = "updateSelectionInterval"
    CUBOID_LINES = "horizontalLinesForCuboid"
    POLYGON_LINES = "horizontalLinesForPolygon"
    CYLINDER_LINES = "horizontalLinesForCylinder"
    ELLIPSOID_LINES = "horizontalLinesForEllipsoid"
    CUBOID_TOP_BOTTOM = "topAndBottomForCuboid"
    CYLINDER_TOP_BOTTOM = "topAndBottomForCylinder"
    CHECK_FOR_AXE = "checkForAxe"
    PARTICLE_EFFECT = "particleEffect"
    PARTICLE_DISTANCE = "particleDistance"
    MAX_SIZE = "maxSize"
    LANG_VISUALIZER_ENABLED = "lang.visualizerEnabled"
    LANG_VISUALIZER_DISABLED = "lang.visualizerDisabled"
    LANG_PLAYERS_ONLY = "lang.playersOnly"
    LANG_MAX_SELECTION = "lang.maxSelection"
    LANG_CONFIG_RELOADED = "lang.configReloaded"
    LANG_NO_PERMISSION = "lang.noPermission"
    PARTICLE_FADE_DELAY = "particleFadeDelay"
    PARTICLE_DATA = "particleData"


class SettingType(StrEnum):
    """Closed set of value types a descriptor can declare."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    EFFECT = "effect"


class _BaseSetting(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    key: SettingKey
    description: str = ""


class BooleanSetting(_BaseSetting):
    """Boolean setting (toggles)."""

    type: Literal["boolean"] = "boolean"
    default: bool


class IntegerSetting(_BaseSetting):
    """Integer setting (intervals, distances, sizes)."""

    type: Literal["integer"] = "integer"
    default: int


class FloatSetting(_BaseSetting):
    """Floating point setting (gaps between points)."""

    type: Literal["float"] = "float"
    default: float


class StringSetting(_BaseSetting):
    """String setting; may contain ``&``-style colour codes."""

    type: Literal["string"] = "string"
    default: str


class EffectSetting(_BaseSetting):
    """Particle effect selection, stored by name.

    The default doubles as the fallback used when the configured name is
    unknown or incompatible with the running host.
    """

    type: Literal["effect"] = "effect"
    default: str = Field(min_length=1)


SettingDescriptor = Annotated[
    BooleanSetting | IntegerSetting | FloatSetting | StringSetting | EffectSetting,
    Field(discriminator="type"),
]
"""Discriminated union of all setting descriptor variants."""


def matches_type(setting_type: str, value: Any) -> bool:
    """Check whether a raw document value has the shape a type expects.

    Integers are accepted for floats and integral floats for integers, the
    way YAML documents tend to be edited by hand. Numbers are accepted for
    strings. Booleans only count as booleans.

    Args:
        setting_type: A ``SettingType`` value.
        value: Raw value read from the backing document.

    Returns:
        True if the value can be read as ``setting_type`` without loss.
    """
    if setting_type == SettingType.BOOLEAN:
        return isinstance(value, bool)
    if isinstance(value, bool):
        return False
    if setting_type == SettingType.INTEGER:
        return isinstance(value, int) or (isinstance(value, float) and value.is_integer())
    if setting_type == SettingType.FLOAT:
        return isinstance(value, int | float)
    # Strings and effect names: scalars are read through str().
    return isinstance(value, str | int | float)
