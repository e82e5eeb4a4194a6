"""Selvis Foundation Application -- settings registry services."""

from selvis.foundation.application.effect_resolver import EffectResolution, EffectResolver
from selvis.foundation.application.player_overrides import PlayerOverrideTable
from selvis.foundation.application.settings_registry import (
    MAX_SELECTION_PLACEHOLDER,
    SettingsRegistry,
    check_materializers,
)

__all__ = [
    "MAX_SELECTION_PLACEHOLDER",
    "EffectResolution",
    "EffectResolver",
    "PlayerOverrideTable",
    "SettingsRegistry",
    "check_materializers",
]
