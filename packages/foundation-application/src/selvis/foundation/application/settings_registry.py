"""Visualizer settings registry.

Binds the fixed settings schema to a backing document and materializes it
into an immutable ``SettingsSnapshot``:

1. ``load()`` makes sure the document exists, registers every default,
   inserts the keys the document lacks and persists once if anything was
   added, then materializes.
2. ``reload_config()`` optionally re-reads the document, reads every
   descriptor with the rule for its type, resolves the particle effect and
   its payload, and publishes the new snapshot with one reference swap.

Readers never take a lock. They always see either the previous snapshot or
the new one, never a partially built one.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from selvis.foundation.application.effect_resolver import EffectResolver
from selvis.foundation.domain.chat_colors import (
    DEFAULT_ALT_COLOR_CHAR,
    translate_alternate_color_codes,
)
from selvis.foundation.domain.exceptions import SchemaError, SettingsNotLoadedError
from selvis.foundation.domain.schema import SETTINGS_SCHEMA
from selvis.foundation.domain.setting_descriptors import SettingKey, SettingType, matches_type
from selvis.foundation.domain.snapshot import SettingsSnapshot

if TYPE_CHECKING:
    from collections.abc import Callable

    from selvis.foundation.domain.effects import EffectPayload, ParticleEffect
    from selvis.foundation.domain.ports import (
        EffectCatalogPort,
        MaterialCatalogPort,
        SettingsStorePort,
    )
    from selvis.foundation.domain.schema import SettingsSchema
    from selvis.foundation.domain.setting_descriptors import SettingDescriptor

logger = logging.getLogger(__name__)

MAX_SELECTION_PLACEHOLDER = "%blocks%"


def _read_bool(store: SettingsStorePort, key: str, alt_char: str) -> bool:
    return store.get_bool(key)


def _read_int(store: SettingsStorePort, key: str, alt_char: str) -> int:
    return store.get_int(key)


def _read_float(store: SettingsStorePort, key: str, alt_char: str) -> float:
    return store.get_float(key)


def _read_string(store: SettingsStorePort, key: str, alt_char: str) -> str:
    return translate_alternate_color_codes(store.get_string(key), alt_char)


def _read_effect_name(store: SettingsStorePort, key: str, alt_char: str) -> str:
    return store.get_string(key)


_MATERIALIZERS: dict[SettingType, Callable[[SettingsStorePort, str, str], Any]] = {
    SettingType.BOOLEAN: _read_bool,
    SettingType.INTEGER: _read_int,
    SettingType.FLOAT: _read_float,
    SettingType.STRING: _read_string,
    SettingType.EFFECT: _read_effect_name,
}


def check_materializers(schema: SettingsSchema) -> None:
    """Verify every setting type has a materialization rule.

    Raises:
        SchemaError: If a ``SettingType`` member or a type used by
            ``schema`` has no rule.
    """
    missing = {t.value for t in SettingType} - set(_MATERIALIZERS)
    missing |= {d.type for d in schema} - set(_MATERIALIZERS)
    if missing:
        raise SchemaError("Setting types without a materialization rule", types=sorted(missing))


class SettingsRegistry:
    """Typed, reloadable view over the visualizer settings document.

    Args:
        store: Backing settings document.
        effects: Particle effect catalog.
        materials: Material catalog.
        schema: Settings schema to materialize (default: ``SETTINGS_SCHEMA``).
        alt_color_char: Character used for colour codes in messages.

    Raises:
        SchemaError: If the schema cannot be materialized or its effect
            default is not a known effect.
    """

    def __init__(
        self,
        store: SettingsStorePort,
        effects: EffectCatalogPort,
        materials: MaterialCatalogPort,
        *,
        schema: SettingsSchema = SETTINGS_SCHEMA,
        alt_color_char: str = DEFAULT_ALT_COLOR_CHAR,
    ) -> None:
        check_materializers(schema)
        self._store = store
        self._schema = schema
        self._alt_color_char = alt_color_char
        self._resolver = EffectResolver(effects, materials, fallback=schema.effect.default)
        self._snapshot: SettingsSnapshot | None = None
        self._write_lock = threading.RLock()

    @property
    def schema(self) -> SettingsSchema:
        return self._schema

    @property
    def snapshot(self) -> SettingsSnapshot:
        """The current snapshot.

        Raises:
            SettingsNotLoadedError: If ``load()`` has not run yet.
        """
        snapshot = self._snapshot
        if snapshot is None:
            raise SettingsNotLoadedError
        return snapshot

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    def load(self) -> SettingsSnapshot:
        """Fill missing keys with defaults, persist if needed, materialize.

        Existing values are never overwritten. The document is saved at most
        once, and only when at least one key was missing.

        Returns:
            The newly published snapshot.
        """
        with self._write_lock:
            self._store.ensure_document()
            self._register_defaults()

            missing = [d.key for d in self._schema if self._store.get(d.key) is None]
            for key in missing:
                logger.info("setting_added", extra={"setting_key": key.value})
            if missing:
                self._store.copy_defaults(True)
                self._store.save()

            return self.reload_config(reload=False)

    def reload_config(self, reload: bool = False) -> SettingsSnapshot:
        """Rebuild the snapshot from the document.

        Args:
            reload: Re-read the document from storage first.

        Returns:
            The newly published snapshot.
        """
        with self._write_lock:
            if reload:
                self._store.reload()
                self._register_defaults()

            values: dict[SettingKey, Any] = {
                descriptor.key: self._read(descriptor) for descriptor in self._schema
            }

            effect_key = self._schema.effect_key
            payload_key = self._schema.payload_key
            resolution = self._resolver.resolve(values[effect_key], values[payload_key])
            values[effect_key] = resolution.effect
            values[payload_key] = resolution.payload

            snapshot = SettingsSnapshot(self._schema, values)
            self._snapshot = snapshot

        logger.debug(
            "settings_materialized",
            extra={
                "setting_count": len(snapshot),
                "particle_effect": resolution.effect.name,
                "reloaded": reload,
            },
        )
        return snapshot

    def _register_defaults(self) -> None:
        for descriptor in self._schema:
            self._store.add_default(descriptor.key, descriptor.default)

    def _read(self, descriptor: SettingDescriptor) -> Any:
        raw = self._store.get(descriptor.key)
        if raw is not None and not matches_type(descriptor.type, raw):
            logger.warning(
                "setting_type_mismatch",
                extra={
                    "setting_key": descriptor.key.value,
                    "expected_type": descriptor.type,
                    "actual_type": type(raw).__name__,
                    "default": descriptor.default,
                },
            )
        rule = _MATERIALIZERS[SettingType(descriptor.type)]
        return rule(self._store, descriptor.key, self._alt_color_char)

    # -- typed accessors -------------------------------------------------

    def get(self, key: SettingKey) -> Any:
        """Return the materialized value of any setting."""
        return self.snapshot[key]

    @property
    def particle_effect(self) -> ParticleEffect:
        value: ParticleEffect = self.snapshot[SettingKey.PARTICLE_EFFECT]
        return value

    @property
    def particle_data(self) -> EffectPayload | None:
        value: EffectPayload | None = self.snapshot[SettingKey.PARTICLE_DATA]
        return value

    @property
    def update_checker_enabled(self) -> bool:
        return bool(self.snapshot[SettingKey.UPDATE_CHECKER])

    @property
    def gap_between_points(self) -> float:
        return float(self.snapshot[SettingKey.GAP_BETWEEN_POINTS])

    @property
    def vertical_gap(self) -> float:
        return float(self.snapshot[SettingKey.VERTICAL_GAP])

    @property
    def update_particles_interval(self) -> int:
        return int(self.snapshot[SettingKey.UPDATE_PARTICLES_INTERVAL])

    @property
    def update_selection_interval(self) -> int:
        return int(self.snapshot[SettingKey.UPDATE_SELECTION_INTERVAL])

    @property
    def cuboid_lines_enabled(self) -> bool:
        return bool(self.snapshot[SettingKey.CUBOID_LINES])

    @property
    def polygon_lines_enabled(self) -> bool:
        return bool(self.snapshot[SettingKey.POLYGON_LINES])

    @property
    def cylinder_lines_enabled(self) -> bool:
        return bool(self.snapshot[SettingKey.CYLINDER_LINES])

    @property
    def ellipsoid_lines_enabled(self) -> bool:
        return bool(self.snapshot[SettingKey.ELLIPSOID_LINES])

    @property
    def cuboid_top_and_bottom_enabled(self) -> bool:
        return bool(self.snapshot[SettingKey.CUBOID_TOP_BOTTOM])

    @property
    def cylinder_top_and_bottom_enabled(self) -> bool:
        return bool(self.snapshot[SettingKey.CYLINDER_TOP_BOTTOM])

    @property
    def check_for_axe_enabled(self) -> bool:
        return bool(self.snapshot[SettingKey.CHECK_FOR_AXE])

    @property
    def particle_distance(self) -> int:
        return int(self.snapshot[SettingKey.PARTICLE_DISTANCE])

    @property
    def max_size(self) -> int:
        return int(self.snapshot[SettingKey.MAX_SIZE])

    @property
    def particle_fade_delay(self) -> int:
        return int(self.snapshot[SettingKey.PARTICLE_FADE_DELAY])

    @property
    def lang_visualizer_enabled(self) -> str:
        return str(self.snapshot[SettingKey.LANG_VISUALIZER_ENABLED])

    @property
    def lang_visualizer_disabled(self) -> str:
        return str(self.snapshot[SettingKey.LANG_VISUALIZER_DISABLED])

    @property
    def lang_players_only(self) -> str:
        return str(self.snapshot[SettingKey.LANG_PLAYERS_ONLY])

    @property
    def lang_max_selection(self) -> str:
        return str(self.snapshot[SettingKey.LANG_MAX_SELECTION])

    @property
    def lang_config_reloaded(self) -> str:
        return str(self.snapshot[SettingKey.LANG_CONFIG_RELOADED])

    @property
    def lang_no_permission(self) -> str:
        return str(self.snapshot[SettingKey.LANG_NO_PERMISSION])

    def format_max_selection(self, blocks: int) -> str:
        """Return the max-selection message with the block limit filled in."""
        return self.lang_max_selection.replace(MAX_SELECTION_PLACEHOLDER, str(blocks))
