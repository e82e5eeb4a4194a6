"""Shared fixtures for foundation-application tests."""

from __future__ import annotations

from typing import Any

import pytest

from selvis.foundation.domain.effects import ParticleEffect, PayloadShape
from selvis.foundation.domain.setting_descriptors import SettingType, matches_type


class InMemorySettingsStore:
    """Flat, dotted-key settings store with a separate "disk" copy.

    ``set`` and ``add_default`` only touch memory; ``save`` copies memory to
    ``disk`` and ``reload`` copies it back.
    """

    def __init__(self, document: dict[str, Any] | None = None) -> None:
        self.disk: dict[str, Any] = dict(document or {})
        self.values: dict[str, Any] = dict(self.disk)
        self.defaults: dict[str, Any] = {}
        self.add_default_calls: list[str] = []
        self.copy_defaults_enabled = False
        self.save_count = 0
        self.reload_count = 0
        self.ensure_count = 0

    def ensure_document(self) -> None:
        self.ensure_count += 1

    def get(self, key: str, fallback: Any = None) -> Any:
        return self.values.get(str(key), fallback)

    def _typed(self, key: str, setting_type: SettingType, convert: Any, zero: Any) -> Any:
        for candidate in (self.values.get(str(key)), self.defaults.get(str(key))):
            if candidate is not None and matches_type(setting_type, candidate):
                return convert(candidate)
        return zero

    def get_bool(self, key: str) -> bool:
        return self._typed(key, SettingType.BOOLEAN, bool, False)  # type: ignore[no-any-return]

    def get_int(self, key: str) -> int:
        return self._typed(key, SettingType.INTEGER, int, 0)  # type: ignore[no-any-return]

    def get_float(self, key: str) -> float:
        return self._typed(key, SettingType.FLOAT, float, 0.0)  # type: ignore[no-any-return]

    def get_string(self, key: str) -> str:
        return self._typed(key, SettingType.STRING, str, "")  # type: ignore[no-any-return]

    def add_default(self, key: str, value: Any) -> None:
        self.defaults[str(key)] = value
        self.add_default_calls.append(str(key))

    def set(self, key: str, value: Any) -> None:
        if value is None:
            self.values.pop(str(key), None)
        else:
            self.values[str(key)] = value

    def copy_defaults(self, enabled: bool) -> None:
        self.copy_defaults_enabled = enabled

    def save(self) -> None:
        if self.copy_defaults_enabled:
            for key, value in self.defaults.items():
                self.values.setdefault(key, value)
        self.disk = dict(self.values)
        self.save_count += 1

    def reload(self) -> None:
        self.values = dict(self.disk)
        self.reload_count += 1


class FakeEffectCatalog:
    """Effect catalog with a handful of effects, one unsupported by the host."""

    _EFFECTS = {
        "REDSTONE": (PayloadShape.COLOR, True),
        "FLAME": (PayloadShape.NONE, True),
        "BLOCK_CRACK": (PayloadShape.MATERIAL, True),
        "ITEM_CRACK": (PayloadShape.ITEM, True),
        "SONIC_BOOM": (PayloadShape.NONE, False),
    }

    def lookup(self, name: str) -> ParticleEffect | None:
        entry = self._EFFECTS.get(name.strip().upper())
        return ParticleEffect(name.strip().upper(), entry[0]) if entry else None

    def is_compatible_with_host(self, effect: ParticleEffect) -> bool:
        return self._EFFECTS[effect.name][1]

    def payload_shape_of(self, effect: ParticleEffect) -> PayloadShape:
        return self._EFFECTS[effect.name][0]


class FakeMaterialCatalog:
    """Material catalog knowing stone and diamond."""

    def resolve(self, name: str) -> str | None:
        normalized = name.strip().upper()
        return normalized if normalized in {"STONE", "DIAMOND"} else None


@pytest.fixture()
def store() -> InMemorySettingsStore:
    """Empty in-memory settings store."""
    return InMemorySettingsStore()


@pytest.fixture()
def effects() -> FakeEffectCatalog:
    return FakeEffectCatalog()


@pytest.fixture()
def materials() -> FakeMaterialCatalog:
    return FakeMaterialCatalog()


@pytest.fixture()
def make_store() -> type[InMemorySettingsStore]:
    """The in-memory store class, for tests that seed a document."""
    return InMemorySettingsStore
