"""Unit tests for selvis.foundation.application.player_overrides."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

import pytest

from selvis.foundation.application.player_overrides import DEFAULT_NAMESPACE, PlayerOverrideTable
from selvis.foundation.domain.identifiers import PlayerId

if TYPE_CHECKING:
    from conftest import InMemorySettingsStore

_PLAYER = PlayerId(UUID("550e8400-e29b-41d4-a716-446655440000"))
_PATH = "overrides.550e8400-e29b-41d4-a716-446655440000"


@pytest.fixture()
def table(store: InMemorySettingsStore) -> PlayerOverrideTable:
    return PlayerOverrideTable(store)


class TestPathFor:
    @pytest.mark.unit
    def test_default_namespace(self, table: PlayerOverrideTable) -> None:
        assert DEFAULT_NAMESPACE == "overrides"
        assert table.path_for(_PLAYER) == _PATH

    @pytest.mark.unit
    def test_custom_namespace(self, store: InMemorySettingsStore) -> None:
        table = PlayerOverrideTable(store, namespace="players")
        assert table.path_for(_PLAYER) == "players.550e8400-e29b-41d4-a716-446655440000"


class TestIsEnabled:
    @pytest.mark.unit
    def test_unknown_player_enabled(
        self, table: PlayerOverrideTable, store: InMemorySettingsStore
    ) -> None:
        assert table.is_enabled(_PLAYER) is True
        assert store.add_default_calls == [_PATH]

    @pytest.mark.unit
    def test_unknown_player_not_saved(
        self, table: PlayerOverrideTable, store: InMemorySettingsStore
    ) -> None:
        table.is_enabled(_PLAYER)
        assert store.save_count == 0
        assert _PATH not in store.disk

    @pytest.mark.unit
    def test_lazy_default_reaches_disk_with_next_save(
        self, table: PlayerOverrideTable, store: InMemorySettingsStore
    ) -> None:
        table.is_enabled(_PLAYER)
        store.copy_defaults(True)
        store.save()
        assert store.disk[_PATH] is True

    @pytest.mark.unit
    def test_stored_flag_returned_without_default(
        self, table: PlayerOverrideTable, store: InMemorySettingsStore
    ) -> None:
        store.set(_PATH, False)
        assert table.is_enabled(_PLAYER) is False
        assert store.add_default_calls == []


class TestSetEnabled:
    @pytest.mark.unit
    def test_round_trip(self, table: PlayerOverrideTable, store: InMemorySettingsStore) -> None:
        table.set_enabled(_PLAYER, False)
        assert table.is_enabled(_PLAYER) is False
        assert store.disk[_PATH] is False

    @pytest.mark.unit
    def test_saves_immediately(
        self, table: PlayerOverrideTable, store: InMemorySettingsStore
    ) -> None:
        table.set_enabled(_PLAYER, True)
        table.set_enabled(_PLAYER, False)
        assert store.save_count == 2

    @pytest.mark.unit
    def test_logs_saved_override(
        self, table: PlayerOverrideTable, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO)
        table.set_enabled(_PLAYER, False)
        records = [r for r in caplog.records if r.getMessage() == "player_override_saved"]
        assert len(records) == 1
        assert records[0].player_id == str(_PLAYER)  # type: ignore[attr-defined]
        assert records[0].enabled is False  # type: ignore[attr-defined]

    @pytest.mark.unit
    def test_players_independent(self, table: PlayerOverrideTable) -> None:
        other = PlayerId(UUID("00000000-0000-0000-0000-000000000001"))
        table.set_enabled(_PLAYER, False)
        assert table.is_enabled(other) is True


class TestToggle:
    @pytest.mark.unit
    def test_toggle_flips_and_persists(
        self, table: PlayerOverrideTable, store: InMemorySettingsStore
    ) -> None:
        assert table.toggle(_PLAYER) is False
        assert table.toggle(_PLAYER) is True
        assert store.disk[_PATH] is True
        assert store.save_count == 2
