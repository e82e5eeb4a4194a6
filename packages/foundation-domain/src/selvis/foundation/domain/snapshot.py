"""Immutable snapshot of materialized settings."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from selvis.foundation.domain.exceptions import SchemaError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from selvis.foundation.domain.schema import SettingsSchema
    from selvis.foundation.domain.setting_descriptors import SettingKey


class SettingsSnapshot(Mapping["SettingKey", Any]):
    """Read-only mapping of setting key to materialized value.

    A snapshot always holds exactly one value per descriptor of the schema
    it was built for. It is never patched: a reload builds a new one.

    Args:
        schema: Schema the values were materialized from.
        values: Materialized values keyed by setting key.

    Raises:
        SchemaError: If ``values`` does not cover the schema exactly.
    """

    __slots__ = ("_values",)

    def __init__(self, schema: SettingsSchema, values: Mapping[SettingKey, Any]) -> None:
        expected = {descriptor.key for descriptor in schema}
        actual = set(values)
        if expected != actual:
            raise SchemaError(
                "Snapshot does not match schema",
                missing=sorted(expected - actual),
                unexpected=sorted(str(k) for k in actual - expected),
            )
        # Schema order, so iteration matches the document layout.
        self._values: Mapping[SettingKey, Any] = MappingProxyType(
            {descriptor.key: values[descriptor.key] for descriptor in schema}
        )

    def __getitem__(self, key: SettingKey) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[SettingKey]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"SettingsSnapshot({dict(self._values)!r})"
