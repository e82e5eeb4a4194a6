"""Port interface for the hierarchical settings document.

The store holds a nested key-value document addressed by dotted paths
(``lang.noPermission``). Typed getters never raise: an absent key or a value
of the wrong shape yields the registered default for the key when it has
the right shape, otherwise the type's zero value.

Example:
    >>> from selvis.foundation.domain.ports import SettingsStorePort
    >>> def toggle(store: SettingsStorePort, key: str) -> None:
    ...     store.set(key, not store.get_bool(key))
    ...     store.save()
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SettingsStorePort(Protocol):
    """Port for the backing settings document."""

    def ensure_document(self) -> None:
        """Create the persisted document if it does not exist, then read it."""
        ...

    def get(self, key: str, fallback: Any = None) -> Any:
        """Return the explicitly set value at ``key`` or ``fallback``.

        Registered defaults are ignored, so this distinguishes
        "absent" from "present with the default value".
        """
        ...

    def get_bool(self, key: str) -> bool:
        """Read a boolean (zero value ``False``)."""
        ...

    def get_int(self, key: str) -> int:
        """Read an integer (zero value ``0``)."""
        ...

    def get_float(self, key: str) -> float:
        """Read a float (zero value ``0.0``)."""
        ...

    def get_string(self, key: str) -> str:
        """Read a string (zero value ``""``)."""
        ...

    def add_default(self, key: str, value: Any) -> None:
        """Register a default for ``key``; never persists by itself."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Write ``value`` into the in-memory document."""
        ...

    def copy_defaults(self, enabled: bool) -> None:
        """Whether ``save()`` writes registered defaults for unset keys."""
        ...

    def save(self) -> None:
        """Persist the whole in-memory document."""
        ...

    def reload(self) -> None:
        """Discard the in-memory document and re-read it from storage."""
        ...
