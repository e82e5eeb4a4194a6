"""Port interface for the host's material catalog."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MaterialCatalogPort(Protocol):
    """Port for resolving material names."""

    def resolve(self, name: str) -> str | None:
        """Resolve a user-written material name.

        Args:
            name: Material name as written in the settings document.

        Returns:
            The canonical material name, or None if it is unknown.
        """
        ...
