"""Port interface for the host's particle effect catalog.

Example:
    >>> from selvis.foundation.domain.ports import EffectCatalogPort
    >>> def is_usable(catalog: EffectCatalogPort, name: str) -> bool:
    ...     effect = catalog.lookup(name)
    ...     return effect is not None and catalog.is_compatible_with_host(effect)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from selvis.foundation.domain.effects import ParticleEffect, PayloadShape


@runtime_checkable
class EffectCatalogPort(Protocol):
    """Port for looking up particle effects by name."""

    def lookup(self, name: str) -> ParticleEffect | None:
        """Find an effect by name (case-insensitive).

        Args:
            name: Effect name as written in the settings document.

        Returns:
            The matching effect, or None if no effect has that name.
        """
        ...

    def is_compatible_with_host(self, effect: ParticleEffect) -> bool:
        """Report whether the running host version supports ``effect``."""
        ...

    def payload_shape_of(self, effect: ParticleEffect) -> PayloadShape:
        """Return the payload shape ``effect`` is rendered with."""
        ...
