"""Per-player visualizer toggles stored in the settings document.

Each player has one boolean under ``overrides.<player-uuid>``. Players
without an entry are enabled. Reading an absent entry registers ``true`` as
its default without saving, so the document is not rewritten on every read;
the default reaches disk with the next save. Writing a toggle saves
immediately.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selvis.foundation.domain.identifiers import PlayerId
    from selvis.foundation.domain.ports import SettingsStorePort

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "overrides"


class PlayerOverrideTable:
    """Sparse table of per-player enabled flags.

    Args:
        store: Backing settings document shared with the settings registry.
        namespace: Top-level document section holding the flags.
    """

    def __init__(self, store: SettingsStorePort, namespace: str = DEFAULT_NAMESPACE) -> None:
        self._store = store
        self._namespace = namespace

    def path_for(self, player: PlayerId) -> str:
        """Document path of ``player``'s flag."""
        return f"{self._namespace}.{player}"

    def is_enabled(self, player: PlayerId) -> bool:
        """Return whether the visualizer is enabled for ``player``.

        Args:
            player: Player to check.

        Returns:
            The stored flag, or True if the player has none yet.
        """
        path = self.path_for(player)
        if self._store.get(path) is None:
            self._store.add_default(path, True)
        return self._store.get_bool(path)

    def set_enabled(self, player: PlayerId, enabled: bool) -> None:
        """Enable or disable the visualizer for ``player`` and persist.

        Args:
            player: Player to update.
            enabled: New flag value.
        """
        path = self.path_for(player)
        self._store.set(path, enabled)
        self._store.save()
        logger.info(
            "player_override_saved",
            extra={"player_id": str(player), "enabled": enabled},
        )

    def toggle(self, player: PlayerId) -> bool:
        """Flip ``player``'s flag, persist it and return the new value."""
        enabled = not self.is_enabled(player)
        self.set_enabled(player, enabled)
        return enabled
