"""Identifier value objects.

Example:
    >>> from uuid import UUID
    >>> from selvis.foundation.domain.identifiers import PlayerId
    >>> str(PlayerId(UUID("550e8400-e29b-41d4-a716-446655440000")))
    '550e8400-e29b-41d4-a716-446655440000'
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class PlayerId:
    """Player identifier wrapping the player's stable UUID.

    The string form is used as the key of the player's entry in the
    settings document, so it must stay stable across restarts.

    Attributes:
        value: The wrapped UUID instance.

    Example:
        >>> PlayerId.parse("550e8400-e29b-41d4-a716-446655440000")
        PlayerId(value=UUID('550e8400-e29b-41d4-a716-446655440000'))
    """

    value: UUID

    def __post_init__(self) -> None:
        """Reject non-UUID values early."""
        if not isinstance(self.value, UUID):
            msg = f"PlayerId requires a UUID, got {type(self.value).__name__}"
            raise TypeError(msg)

    @classmethod
    def parse(cls, raw: str) -> PlayerId:
        """Build a PlayerId from its canonical string form.

        Raises:
            ValueError: If ``raw`` is not a valid UUID string.
        """
        return cls(UUID(raw))

    def __str__(self) -> str:
        """Return UUID string for serialization."""
        return str(self.value)
