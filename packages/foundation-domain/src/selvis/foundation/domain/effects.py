"""Particle effect value objects and effect payload shapes.

A ``ParticleEffect`` names one kind of particle and the shape of the extra
data it needs. The payload itself is one of ``Color``, ``MaterialData`` or
``ItemStack``, or ``None`` for effects that take no data.

Example:
    >>> from selvis.foundation.domain.effects import Color, ParticleEffect, PayloadShape
    >>> ParticleEffect("REDSTONE", PayloadShape.COLOR)
    ParticleEffect(name='REDSTONE', payload_shape=<PayloadShape.COLOR: 'color'>)
    >>> Color(255, 0, 0).as_hex()
    '#ff0000'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class PayloadShape(StrEnum):
    """Shape of the extra data a particle effect requires."""

    COLOR = "color"
    MATERIAL = "material"
    ITEM = "item"
    NONE = "none"


@dataclass(frozen=True)
class ParticleEffect:
    """A particle effect kind.

    Attributes:
        name: Canonical upper-case effect name (e.g. ``REDSTONE``).
        payload_shape: Shape of the data the effect is rendered with.
    """

    name: str
    payload_shape: PayloadShape = PayloadShape.NONE

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Color:
    """RGB colour with channels in ``0..255``.

    Raises:
        ValueError: If any channel is outside ``0..255``.

    Example:
        >>> Color(0, 128, 255)
        Color(red=0, green=128, blue=255)
        >>> Color(256, 0, 0)
        Traceback (most recent call last):
        ...
        ValueError: Colour channel red out of range: 256 (expected 0-255)
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        """Validate channel ranges on construction."""
        for channel in ("red", "green", "blue"):
            value = getattr(self, channel)
            if not 0 <= value <= 255:
                msg = f"Colour channel {channel} out of range: {value} (expected 0-255)"
                raise ValueError(msg)

    def as_rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def as_hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


@dataclass(frozen=True)
class MaterialData:
    """Block material payload for block-based particles."""

    material: str


@dataclass(frozen=True)
class ItemStack:
    """Item payload for item-based particles."""

    material: str
    amount: int = 1


EffectPayload = Color | MaterialData | ItemStack
"""Union of every payload an effect can carry."""
