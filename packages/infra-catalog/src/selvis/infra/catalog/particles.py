"""Built-in particle effect catalog.

Lists the particle types a host can render, the payload each one needs,
and the host versions that support it. Names are matched
case-insensitively.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from selvis.foundation.domain.effects import ParticleEffect, PayloadShape
from selvis.infra.catalog.host_version import HostVersion

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True)
class ParticleSpec:
    """A particle type and the host versions supporting it.

    Attributes:
        effect: The particle effect.
        since: First supporting host version.
        until: First host version that no longer supports it, if any.
    """

    effect: ParticleEffect
    since: HostVersion = HostVersion(1, 8)
    until: HostVersion | None = None

    def supports(self, version: HostVersion) -> bool:
        return self.since <= version and (self.until is None or version < self.until)


def _spec(
    name: str,
    shape: PayloadShape = PayloadShape.NONE,
    since: tuple[int, int] = (1, 8),
    until: tuple[int, int] | None = None,
) -> ParticleSpec:
    return ParticleSpec(
        effect=ParticleEffect(name, shape),
        since=HostVersion(*since),
        until=HostVersion(*until) if until is not None else None,
    )


BUILTIN_PARTICLES: tuple[ParticleSpec, ...] = (
    _spec("REDSTONE", PayloadShape.COLOR),
    _spec("EXPLOSION_NORMAL"),
    _spec("EXPLOSION_LARGE"),
    _spec("EXPLOSION_HUGE"),
    _spec("FIREWORKS_SPARK"),
    _spec("WATER_BUBBLE"),
    _spec("WATER_SPLASH"),
    _spec("WATER_WAKE"),
    _spec("SUSPENDED"),
    _spec("SUSPENDED_DEPTH"),
    _spec("CRIT"),
    _spec("CRIT_MAGIC"),
    _spec("SMOKE_NORMAL"),
    _spec("SMOKE_LARGE"),
    _spec("SPELL"),
    _spec("SPELL_INSTANT"),
    _spec("SPELL_MOB", PayloadShape.COLOR),
    _spec("SPELL_MOB_AMBIENT", PayloadShape.COLOR),
    _spec("SPELL_WITCH"),
    _spec("DRIP_WATER"),
    _spec("DRIP_LAVA"),
    _spec("VILLAGER_ANGRY"),
    _spec("VILLAGER_HAPPY"),
    _spec("TOWN_AURA"),
    _spec("NOTE"),
    _spec("PORTAL"),
    _spec("ENCHANTMENT_TABLE"),
    _spec("FLAME"),
    _spec("LAVA"),
    _spec("FOOTSTEP", until=(1, 13)),
    _spec("CLOUD"),
    _spec("SNOWBALL"),
    _spec("SNOW_SHOVEL"),
    _spec("SLIME"),
    _spec("HEART"),
    _spec("BARRIER"),
    _spec("ITEM_CRACK", PayloadShape.ITEM),
    _spec("BLOCK_CRACK", PayloadShape.MATERIAL),
    _spec("BLOCK_DUST", PayloadShape.MATERIAL),
    _spec("WATER_DROP"),
    _spec("ITEM_TAKE", until=(1, 13)),
    _spec("MOB_APPEARANCE"),
    _spec("DRAGON_BREATH", since=(1, 9)),
    _spec("END_ROD", since=(1, 9)),
    _spec("DAMAGE_INDICATOR", since=(1, 9)),
    _spec("SWEEP_ATTACK", since=(1, 9)),
    _spec("FALLING_DUST", PayloadShape.MATERIAL, since=(1, 10)),
    _spec("TOTEM", since=(1, 11)),
    _spec("SPIT", since=(1, 11)),
    _spec("SQUID_INK", since=(1, 13)),
    _spec("BUBBLE_POP", since=(1, 13)),
    _spec("CURRENT_DOWN", since=(1, 13)),
    _spec("BUBBLE_COLUMN_UP", since=(1, 13)),
    _spec("NAUTILUS", since=(1, 13)),
    _spec("DOLPHIN", since=(1, 13)),
    _spec("SNEEZE", since=(1, 14)),
    _spec("CAMPFIRE_COSY_SMOKE", since=(1, 14)),
    _spec("COMPOSTER", since=(1, 14)),
    _spec("FLASH", since=(1, 14)),
    _spec("FALLING_LAVA", since=(1, 14)),
    _spec("FALLING_WATER", since=(1, 14)),
    _spec("DRIPPING_HONEY", since=(1, 15)),
    _spec("FALLING_NECTAR", since=(1, 15)),
    _spec("SOUL_FIRE_FLAME", since=(1, 16)),
    _spec("ASH", since=(1, 16)),
    _spec("WHITE_ASH", since=(1, 16)),
    _spec("REVERSE_PORTAL", since=(1, 16)),
    _spec("ELECTRIC_SPARK", since=(1, 17)),
    _spec("GLOW", since=(1, 17)),
    _spec("WAX_ON", since=(1, 17)),
    _spec("WAX_OFF", since=(1, 17)),
    _spec("SCRAPE", since=(1, 17)),
    _spec("SONIC_BOOM", since=(1, 19)),
    _spec("CHERRY_LEAVES", since=(1, 20)),
)


class BuiltinEffectCatalog:
    """Effect catalog backed by a static particle table.

    Args:
        host_version: Version of the running host.
        particles: Particle table (default: ``BUILTIN_PARTICLES``).

    Raises:
        ValueError: If two particles share a name.
    """

    def __init__(
        self,
        host_version: HostVersion,
        particles: Iterable[ParticleSpec] = BUILTIN_PARTICLES,
    ) -> None:
        self._host_version = host_version
        self._specs: dict[str, ParticleSpec] = {}
        for spec in particles:
            if spec.effect.name in self._specs:
                msg = f"Particle {spec.effect.name!r} already registered"
                raise ValueError(msg)
            self._specs[spec.effect.name] = spec

    @property
    def host_version(self) -> HostVersion:
        return self._host_version

    def lookup(self, name: str) -> ParticleEffect | None:
        spec = self._specs.get(name.strip().upper())
        return spec.effect if spec is not None else None

    def is_compatible_with_host(self, effect: ParticleEffect) -> bool:
        spec = self._specs.get(effect.name)
        return spec is not None and spec.supports(self._host_version)

    def payload_shape_of(self, effect: ParticleEffect) -> PayloadShape:
        spec = self._specs.get(effect.name)
        return spec.effect.payload_shape if spec is not None else effect.payload_shape

    def names(self) -> tuple[str, ...]:
        """Names of the particles the running host supports, in table order."""
        return tuple(
            name for name, spec in self._specs.items() if spec.supports(self._host_version)
        )
