"""Two-stage particle effect resolution.

Stage A resolves the configured effect name against the effect catalog and
falls back to a fixed effect when the name is unknown or unsupported by the
running host. Stage B resolves the payload string, whose expected shape
depends on the effect chosen in stage A:

- ``color``:    ``"R,G,B"`` with three integers in 0-255 -> ``Color``
- ``material``: a material name -> ``MaterialData``
- ``item``:     a material name -> ``ItemStack``
- ``none``:     no payload

Neither stage raises. Problems are logged as warnings and resolved to the
fallback effect or to an absent payload.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from selvis.foundation.domain.effects import (
    Color,
    ItemStack,
    MaterialData,
    PayloadShape,
)
from selvis.foundation.domain.exceptions import SchemaError

if TYPE_CHECKING:
    from selvis.foundation.domain.effects import EffectPayload, ParticleEffect
    from selvis.foundation.domain.ports import EffectCatalogPort, MaterialCatalogPort

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"\s*[+-]?[0-9]+\s*")


@dataclass(frozen=True)
class EffectResolution:
    """Result of resolving the effect selection and its payload.

    Attributes:
        effect: The accepted (or fallback) particle effect.
        payload: Payload matching the effect's shape, or None.
    """

    effect: ParticleEffect
    payload: EffectPayload | None


class EffectResolver:
    """Resolves the configured particle effect and its dependent payload.

    Args:
        effects: Catalog used to look up effects and their payload shapes.
        materials: Catalog used to resolve material names.
        fallback: Name of the effect used when the configured one is
            invalid. Must resolve in ``effects``.

    Raises:
        SchemaError: If ``fallback`` is not a known effect.
    """

    def __init__(
        self,
        effects: EffectCatalogPort,
        materials: MaterialCatalogPort,
        *,
        fallback: str,
    ) -> None:
        self._effects = effects
        self._materials = materials
        fallback_effect = effects.lookup(fallback)
        if fallback_effect is None:
            raise SchemaError("Fallback particle effect is not in the catalog", effect=fallback)
        self._fallback = fallback_effect

    @property
    def fallback(self) -> ParticleEffect:
        return self._fallback

    def resolve(self, raw_effect: str, raw_payload: str) -> EffectResolution:
        """Run both stages in order.

        Args:
            raw_effect: Effect name as read from the document.
            raw_payload: Payload string as read from the document.

        Returns:
            The resolved effect and payload.
        """
        effect = self.resolve_effect(raw_effect)
        return EffectResolution(effect=effect, payload=self.resolve_payload(effect, raw_payload))

    def resolve_effect(self, raw_name: str) -> ParticleEffect:
        """Stage A: accept a known, host-compatible effect or fall back.

        Args:
            raw_name: Effect name as read from the document.

        Returns:
            The configured effect, or the fallback effect.
        """
        effect = self._effects.lookup(raw_name)
        if effect is not None and self._effects.is_compatible_with_host(effect):
            return effect

        logger.warning(
            "particle_effect_invalid",
            extra={
                "effect_name": raw_name,
                "reason": "unknown" if effect is None else "incompatible_with_host",
                "fallback": self._fallback.name,
            },
        )
        return self._fallback

    def resolve_payload(self, effect: ParticleEffect, raw: str) -> EffectPayload | None:
        """Stage B: build the payload the resolved effect expects.

        Args:
            effect: Effect returned by stage A.
            raw: Payload string as read from the document.

        Returns:
            The payload, or None if the effect takes none or ``raw`` is
            invalid for its shape.
        """
        shape = self._effects.payload_shape_of(effect)

        if shape == PayloadShape.COLOR:
            if not raw:
                return None
            return self._parse_color(raw)

        if shape == PayloadShape.MATERIAL:
            material = self._resolve_material(raw)
            return MaterialData(material) if material is not None else None

        if shape == PayloadShape.ITEM:
            material = self._resolve_material(raw)
            return ItemStack(material) if material is not None else None

        return None

    def _parse_color(self, raw: str) -> Color | None:
        fields = raw.split(",")
        try:
            if len(fields) != 3:
                msg = f"expected 3 comma-separated values, got {len(fields)}"
                raise ValueError(msg)
            red, green, blue = (_parse_channel(field) for field in fields)
            return Color(red, green, blue)
        except ValueError as exc:
            logger.warning(
                "particle_color_invalid",
                extra={"raw_value": raw, "error": str(exc)},
            )
            return None

    def _resolve_material(self, raw: str) -> str | None:
        material = self._materials.resolve(raw)
        if material is None:
            logger.warning("material_invalid", extra={"raw_value": raw})
        return material


def _parse_channel(field: str) -> int:
    if not _INTEGER.fullmatch(field):
        msg = f"{field.strip()!r} is not an integer"
        raise ValueError(msg)
    return int(field)
