"""Built-in material catalog.

Resolves user-written material names the way the host does: case is
ignored, a ``minecraft:`` namespace prefix is dropped, whitespace becomes
an underscore and any other non-word character is removed.
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

_NAMESPACE = "MINECRAFT:"
_WHITESPACE = re.compile(r"\s+")
_NON_WORD = re.compile(r"\W")


class Material(StrEnum):
    """Materials usable as block or item particle payloads."""

    STONE = "STONE"
    GRASS_BLOCK = "GRASS_BLOCK"
    DIRT = "DIRT"
    COBBLESTONE = "COBBLESTONE"
    OAK_PLANKS = "OAK_PLANKS"
    OAK_LOG = "OAK_LOG"
    OAK_LEAVES = "OAK_LEAVES"
    SAND = "SAND"
    RED_SAND = "RED_SAND"
    GRAVEL = "GRAVEL"
    GOLD_ORE = "GOLD_ORE"
    IRON_ORE = "IRON_ORE"
    COAL_ORE = "COAL_ORE"
    DIAMOND_ORE = "DIAMOND_ORE"
    EMERALD_ORE = "EMERALD_ORE"
    REDSTONE_ORE = "REDSTONE_ORE"
    LAPIS_ORE = "LAPIS_ORE"
    GLASS = "GLASS"
    WHITE_WOOL = "WHITE_WOOL"
    RED_WOOL = "RED_WOOL"
    GOLD_BLOCK = "GOLD_BLOCK"
    IRON_BLOCK = "IRON_BLOCK"
    DIAMOND_BLOCK = "DIAMOND_BLOCK"
    EMERALD_BLOCK = "EMERALD_BLOCK"
    REDSTONE_BLOCK = "REDSTONE_BLOCK"
    LAPIS_BLOCK = "LAPIS_BLOCK"
    BRICKS = "BRICKS"
    TNT = "TNT"
    BOOKSHELF = "BOOKSHELF"
    OBSIDIAN = "OBSIDIAN"
    ICE = "ICE"
    SNOW_BLOCK = "SNOW_BLOCK"
    CLAY = "CLAY"
    PUMPKIN = "PUMPKIN"
    NETHERRACK = "NETHERRACK"
    SOUL_SAND = "SOUL_SAND"
    GLOWSTONE = "GLOWSTONE"
    END_STONE = "END_STONE"
    QUARTZ_BLOCK = "QUARTZ_BLOCK"
    SLIME_BLOCK = "SLIME_BLOCK"
    SEA_LANTERN = "SEA_LANTERN"
    BEDROCK = "BEDROCK"
    WATER = "WATER"
    LAVA = "LAVA"
    WOODEN_AXE = "WOODEN_AXE"
    STONE_AXE = "STONE_AXE"
    IRON_AXE = "IRON_AXE"
    GOLDEN_AXE = "GOLDEN_AXE"
    DIAMOND_AXE = "DIAMOND_AXE"
    DIAMOND = "DIAMOND"
    EMERALD = "EMERALD"
    REDSTONE = "REDSTONE"
    APPLE = "APPLE"


def normalize_material_name(name: str) -> str:
    """Normalize a material name to its canonical upper-case form.

    Example:
        >>> normalize_material_name(" minecraft:Oak log ")
        'OAK_LOG'
    """
    normalized = name.strip().upper()
    if normalized.startswith(_NAMESPACE):
        normalized = normalized[len(_NAMESPACE) :]
    normalized = _WHITESPACE.sub("_", normalized)
    return _NON_WORD.sub("", normalized)


class BuiltinMaterialCatalog:
    """Material catalog backed by a fixed set of names.

    Args:
        materials: Known material names (default: every ``Material``).
    """

    def __init__(self, materials: Iterable[str] | None = None) -> None:
        names = Material if materials is None else materials
        self._materials = frozenset(normalize_material_name(str(m)) for m in names)

    def resolve(self, name: str) -> str | None:
        normalized = normalize_material_name(name)
        return normalized if normalized in self._materials else None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.resolve(name) is not None

    def __len__(self) -> int:
        return len(self._materials)
