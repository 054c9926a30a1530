"""Entities that want their own wiki page.

These are produced by the per-domain loaders (item database, monster
database, etc.). The title registry only reads them and keys everything on
object identity, so all entity dataclasses use ``eq=False``: two items with
identical fields are still two different pages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from wiki_titles.models.enums import EntityKind


@dataclass(eq=False)
class Item:
    """Inventory item or placeable object."""

    kind: ClassVar[EntityKind] = EntityKind.ITEM

    item_code: str
    display_name: str
    category: str | None = None
    asset_filename: str = ""
    """Path of the asset that defined the item, relative to the game data root."""

    @property
    def identifier(self) -> str:
        return self.item_code


@dataclass(eq=False)
class Monster:
    """Monster (including pets and critters)."""

    kind: ClassVar[EntityKind] = EntityKind.MONSTER

    monster_type: str
    display_name: str
    base_parameters: dict[str, Any] = field(default_factory=dict)  # pyright: ignore[reportUnknownVariableType]

    @property
    def identifier(self) -> str:
        return self.monster_type

    @property
    def behavior(self) -> str | None:
        behavior = self.base_parameters.get("behavior")
        return behavior if isinstance(behavior, str) else None


@dataclass(eq=False)
class TreasurePool:
    """Named treasure pool (loot table)."""

    kind: ClassVar[EntityKind] = EntityKind.TREASURE_POOL

    name: str

    @property
    def identifier(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name


@dataclass(eq=False)
class Biome:
    """Planet biome."""

    kind: ClassVar[EntityKind] = EntityKind.BIOME

    biome_code: str
    display_name: str

    @property
    def identifier(self) -> str:
        return self.biome_code


@dataclass(eq=False)
class SaplingPart:
    """One stem or one foliage of the modular trees."""

    kind: ClassVar[EntityKind] = EntityKind.SAPLING_PART

    name: str
    is_foliage: bool = False
    friendly_name: str | None = None

    @property
    def identifier(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        prefix = "Foliage" if self.is_foliage else "Stem"
        display_name = f"{prefix}: {self.name}"
        if self.friendly_name and self.friendly_name != "Unknown":
            display_name += f" ({self.friendly_name})"
        return display_name


Entity = Item | Monster | TreasurePool | Biome | SaplingPart
