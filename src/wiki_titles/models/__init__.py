"""Entity models for wiki-titles."""

from wiki_titles.models.entities import (
    Biome,
    Entity,
    Item,
    Monster,
    SaplingPart,
    TreasurePool,
)
from wiki_titles.models.enums import EntityKind

__all__ = [
    "Biome",
    "Entity",
    "EntityKind",
    "Item",
    "Monster",
    "SaplingPart",
    "TreasurePool",
]
