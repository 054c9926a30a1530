"""Enumerations for the wiki-titles data model."""

from enum import Enum


class EntityKind(str, Enum):
    """Closed set of entity kinds that can own a wiki page."""

    ITEM = "item"
    MONSTER = "monster"
    TREASURE_POOL = "treasure_pool"
    BIOME = "biome"
    SAPLING_PART = "sapling_part"
