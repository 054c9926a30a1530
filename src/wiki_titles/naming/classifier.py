"""Entity classification: raw entity -> Candidate.

Each entity kind maps to one classification function that decides:
- the requested title (override table, display name, or a fixed pattern)
- the sort key used to order candidates inside a disputed bucket
- the derived tags that disambiguation rules look at

Adding a new entity kind means adding one function to the dispatch table
below; rules only need to change for a genuinely new kind of collision.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any, Final

from wiki_titles.config import TitleOverrides
from wiki_titles.models.entities import Biome, Item, Monster, SaplingPart, TreasurePool
from wiki_titles.models.enums import EntityKind
from wiki_titles.naming.candidate import Candidate
from wiki_titles.naming.errors import UnsupportedEntityKindError
from wiki_titles.naming.sanitize import clean_page_name, ucfirst

# Sort key offsets: items first, then monsters, biomes, pools, sapling parts
MONSTER_SORT_OFFSET: Final = 100000
BIOME_SORT_KEY: Final = 200000
TREASURE_POOL_SORT_OFFSET: Final = 300000
SAPLING_PART_SORT_OFFSET: Final = 400000

TREASURE_POOL_TITLE_PREFIX: Final = "TreasurePool:"

FOOD_CATEGORIES: Final = frozenset({"preparedFood", "drink"})
DECORATIVE_CATEGORY: Final = "decorative"
PROP_PACK_ASSET_PREFIX: Final = "objects/proppack"

# Substring of item code -> suffix for material-family variants
MATERIAL_FAMILIES: Final[dict[str, str]] = {
    "skath": "Skath",
}

_OUTPOST_SUFFIX = re.compile(r"outpost$")
_NPC_AFFIX = re.compile(r"(^npc|npc$)")
_PAINTING = re.compile(r"painting")
_RACE_TOKEN = re.compile(r"(apex|avian|floran|glitch|human|hylotl|novakid|protectorate)")
_ELEMENT_PREFIX = re.compile(r"^(?:fu|)(poison|fire|ice|shadow|electric)")


def strip_npc_affix(code: str) -> str:
    """``npcfoo``/``foonpc`` -> ``foo`` (only the first affix is removed)."""
    return _NPC_AFFIX.sub("", code, count=1)


def _classify_item(item: Item, overrides: TitleOverrides) -> Candidate:
    code = item.item_code
    candidate = Candidate(
        entity=item,
        kind=EntityKind.ITEM,
        identifier=code,
        wanted_title=overrides.items.get(code) or item.display_name,
        sort_key=len(code),
    )

    candidate.is_food = item.category in FOOD_CATEGORIES
    # Non-functional crafting stations on the Science Outpost are decorative too
    candidate.is_decorative = (
        item.category == DECORATIVE_CATEGORY or _OUTPOST_SUFFIX.search(code) is not None
    )
    candidate.is_npc_only = _NPC_AFFIX.search(code) is not None
    candidate.is_painting = _PAINTING.search(code) is not None
    candidate.is_prop_pack = item.asset_filename.startswith(PROP_PACK_ASSET_PREFIX)

    for token, family in MATERIAL_FAMILIES.items():
        if token in code:
            candidate.family = family
            break

    race_match = _RACE_TOKEN.search(code)
    if race_match:
        candidate.race_prefix = ucfirst(race_match.group(1))

    return candidate


def _classify_monster(monster: Monster, overrides: TitleOverrides) -> Candidate:
    monster_type = monster.monster_type
    candidate = Candidate(
        entity=monster,
        kind=EntityKind.MONSTER,
        identifier=monster_type,
        wanted_title=overrides.monsters.get(monster_type) or monster.display_name,
        sort_key=len(monster_type) + MONSTER_SORT_OFFSET,
    )

    candidate.is_pet = "pet" in monster_type
    behavior = monster.behavior or ""
    candidate.is_critter = "critter" in monster_type or "critter" in behavior

    element_match = _ELEMENT_PREFIX.match(monster_type)
    if element_match:
        candidate.element_prefix = ucfirst(element_match.group(1))

    return candidate


def _classify_treasure_pool(pool: TreasurePool, overrides: TitleOverrides) -> Candidate:
    return Candidate(
        entity=pool,
        kind=EntityKind.TREASURE_POOL,
        identifier=pool.name,
        wanted_title=TREASURE_POOL_TITLE_PREFIX + ucfirst(pool.name),
        sort_key=len(pool.name) + TREASURE_POOL_SORT_OFFSET,
    )


def _classify_biome(biome: Biome, overrides: TitleOverrides) -> Candidate:
    return Candidate(
        entity=biome,
        kind=EntityKind.BIOME,
        identifier=biome.biome_code,
        wanted_title=biome.display_name,
        sort_key=BIOME_SORT_KEY,
    )


def _classify_sapling_part(part: SaplingPart, overrides: TitleOverrides) -> Candidate:
    return Candidate(
        entity=part,
        kind=EntityKind.SAPLING_PART,
        identifier=part.name,
        wanted_title=part.display_name,
        sort_key=len(part.name) + SAPLING_PART_SORT_OFFSET,
    )


_CLASSIFIERS: Final[dict[EntityKind, Callable[[Any, TitleOverrides], Candidate]]] = {
    EntityKind.ITEM: _classify_item,
    EntityKind.MONSTER: _classify_monster,
    EntityKind.TREASURE_POOL: _classify_treasure_pool,
    EntityKind.BIOME: _classify_biome,
    EntityKind.SAPLING_PART: _classify_sapling_part,
}


def supported_kinds() -> frozenset[EntityKind]:
    """Entity kinds the classifier knows how to title."""
    return frozenset(_CLASSIFIERS)


class EntityClassifier:
    """Builds Candidates from raw entities.

    Usage:
        classifier = EntityClassifier(load_title_overrides())
        candidate = classifier.classify(item, order=0)
    """

    def __init__(self, overrides: TitleOverrides | None = None) -> None:
        self._overrides = overrides or TitleOverrides()

    @property
    def overrides(self) -> TitleOverrides:
        return self._overrides

    def classify(self, entity: Any, order: int = 0) -> Candidate:
        """Classify one entity.

        Args:
            entity: Any object exposing a ``kind`` attribute from EntityKind.
            order: Insertion index, kept on the candidate for tie-breaking.

        Returns:
            Candidate with sanitized wanted_title, sort key and tags.

        Raises:
            UnsupportedEntityKindError: If the entity's kind is missing or unknown.
        """
        kind = getattr(entity, "kind", None)
        classify_fn = _CLASSIFIERS.get(kind) if isinstance(kind, EntityKind) else None
        if classify_fn is None:
            raise UnsupportedEntityKindError(entity)

        candidate = classify_fn(entity, self._overrides)
        candidate.wanted_title = clean_page_name(candidate.wanted_title)
        candidate.order = order
        return candidate
