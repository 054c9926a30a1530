"""Transient per-resolve record for one entity that wants a title."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wiki_titles.models.enums import EntityKind


@dataclass(eq=False)
class Candidate:
    """An entity's title proposal plus the tags used to disambiguate it.

    Candidates live only inside one TitleRegistry.resolve() call.
    Disambiguation rules mutate ``wanted_title`` in place.
    """

    entity: Any
    kind: EntityKind
    identifier: str
    wanted_title: str
    """Starts as the requested title; rules append suffixes to it."""

    sort_key: int
    order: int = 0
    """Insertion order, used to break sort_key ties."""

    # Item tags
    is_food: bool = False
    is_decorative: bool = False
    is_npc_only: bool = False
    is_painting: bool = False
    is_prop_pack: bool = False
    family: str | None = None
    race_prefix: str | None = None

    # Monster tags
    is_pet: bool = False
    is_critter: bool = False
    element_prefix: str | None = None

    @property
    def is_item(self) -> bool:
        return self.kind is EntityKind.ITEM

    @property
    def is_monster(self) -> bool:
        return self.kind is EntityKind.MONSTER

    @property
    def is_biome(self) -> bool:
        return self.kind is EntityKind.BIOME

    @property
    def ordering(self) -> tuple[int, int]:
        return (self.sort_key, self.order)

    def rename(self, suffix: str) -> Candidate:
        """Append a disambiguating suffix, e.g. " (decorative)"."""
        self.wanted_title += suffix
        return self
