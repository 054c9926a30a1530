"""Tests for entity classification (requested titles, sort keys, tags)."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from wiki_titles.config import TitleOverrides
from wiki_titles.models.entities import Biome, Item, Monster, SaplingPart, TreasurePool
from wiki_titles.models.enums import EntityKind
from wiki_titles.naming.classifier import (
    BIOME_SORT_KEY,
    MONSTER_SORT_OFFSET,
    EntityClassifier,
    strip_npc_affix,
    supported_kinds,
)
from wiki_titles.naming.errors import UnsupportedEntityKindError


@pytest.fixture
def classifier() -> EntityClassifier:
    return EntityClassifier(
        TitleOverrides(
            items={"fuelcell": "Fuel Cell (item)"},
            monsters={"smallbiped": "Small Biped (monster type)"},
        )
    )


class TestRequestedTitle:
    def test_item_uses_display_name(self, classifier: EntityClassifier) -> None:
        candidate = classifier.classify(Item("cactusjuice", "Cactus Juice"))
        assert candidate.wanted_title == "Cactus Juice"
        assert candidate.kind is EntityKind.ITEM

    def test_item_override(self, classifier: EntityClassifier) -> None:
        candidate = classifier.classify(Item("fuelcell", "Fuel Cell"))
        assert candidate.wanted_title == "Fuel Cell (item)"

    def test_monster_override(self, classifier: EntityClassifier) -> None:
        candidate = classifier.classify(Monster("smallbiped", "Biped"))
        assert candidate.wanted_title == "Small Biped (monster type)"

    def test_monster_display_name(self, classifier: EntityClassifier) -> None:
        candidate = classifier.classify(Monster("poptop", "Poptop"))
        assert candidate.wanted_title == "Poptop"

    def test_treasure_pool_prefix(self, classifier: EntityClassifier) -> None:
        candidate = classifier.classify(TreasurePool("basicTreasure"))
        assert candidate.wanted_title == "TreasurePool:BasicTreasure"

    def test_biome_display_name(self, classifier: EntityClassifier) -> None:
        candidate = classifier.classify(Biome("forest", "Forest"))
        assert candidate.wanted_title == "Forest"

    def test_sapling_part_display_name(self, classifier: EntityClassifier) -> None:
        stem = classifier.classify(SaplingPart("pineytree", is_foliage=False, friendly_name="Piney"))
        foliage = classifier.classify(SaplingPart("oakleaves", is_foliage=True, friendly_name="Unknown"))
        assert stem.wanted_title == "Stem: pineytree (Piney)"
        assert foliage.wanted_title == "Foliage: oakleaves"

    def test_title_is_sanitized(self, classifier: EntityClassifier) -> None:
        candidate = classifier.classify(Item("shrine3", "^yellow;shrine #3 [old]^reset;"))
        assert candidate.wanted_title == "Shrine N3 (old)"

    def test_order_is_kept(self, classifier: EntityClassifier) -> None:
        candidate = classifier.classify(Item("a", "A"), order=7)
        assert candidate.order == 7


class TestSortKey:
    def test_item_sort_key_is_code_length(self, classifier: EntityClassifier) -> None:
        assert classifier.classify(Item("ironbar", "Iron Bar")).sort_key == 7

    def test_monster_after_items(self, classifier: EntityClassifier) -> None:
        candidate = classifier.classify(Monster("poptop", "Poptop"))
        assert candidate.sort_key == len("poptop") + MONSTER_SORT_OFFSET

    def test_kind_ordering(self, classifier: EntityClassifier) -> None:
        item = classifier.classify(Item("x" * 500, "Long"))
        monster = classifier.classify(Monster("m", "M"))
        biome = classifier.classify(Biome("b", "B"))
        pool = classifier.classify(TreasurePool("p"))
        part = classifier.classify(SaplingPart("s"))
        assert biome.sort_key == BIOME_SORT_KEY
        assert item.sort_key < monster.sort_key < biome.sort_key < pool.sort_key < part.sort_key


class TestItemTags:
    def test_food_categories(self, classifier: EntityClassifier) -> None:
        assert classifier.classify(Item("cactusjuice", "C", category="preparedFood")).is_food
        assert classifier.classify(Item("water", "W", category="drink")).is_food
        assert not classifier.classify(Item("ore", "O", category="material")).is_food

    def test_decorative_category(self, classifier: EntityClassifier) -> None:
        assert classifier.classify(Item("cactusjuiceobject", "C", category="decorative")).is_decorative

    def test_outpost_station_is_decorative(self, classifier: EntityClassifier) -> None:
        candidate = classifier.classify(Item("craftingtableoutpost", "Table", category="crafting"))
        assert candidate.is_decorative

    def test_npc_affix(self, classifier: EntityClassifier) -> None:
        assert classifier.classify(Item("npcmatterblaster", "M")).is_npc_only
        assert classifier.classify(Item("matterblasternpc", "M")).is_npc_only
        assert not classifier.classify(Item("matterblaster", "M")).is_npc_only

    def test_material_family(self, classifier: EntityClassifier) -> None:
        assert classifier.classify(Item("skathbar", "Bar")).family == "Skath"
        assert classifier.classify(Item("ironbar", "Bar")).family is None

    def test_painting(self, classifier: EntityClassifier) -> None:
        assert classifier.classify(Item("poptoppainting", "Poptop")).is_painting

    def test_race_prefix(self, classifier: EntityClassifier) -> None:
        assert classifier.classify(Item("apexshipbed", "Bed")).race_prefix == "Apex"
        assert classifier.classify(Item("shipbedfloran", "Bed")).race_prefix == "Floran"
        assert classifier.classify(Item("shipbed", "Bed")).race_prefix is None

    def test_prop_pack(self, classifier: EntityClassifier) -> None:
        item = Item("propchair", "Chair", asset_filename="objects/proppack/chair.object")
        assert classifier.classify(item).is_prop_pack
        assert not classifier.classify(Item("chair", "Chair", asset_filename="objects/chair.object")).is_prop_pack


class TestMonsterTags:
    def test_pet(self, classifier: EntityClassifier) -> None:
        assert classifier.classify(Monster("petpoptop", "Poptop")).is_pet

    def test_critter_by_type(self, classifier: EntityClassifier) -> None:
        assert classifier.classify(Monster("crittercrab", "Crab")).is_critter

    def test_critter_by_behavior(self, classifier: EntityClassifier) -> None:
        monster = Monster("crab", "Crab", base_parameters={"behavior": "smallcritter"})
        assert classifier.classify(monster).is_critter

    def test_element_prefix(self, classifier: EntityClassifier) -> None:
        assert classifier.classify(Monster("firespider", "Spider")).element_prefix == "Fire"
        assert classifier.classify(Monster("fuicespider", "Spider")).element_prefix == "Ice"
        assert classifier.classify(Monster("spiderfire", "Spider")).element_prefix is None


class TestUnsupportedKinds:
    def test_every_kind_is_supported(self) -> None:
        assert supported_kinds() == frozenset(EntityKind)

    def test_object_without_kind(self, classifier: EntityClassifier) -> None:
        with pytest.raises(UnsupportedEntityKindError, match="object"):
            classifier.classify(object())

    def test_object_with_foreign_kind(self, classifier: EntityClassifier) -> None:
        @dataclass
        class Planet:
            kind: str = "planet"

        with pytest.raises(UnsupportedEntityKindError, match="Planet"):
            classifier.classify(Planet())


class TestStripNpcAffix:
    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("npcbed", "bed"),
            ("bednpc", "bed"),
            ("bed", "bed"),
        ],
    )
    def test_strip(self, code: str, expected: str) -> None:
        assert strip_npc_affix(code) == expected
