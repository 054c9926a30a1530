"""Disambiguation rules for disputed titles.

A rule looks at an ordered pair (a, b) of candidates that want the same
title and, if it recognizes a well-known kind of conflict, renames one of
them by appending a suffix. Rules are tried in table order and the first
match wins. Almost every rule renames ``b``; the item-vs-monster rule may
rename ``a`` (paintings of monsters keep the monster's name free).

Rules only fire while both candidates still want the same title, so
re-applying a rule to an already renamed candidate never matches again.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from wiki_titles.naming.candidate import Candidate
from wiki_titles.naming.classifier import strip_npc_affix

RuleFn = Callable[[Candidate, Candidate], "Candidate | None"]


@dataclass(frozen=True)
class DisambiguationRule:
    """One named entry of the rule table."""

    name: str
    description: str
    fn: RuleFn

    def __call__(self, a: Candidate, b: Candidate) -> Candidate | None:
        """Apply the rule to (a, b); returns the renamed candidate or None."""
        if a is b or a.wanted_title != b.wanted_title:
            return None
        return self.fn(a, b)


def decorative_food(a: Candidate, b: Candidate) -> Candidate | None:
    # e.g. "cactusjuiceobject" (from the Plating Table) vs "cactusjuice"
    if a.is_food and b.is_decorative:
        return b.rename(" (decorative)")
    return None


def outpost_station(a: Candidate, b: Candidate) -> Candidate | None:
    # Non-functional crafting stations on the Science Outpost
    if (
        a.is_item
        and b.is_item
        and b.is_decorative
        and a.identifier + "outpost" == b.identifier
    ):
        return b.rename(" (decorative)")
    return None


def prop_pack(a: Candidate, b: Candidate) -> Candidate | None:
    # Decorative objects sold by the Prop Pack shop
    if b.is_prop_pack and not a.is_prop_pack:
        return b.rename(" (decorative)")
    return None


def npc_variant(a: Candidate, b: Candidate) -> Candidate | None:
    # Unobtainable NPC-only copy of a player-obtainable item
    if a.is_item and b.is_npc_only and a.identifier == strip_npc_affix(b.identifier):
        return b.rename(" (NPC)")
    return None


def pet_variant(a: Candidate, b: Candidate) -> Candidate | None:
    if b.is_pet and not a.is_pet:
        return b.rename(" (pet)")
    return None


def critter_variant(a: Candidate, b: Candidate) -> Candidate | None:
    # Non-aggressive miniature monsters
    if b.is_critter and not a.is_critter:
        return b.rename(" (critter)")
    return None


def item_vs_monster(a: Candidate, b: Candidate) -> Candidate | None:
    if a.is_item and b.is_monster:
        if a.is_painting:
            return a.rename(" (painting)")
        return b.rename(" (monster)")
    return None


def biome_vs_other(a: Candidate, b: Candidate) -> Candidate | None:
    if b.is_biome and not a.is_biome:
        return b.rename(" (biome)")
    return None


def material_family(a: Candidate, b: Candidate) -> Candidate | None:
    # e.g. Skath-specific materials
    if b.family and a.family != b.family:
        return b.rename(f" ({b.family})")
    return None


def race_variant(a: Candidate, b: Candidate) -> Candidate | None:
    # Race-themed decorations, e.g. apexshipbed vs floranshipbed
    if b.race_prefix and a.race_prefix != b.race_prefix:
        return b.rename(f" ({b.race_prefix})")
    return None


def element_variant(a: Candidate, b: Candidate) -> Candidate | None:
    if b.element_prefix and a.element_prefix != b.element_prefix:
        return b.rename(f" ({b.element_prefix})")
    return None


DEFAULT_RULES: tuple[DisambiguationRule, ...] = (
    DisambiguationRule(
        "decorative_food",
        "Decorative counterpart of an edible item -> (decorative)",
        decorative_food,
    ),
    DisambiguationRule(
        "outpost_station",
        "Decorative '<code>outpost' copy of a crafting station -> (decorative)",
        outpost_station,
    ),
    DisambiguationRule(
        "prop_pack",
        "Decorative object from the Prop Pack shop -> (decorative)",
        prop_pack,
    ),
    DisambiguationRule(
        "npc_variant",
        "NPC-only variant of a player-obtainable item -> (NPC)",
        npc_variant,
    ),
    DisambiguationRule(
        "pet_variant",
        "Pet variant of a wild monster -> (pet)",
        pet_variant,
    ),
    DisambiguationRule(
        "critter_variant",
        "Critter variant of a monster -> (critter)",
        critter_variant,
    ),
    DisambiguationRule(
        "item_vs_monster",
        "Item and monster with the same name -> painting (painting), else monster (monster)",
        item_vs_monster,
    ),
    DisambiguationRule(
        "biome_vs_other",
        "Biome named like a non-biome -> (biome)",
        biome_vs_other,
    ),
    DisambiguationRule(
        "material_family",
        "Material-family variant -> (<Family>)",
        material_family,
    ),
    DisambiguationRule(
        "race_variant",
        "Race-themed variant with a different race -> (<Race>)",
        race_variant,
    ),
    DisambiguationRule(
        "element_variant",
        "Elemental monster variant with a different element -> (<Element>)",
        element_variant,
    ),
)


def apply_rules(
    rules: Sequence[DisambiguationRule],
    a: Candidate,
    b: Candidate,
) -> tuple[Candidate, DisambiguationRule] | None:
    """Try every rule on (a, b) in table order; first match wins."""
    for rule in rules:
        renamed = rule(a, b)
        if renamed is not None:
            return renamed, rule
    return None
