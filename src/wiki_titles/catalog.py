"""Entity catalogs: JSON/JSONL dumps of entities for the command line.

A catalog is a list of records discriminated by ``kind``:

    [
      {"kind": "item", "item_code": "cactusjuice", "display_name": "Cactus Juice",
       "category": "preparedFood"},
      {"kind": "monster", "monster_type": "poptop", "display_name": "Poptop"}
    ]

Files ending in ``.jsonl`` hold one record per line.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from wiki_titles.models.entities import (
    Biome,
    Entity,
    Item,
    Monster,
    SaplingPart,
    TreasurePool,
)

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when a catalog file can't be read or validated."""


class ItemRecord(BaseModel):
    kind: Literal["item"] = "item"
    item_code: str
    display_name: str
    category: str | None = None
    asset_filename: str = ""

    def to_entity(self) -> Item:
        return Item(
            item_code=self.item_code,
            display_name=self.display_name,
            category=self.category,
            asset_filename=self.asset_filename,
        )


class MonsterRecord(BaseModel):
    kind: Literal["monster"] = "monster"
    monster_type: str
    display_name: str
    base_parameters: dict[str, Any] = Field(default_factory=dict)  # pyright: ignore[reportUnknownVariableType]

    def to_entity(self) -> Monster:
        return Monster(
            monster_type=self.monster_type,
            display_name=self.display_name,
            base_parameters=dict(self.base_parameters),
        )


class TreasurePoolRecord(BaseModel):
    kind: Literal["treasure_pool"] = "treasure_pool"
    name: str

    def to_entity(self) -> TreasurePool:
        return TreasurePool(name=self.name)


class BiomeRecord(BaseModel):
    kind: Literal["biome"] = "biome"
    biome_code: str
    display_name: str

    def to_entity(self) -> Biome:
        return Biome(biome_code=self.biome_code, display_name=self.display_name)


class SaplingPartRecord(BaseModel):
    kind: Literal["sapling_part"] = "sapling_part"
    name: str
    is_foliage: bool = False
    friendly_name: str | None = None

    def to_entity(self) -> SaplingPart:
        return SaplingPart(
            name=self.name,
            is_foliage=self.is_foliage,
            friendly_name=self.friendly_name,
        )


EntityRecord = Annotated[
    ItemRecord | MonsterRecord | TreasurePoolRecord | BiomeRecord | SaplingPartRecord,
    Field(discriminator="kind"),
]

_RECORDS_ADAPTER: TypeAdapter[list[EntityRecord]] = TypeAdapter(list[EntityRecord])


def parse_records(raw_records: list[Any]) -> list[Entity]:
    """Validate raw dicts and convert them into entities, keeping their order.

    Raises:
        CatalogError: If any record is invalid.
    """
    try:
        records = _RECORDS_ADAPTER.validate_python(raw_records)
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog record: {e}") from e
    return [record.to_entity() for record in records]


def load_catalog(path: Path) -> list[Entity]:
    """Load every entity of a JSON or JSONL catalog file.

    Raises:
        CatalogError: If the file is missing, malformed or has invalid records.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"Can't read catalog {path}: {e}") from e

    try:
        if path.suffix.lower() == ".jsonl":
            raw_records = [json.loads(line) for line in text.splitlines() if line.strip()]
        else:
            raw_records = json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogError(f"Malformed JSON in {path}: {e}") from e

    if not isinstance(raw_records, list):
        raise CatalogError(f"Catalog {path} must contain a list of records")

    entities = parse_records(raw_records)
    logger.debug("Loaded %d entities from %s", len(entities), path)
    return entities
