from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from westeros.schemas.entities import Character, House
from westeros.store.entity_store import EntityStore

logger = logging.getLogger(__name__)


@dataclass
class NameResolver:
    """O(1) lookups from slugs and names to store records.

    Duplicate keys keep the first record in store order; later ones are
    reported once at build time and otherwise ignored.
    """

    store: EntityStore

    id_by_slug: Dict[str, str] = field(default_factory=dict)
    character_by_name: Dict[str, Character] = field(default_factory=dict)
    character_by_id: Dict[str, Character] = field(default_factory=dict)
    house_by_name: Dict[str, House] = field(default_factory=dict)
    house_by_id: Dict[str, House] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.build()

    def build(self) -> None:
        dupes: Dict[str, int] = {"slug": 0, "character name": 0, "character id": 0, "house name": 0, "house id": 0}

        def add(index: dict, key: str, value, kind: str) -> None:
            if not key:
                return
            if key in index:
                dupes[kind] += 1
                logger.warning(f"⚠️ Duplicate {kind} {key!r}: keeping first occurrence")
                return
            index[key] = value

        for c in self.store.characters:
            add(self.id_by_slug, c.slug, c.id, "slug")
            add(self.character_by_name, c.name, c, "character name")
            add(self.character_by_id, c.id, c, "character id")

        for h in self.store.houses:
            add(self.house_by_name, h.name, h, "house name")
            add(self.house_by_id, h.id, h, "house id")

        logger.info(
            f"🧭 Name indices built: {len(self.id_by_slug)} slugs, "
            f"{len(self.character_by_name)} character names, {len(self.house_by_name)} house names. "
            f"(duplicates ignored={sum(dupes.values())})"
        )

    def resolve_id_by_slug(self, slug: str) -> Optional[str]:
        return self.id_by_slug.get(slug)

    def resolve_character_by_name(self, name: str) -> Optional[Character]:
        return self.character_by_name.get(name)

    def resolve_house_by_name(self, name: str) -> Optional[House]:
        return self.house_by_name.get(name)

    def resolve_character_by_id(self, character_id: str) -> Optional[Character]:
        return self.character_by_id.get(character_id)

    def resolve_house_by_id(self, house_id: str) -> Optional[House]:
        return self.house_by_id.get(house_id)
