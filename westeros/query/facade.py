from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from westeros.graph import relations
from westeros.graph.audit import ReferenceAudit, audit_references
from westeros.graph.name_resolver import NameResolver
from westeros.graph.relations import RelationKind
from westeros.schemas.entities import Character, House
from westeros.store.entity_store import EntityStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryFacade:
    """Read operations served to the API layer.

    One instance is built at startup and shared by every request; all
    methods are pure reads over the entity store.
    """

    store: EntityStore
    resolver: NameResolver

    @classmethod
    def from_store(cls, store: EntityStore) -> "QueryFacade":
        return cls(store=store, resolver=NameResolver(store))

    @classmethod
    def from_data_dir(cls, data_dir: str) -> "QueryFacade":
        return cls.from_store(EntityStore.load_dir(data_dir))

    # --------------------------
    # Collections
    # --------------------------

    def list_characters(self) -> Tuple[Character, ...]:
        return self.store.characters

    def list_houses(self) -> Tuple[House, ...]:
        return self.store.houses

    def get_character(self, name: str) -> Optional[Character]:
        """Exact-name lookup; the first character in store order wins."""
        return self.resolver.resolve_character_by_name(name)

    def get_house(self, name: str) -> Optional[House]:
        return self.resolver.resolve_house_by_name(name)

    # --------------------------
    # Derived identifiers
    # --------------------------

    def related_ids(self, character: Character, kind: RelationKind) -> Tuple[str, ...]:
        return relations.related_ids(self.resolver, character, kind)

    def sibling_ids(self, character: Character) -> Tuple[str, ...]:
        return relations.sibling_ids(self.resolver, character)

    def spouse_ids(self, character: Character) -> Tuple[str, ...]:
        return relations.spouse_ids(self.resolver, character)

    def lover_ids(self, character: Character) -> Tuple[str, ...]:
        return relations.lover_ids(self.resolver, character)

    def house_id(self, character: Character) -> Optional[str]:
        return relations.house_id(self.resolver, character)

    def allegiance_house_ids(self, house: House) -> Tuple[str, ...]:
        return relations.allegiance_house_ids(self.resolver, house)

    def member_ids(self, house: House) -> Tuple[str, ...]:
        return relations.member_ids(self.resolver, house)

    # --------------------------
    # Derived records
    # --------------------------

    def siblings(self, character: Character) -> Tuple[Character, ...]:
        return relations.siblings(self.resolver, character)

    def spouses(self, character: Character) -> Tuple[Character, ...]:
        return relations.spouses(self.resolver, character)

    def lovers(self, character: Character) -> Tuple[Character, ...]:
        return relations.lovers(self.resolver, character)

    def house_of(self, character: Character) -> Optional[House]:
        return relations.house_of(self.resolver, character)

    def allegiances(self, house: House) -> Tuple[House, ...]:
        return relations.allegiances(self.resolver, house)

    def members(self, house: House) -> Tuple[Character, ...]:
        return relations.members(self.resolver, house)

    def audit(self, max_examples_per_kind: int = 10) -> ReferenceAudit:
        return audit_references(self.resolver, max_examples_per_kind=max_examples_per_kind)
