"""Derived edges between characters and houses.

Relation fields on the records hold display names. Every function here turns
those names into identifiers (or records) at call time by way of the
character's alias table and the NameResolver indices. Nothing is cached and
nothing raises: a name that does not resolve simply yields no edge.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from westeros.schemas.entities import Character, House
from .name_resolver import NameResolver


class RelationKind(str, Enum):
    """Character-to-character relations backed by the `related` alias table."""

    SIBLINGS = "siblings"
    SPOUSES = "spouses"
    LOVERS = "lovers"

    def names(self, character: Character) -> Tuple[str, ...]:
        """Relation field of `character` holding the names for this kind."""
        if self is RelationKind.SIBLINGS:
            return character.siblings
        if self is RelationKind.SPOUSES:
            return character.spouse
        return character.lovers


def related_ids(resolver: NameResolver, character: Character, kind: RelationKind) -> Tuple[str, ...]:
    """Identifiers of the characters `character` names under `kind`.

    Alias entries are kept in `related` order; entries whose slug is not in
    the store are dropped.
    """
    wanted = set(kind.names(character))
    if not wanted:
        return ()

    out = []
    for ref in character.related:
        if ref.name not in wanted:
            continue
        cid = resolver.resolve_id_by_slug(ref.slug)
        if cid is not None:
            out.append(cid)
    return tuple(out)


def sibling_ids(resolver: NameResolver, character: Character) -> Tuple[str, ...]:
    return related_ids(resolver, character, RelationKind.SIBLINGS)


def spouse_ids(resolver: NameResolver, character: Character) -> Tuple[str, ...]:
    return related_ids(resolver, character, RelationKind.SPOUSES)


def lover_ids(resolver: NameResolver, character: Character) -> Tuple[str, ...]:
    return related_ids(resolver, character, RelationKind.LOVERS)


def house_id(resolver: NameResolver, character: Character) -> Optional[str]:
    """Identifier of the house whose name equals `character.house`, if any."""
    if not character.house:
        return None
    house = resolver.resolve_house_by_name(character.house)
    return house.id if house is not None else None


def allegiance_house_ids(resolver: NameResolver, house: House) -> Tuple[str, ...]:
    """Identifiers of the houses named in `house.allegiance`, in that order.

    A house named more than once is returned once.
    """
    out = []
    seen = set()
    for name in house.allegiance:
        target = resolver.resolve_house_by_name(name)
        if target is None or target.id in seen:
            continue
        seen.add(target.id)
        out.append(target.id)
    return tuple(out)


def member_ids(resolver: NameResolver, house: House) -> Tuple[str, ...]:
    """Identifiers of the characters whose house resolves to `house`, in store order."""
    return tuple(
        c.id for c in resolver.store.characters
        if house_id(resolver, c) == house.id
    )


# --------------------------
# Record-returning edges
# --------------------------

def characters_for(resolver: NameResolver, ids: Tuple[str, ...]) -> Tuple[Character, ...]:
    """Characters whose id is in `ids`, in store order and without repeats."""
    wanted = set(ids)
    return tuple(c for c in resolver.store.characters if c.id in wanted)


def houses_for(resolver: NameResolver, ids: Tuple[str, ...]) -> Tuple[House, ...]:
    wanted = set(ids)
    return tuple(h for h in resolver.store.houses if h.id in wanted)


def siblings(resolver: NameResolver, character: Character) -> Tuple[Character, ...]:
    return characters_for(resolver, sibling_ids(resolver, character))


def spouses(resolver: NameResolver, character: Character) -> Tuple[Character, ...]:
    return characters_for(resolver, spouse_ids(resolver, character))


def lovers(resolver: NameResolver, character: Character) -> Tuple[Character, ...]:
    return characters_for(resolver, lover_ids(resolver, character))


def house_of(resolver: NameResolver, character: Character) -> Optional[House]:
    if not character.house:
        return None
    return resolver.resolve_house_by_name(character.house)


def allegiances(resolver: NameResolver, house: House) -> Tuple[House, ...]:
    return houses_for(resolver, allegiance_house_ids(resolver, house))


def members(resolver: NameResolver, house: House) -> Tuple[Character, ...]:
    return characters_for(resolver, member_ids(resolver, house))
