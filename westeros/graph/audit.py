import logging
from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from .name_resolver import NameResolver
from .relations import RelationKind

logger = logging.getLogger(__name__)

# Audit categories
ALIAS_SLUG_MISSING = "alias_slug_missing"
NAME_NOT_IN_ALIASES = "name_not_in_aliases"
HOUSE_UNKNOWN = "house_unknown"
ALLEGIANCE_UNKNOWN = "allegiance_unknown"


def _by_count(counts: Mapping[str, int]) -> List[Tuple[str, int]]:
    return sorted(counts.items(), key=lambda kv: kv[1], reverse=True)


@dataclass(frozen=True)
class ReferenceAudit:
    """Read-only counts of references in the source data that resolve to nothing."""

    missing_by_kind: Mapping[str, int]
    missing_by_relation: Mapping[str, int]
    examples: Mapping[str, Tuple[Mapping[str, str], ...]]

    @property
    def total_missing(self) -> int:
        return sum(self.missing_by_kind.values())

    def log_summary(self) -> None:
        total = self.total_missing
        if total <= 0:
            logger.info("✅ Every relation reference resolves.")
            return

        logger.info(f"📉 {total} unresolved references by kind:")
        for kind, cnt in _by_count(self.missing_by_kind):
            logger.info(f"   - {kind}: {cnt} ({(cnt/total)*100:.1f}%)")

        logger.info("📉 Unresolved references by relation:")
        for rel, cnt in _by_count(self.missing_by_relation):
            logger.info(f"   - {rel}: {cnt}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_missing": self.total_missing,
            "missing_by_kind": dict(self.missing_by_kind),
            "missing_by_relation": dict(self.missing_by_relation),
            "examples": {k: [dict(ex) for ex in v] for k, v in self.examples.items()},
        }


@dataclass
class AuditCollector:
    """Accumulates unresolved references while the records are walked."""

    max_examples_per_kind: int = 10
    missing_by_kind: Counter = field(default_factory=Counter)
    missing_by_relation: Counter = field(default_factory=Counter)
    examples: Dict[str, List[Dict[str, str]]] = field(default_factory=dict)

    def record(self, *, kind: str, relation: str, source: str, target: str) -> None:
        self.missing_by_kind[kind] += 1
        self.missing_by_relation[relation] += 1

        ex_list = self.examples.setdefault(kind, [])
        if len(ex_list) < self.max_examples_per_kind:
            ex_list.append({"source": source, "relation": relation, "target": target})

    def freeze(self) -> ReferenceAudit:
        return ReferenceAudit(
            missing_by_kind=MappingProxyType(dict(self.missing_by_kind)),
            missing_by_relation=MappingProxyType(dict(self.missing_by_relation)),
            examples=MappingProxyType({
                k: tuple(MappingProxyType(dict(ex)) for ex in v)
                for k, v in self.examples.items()
            }),
        )


def audit_references(resolver: NameResolver, max_examples_per_kind: int = 10) -> ReferenceAudit:
    """Walk every record and report the references the resolvers would drop."""
    audit = AuditCollector(max_examples_per_kind=max_examples_per_kind)
    store = resolver.store

    for c in store.characters:
        alias_names = {ref.name for ref in c.related}

        for kind in RelationKind:
            names = set(kind.names(c))
            for name in kind.names(c):
                if name not in alias_names:
                    audit.record(kind=NAME_NOT_IN_ALIASES, relation=kind.value, source=c.name, target=name)

            for ref in c.related:
                if ref.name in names and resolver.resolve_id_by_slug(ref.slug) is None:
                    audit.record(kind=ALIAS_SLUG_MISSING, relation=kind.value, source=c.name, target=ref.slug)

        if c.house and resolver.resolve_house_by_name(c.house) is None:
            audit.record(kind=HOUSE_UNKNOWN, relation="house", source=c.name, target=c.house)

    for h in store.houses:
        for name in h.allegiance:
            if resolver.resolve_house_by_name(name) is None:
                audit.record(kind=ALLEGIANCE_UNKNOWN, relation="allegiance", source=h.name, target=name)

    return audit.freeze()
