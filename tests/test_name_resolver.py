"""
Tests for westeros/graph/name_resolver.py -- slug and name indices.
"""

import logging

from westeros.graph.name_resolver import NameResolver
from westeros.store.entity_store import EntityStore


class TestLookups:

    def test_resolve_id_by_slug(self, sample_store):
        resolver = NameResolver(sample_store)

        assert resolver.resolve_id_by_slug("sansa-stark") == "2"
        assert resolver.resolve_id_by_slug("ramsay-bolton") is None

    def test_resolve_character_by_name(self, sample_store):
        resolver = NameResolver(sample_store)

        assert resolver.resolve_character_by_name("Tyrion Lannister").slug == "tyrion-lannister"
        assert resolver.resolve_character_by_name("tyrion lannister") is None

    def test_resolve_houses(self, sample_store):
        resolver = NameResolver(sample_store)

        assert resolver.resolve_house_by_name("House Tully").id == "h2"
        assert resolver.resolve_house_by_id("h2").name == "House Tully"
        assert resolver.resolve_house_by_name("Dothraki") is None

    def test_empty_store(self):
        resolver = NameResolver(EntityStore())

        assert resolver.resolve_id_by_slug("jon-snow") is None
        assert resolver.resolve_character_by_name("Jon Snow") is None


class TestDuplicates:
    """First occurrence in input order wins."""

    def test_duplicate_slug_keeps_first(self, caplog):
        store = EntityStore.from_records([
            {"id": "1", "name": "Aegon Targaryen", "slug": "aegon"},
            {"id": "2", "name": "Aegon Targaryen (son of Rhaegar)", "slug": "aegon"},
        ])
        with caplog.at_level(logging.WARNING):
            resolver = NameResolver(store)

        assert resolver.resolve_id_by_slug("aegon") == "1"
        assert "Duplicate slug" in caplog.text

    def test_duplicate_names_keep_first(self):
        store = EntityStore.from_records(
            [
                {"id": "1", "name": "Aegon Targaryen", "slug": "aegon-i"},
                {"id": "2", "name": "Aegon Targaryen", "slug": "aegon-ii"},
            ],
            [
                {"id": "h1", "name": "House Frey"},
                {"id": "h2", "name": "House Frey"},
            ],
        )
        resolver = NameResolver(store)

        assert resolver.resolve_character_by_name("Aegon Targaryen").id == "1"
        assert resolver.resolve_house_by_name("House Frey").id == "h1"
        # both slugs still resolve
        assert resolver.resolve_id_by_slug("aegon-ii") == "2"
