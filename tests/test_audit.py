"""
Tests for westeros/graph/audit.py -- unresolved reference reporting.
"""

import logging
from dataclasses import FrozenInstanceError

import pytest

from westeros.graph.audit import (
    ALIAS_SLUG_MISSING,
    ALLEGIANCE_UNKNOWN,
    HOUSE_UNKNOWN,
    NAME_NOT_IN_ALIASES,
    audit_references,
)


def _facade(make_facade):
    return make_facade(
        [
            {
                "id": "1", "name": "Arya Stark", "slug": "arya-stark", "house": "House Stark",
                "siblings": ["Sansa Stark", "Jon Snow"],
                "lovers": ["Gendry"],
                "related": [
                    {"name": "Sansa Stark", "slug": "sansa-stark"},
                    {"name": "Jon Snow", "slug": "jon-snow"},
                ],
            },
            {"id": "2", "name": "Sansa Stark", "slug": "sansa-stark", "house": "House Bolton"},
        ],
        [{"id": "h1", "name": "House Stark", "allegiance": ["House Tully"]}],
    )


class TestReferenceAudit:

    def test_counts_each_kind(self, make_facade):
        audit = audit_references(_facade(make_facade).resolver)

        assert audit.total_missing == 4
        assert audit.missing_by_kind == {
            ALIAS_SLUG_MISSING: 1,
            NAME_NOT_IN_ALIASES: 1,
            HOUSE_UNKNOWN: 1,
            ALLEGIANCE_UNKNOWN: 1,
        }
        assert audit.missing_by_relation["siblings"] == 1
        assert audit.missing_by_relation["lovers"] == 1

    def test_examples_are_bounded(self, make_facade):
        facade = make_facade([
            {"id": str(i), "name": f"Frey {i}", "slug": f"frey-{i}", "house": "House Frey"}
            for i in range(5)
        ])
        audit = facade.audit(max_examples_per_kind=2)

        assert audit.missing_by_kind[HOUSE_UNKNOWN] == 5
        assert len(audit.examples[HOUSE_UNKNOWN]) == 2
        assert audit.examples[HOUSE_UNKNOWN][0] == {"source": "Frey 0", "relation": "house", "target": "House Frey"}

    def test_clean_data_reports_nothing(self, make_facade, jon_record, sansa_record):
        facade = make_facade([jon_record, sansa_record], [{"id": "h1", "name": "Stark"}])
        report = facade.audit().to_dict()

        assert report["total_missing"] == 0
        assert report["examples"] == {}

    def test_report_is_read_only(self, make_facade):
        audit = _facade(make_facade).audit()

        with pytest.raises(FrozenInstanceError):
            audit.missing_by_kind = {}
        with pytest.raises(TypeError):
            audit.missing_by_kind[HOUSE_UNKNOWN] = 0
        with pytest.raises(TypeError):
            audit.examples[HOUSE_UNKNOWN][0]["target"] = "House Stark"

    def test_log_summary_most_common_first(self, make_facade, caplog):
        facade = make_facade([
            {"id": str(i), "name": f"Frey {i}", "slug": f"frey-{i}", "house": "House Frey", "lovers": ["Nobody"]}
            for i in range(2)
        ] + [{"id": "9", "name": "Walder", "slug": "walder", "lovers": ["Nobody"]}])

        with caplog.at_level(logging.INFO, logger="westeros.graph.audit"):
            facade.audit().log_summary()

        assert "5 unresolved references" in caplog.text
        assert caplog.text.index(NAME_NOT_IN_ALIASES) < caplog.text.index(HOUSE_UNKNOWN)
