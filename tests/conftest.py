"""
Shared pytest fixtures for the Westeros Graph API test suite.

Provides:
    - data_dir: path to the sample dataset shipped in data/
    - sample_store / sample_facade: the sample dataset loaded from disk
    - jon_store: the minimal Jon Snow / Sansa Stark store
    - make_facade: build a QueryFacade from raw character and house dicts
"""

from pathlib import Path

import pytest

from westeros.config_manager import ConfigManager
from westeros.query.facade import QueryFacade
from westeros.store.entity_store import EntityStore

PROJECT_ROOT = Path(__file__).resolve().parent.parent


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def data_dir():
    """Return the path of the sample dataset directory."""
    return str(PROJECT_ROOT / "data")


@pytest.fixture
def sample_store(data_dir):
    return EntityStore.load_dir(data_dir)


@pytest.fixture
def sample_facade(sample_store):
    return QueryFacade.from_store(sample_store)


@pytest.fixture
def jon_record():
    """Jon Snow naming Sansa Stark as a sibling through the alias table."""
    return {
        "id": "1",
        "name": "Jon Snow",
        "slug": "jon-snow",
        "house": "Stark",
        "siblings": ["Sansa Stark"],
        "related": [{"name": "Sansa Stark", "slug": "sansa-stark"}],
    }


@pytest.fixture
def sansa_record():
    return {"id": "2", "name": "Sansa Stark", "slug": "sansa-stark", "house": "Stark"}


@pytest.fixture
def make_facade():
    """Return a builder for facades over in-memory records."""
    def _make(characters=(), houses=()):
        return QueryFacade.from_store(EntityStore.from_records(characters, houses))
    return _make


@pytest.fixture
def reset_config():
    """Drop any cached configuration before and after the test."""
    ConfigManager.reset()
    yield
    ConfigManager.reset()
