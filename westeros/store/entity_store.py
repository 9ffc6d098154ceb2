"""Immutable in-memory collections of Character and House records.

The store is built once at process start and passed explicitly to every
resolver and query; nothing in the package keeps module-level data.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError
from tqdm import tqdm

from westeros.schemas.entities import Character, House
from .io import choose_data_path, load_records

logger = logging.getLogger(__name__)

# Below this size a progress bar is only noise
PROGRESS_MIN_RECORDS = 500

M = TypeVar("M", bound=BaseModel)


class DataLoadError(ValueError):
    """A source record could not be turned into a Character or House."""

    def __init__(self, source: str, index: int, error: ValidationError):
        self.source = source
        self.index = index
        self.error = error
        super().__init__(f"Invalid record #{index} in {source}: {error.error_count()} validation error(s)\n{error}")


@dataclass(frozen=True)
class EntityStore:
    characters: Tuple[Character, ...] = ()
    houses: Tuple[House, ...] = ()

    @classmethod
    def from_records(
        cls,
        characters: Iterable[Any] = (),
        houses: Iterable[Any] = (),
        *,
        source: str = "<memory>",
    ) -> "EntityStore":
        """Build a store from model instances or raw dicts, preserving input order."""
        return cls(
            characters=_parse_all(Character, characters, f"{source}:characters"),
            houses=_parse_all(House, houses, f"{source}:houses"),
        )

    @classmethod
    def load(cls, characters_path: str, houses_path: str) -> "EntityStore":
        """Load both collections from disk.

        Raises:
            FileNotFoundError: If either file is missing.
            DataLoadError: If a record fails validation.
        """
        logger.info(f"📚 Loading characters from {characters_path}...")
        characters = _parse_all(Character, load_records(characters_path), characters_path)
        logger.info(f"🏰 Loading houses from {houses_path}...")
        houses = _parse_all(House, load_records(houses_path), houses_path)

        store = cls(characters=characters, houses=houses)
        logger.info(f"✅ Entity store ready: {len(store.characters)} characters, {len(store.houses)} houses")
        return store

    @classmethod
    def load_dir(cls, data_dir: str) -> "EntityStore":
        return cls.load(
            choose_data_path(data_dir, "characters"),
            choose_data_path(data_dir, "houses"),
        )

    def counts(self) -> Dict[str, int]:
        return {"characters": len(self.characters), "houses": len(self.houses)}


def _parse_all(model: Type[M], records: Iterable[Any], source: str) -> Tuple[M, ...]:
    records = list(records)
    out = []
    for i, rec in enumerate(tqdm(records, desc=f"Parsing {model.__name__}s", disable=len(records) < PROGRESS_MIN_RECORDS)):
        if isinstance(rec, model):
            out.append(rec)
            continue
        try:
            out.append(model.model_validate(rec))
        except ValidationError as e:
            logger.error(f"❌ Invalid {model.__name__} record #{i} in {source}")
            raise DataLoadError(source, i, e) from e
    return tuple(out)
