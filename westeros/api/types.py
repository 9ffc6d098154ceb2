"""
Character and House GraphQL type definitions
"""

from typing import List, Optional

import strawberry

from westeros.schemas import entities
from .dependencies import facade_from_info


@strawberry.type
class Character:
	"""Character type for GraphQL API."""

	id: strawberry.ID
	name: str
	slug: str
	house: Optional[str]
	image: Optional[str]
	allegiances: List[str]

	record: strawberry.Private[entities.Character]

	@classmethod
	def from_record(cls, rec: entities.Character) -> "Character":
		return cls(
			id=strawberry.ID(rec.id),
			name=rec.name,
			slug=rec.slug,
			house=rec.house,
			image=rec.image,
			allegiances=list(rec.allegiances),
			record=rec,
		)

	@strawberry.field
	def sibling_ids(self, info: strawberry.Info) -> List[strawberry.ID]:
		"""Identifiers of the siblings named on this character."""
		return [strawberry.ID(i) for i in facade_from_info(info).sibling_ids(self.record)]

	@strawberry.field
	def spouse_ids(self, info: strawberry.Info) -> List[strawberry.ID]:
		return [strawberry.ID(i) for i in facade_from_info(info).spouse_ids(self.record)]

	@strawberry.field
	def lover_ids(self, info: strawberry.Info) -> List[strawberry.ID]:
		return [strawberry.ID(i) for i in facade_from_info(info).lover_ids(self.record)]

	@strawberry.field
	def house_id(self, info: strawberry.Info) -> Optional[strawberry.ID]:
		"""Identifier of the house this character belongs to, if it is known."""
		hid = facade_from_info(info).house_id(self.record)
		return strawberry.ID(hid) if hid is not None else None

	@strawberry.field
	def siblings(self, info: strawberry.Info) -> List["Character"]:
		return [Character.from_record(c) for c in facade_from_info(info).siblings(self.record)]

	@strawberry.field
	def spouses(self, info: strawberry.Info) -> List["Character"]:
		return [Character.from_record(c) for c in facade_from_info(info).spouses(self.record)]

	@strawberry.field
	def lovers(self, info: strawberry.Info) -> List["Character"]:
		return [Character.from_record(c) for c in facade_from_info(info).lovers(self.record)]

	@strawberry.field
	def house_record(self, info: strawberry.Info) -> Optional["House"]:
		"""The House record matching this character's house name."""
		house = facade_from_info(info).house_of(self.record)
		return House.from_record(house) if house is not None else None


@strawberry.type
class House:
	"""House type for GraphQL API."""

	id: strawberry.ID
	name: str
	words: Optional[str]
	region: List[str]
	allegiance: List[str]
	logo_url: Optional[str] = strawberry.field(name="logoURL")

	record: strawberry.Private[entities.House]

	@classmethod
	def from_record(cls, rec: entities.House) -> "House":
		return cls(
			id=strawberry.ID(rec.id),
			name=rec.name,
			words=rec.words,
			region=list(rec.region),
			allegiance=list(rec.allegiance),
			logo_url=rec.logoURL,
			record=rec,
		)

	@strawberry.field
	def image(self) -> Optional[str]:
		"""Alias of logoURL kept for older clients."""
		return self.logo_url

	@strawberry.field
	def allegiance_house_ids(self, info: strawberry.Info) -> List[strawberry.ID]:
		"""Identifiers of the houses this house is aligned with."""
		return [strawberry.ID(i) for i in facade_from_info(info).allegiance_house_ids(self.record)]

	@strawberry.field
	def member_ids(self, info: strawberry.Info) -> List[strawberry.ID]:
		return [strawberry.ID(i) for i in facade_from_info(info).member_ids(self.record)]

	@strawberry.field
	def allegiances(self, info: strawberry.Info) -> List["House"]:
		return [House.from_record(h) for h in facade_from_info(info).allegiances(self.record)]

	@strawberry.field
	def members(self, info: strawberry.Info) -> List[Character]:
		return [Character.from_record(c) for c in facade_from_info(info).members(self.record)]
