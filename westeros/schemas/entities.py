"""Pydantic models for the Character and House records held by the entity store."""

from typing import Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from westeros.utils.text import clean_list, slugify, strip_value


class RelatedRef(BaseModel):
	"""Alias table entry pairing a display name with a resolvable slug."""
	model_config = ConfigDict(frozen=True)

	name: str
	slug: str

	@field_validator("name", "slug", mode="before")
	@classmethod
	def _clean(cls, v):
		return strip_value(v)


class Character(BaseModel):
	"""A character record. Relation fields hold names, never identifiers."""
	model_config = ConfigDict(frozen=True)

	id: str = Field(validation_alias=AliasChoices("_id", "id"))
	name: str
	slug: str = ""
	house: Optional[str] = None
	image: Optional[str] = None
	allegiances: Tuple[str, ...] = ()
	siblings: Tuple[str, ...] = ()
	spouse: Tuple[str, ...] = ()
	lovers: Tuple[str, ...] = ()
	related: Tuple[RelatedRef, ...] = ()

	@model_validator(mode="before")
	@classmethod
	def _derive_slug(cls, data):
		# Older dumps ship characters without a slug
		if isinstance(data, dict) and not data.get("slug") and data.get("name"):
			data = dict(data)
			data["slug"] = slugify(data["name"])
		return data

	@field_validator("id", mode="before")
	@classmethod
	def _stringify_id(cls, v):
		return str(v) if v is not None else v

	@field_validator("name", mode="before")
	@classmethod
	def _clean_name(cls, v):
		return strip_value(v)

	@field_validator("house", mode="before")
	@classmethod
	def _clean_house(cls, v):
		# "" means no house in most dumps
		v = strip_value(v)
		return v or None

	@field_validator("allegiances", "siblings", "spouse", "lovers", mode="before")
	@classmethod
	def _clean_names(cls, v):
		return tuple(clean_list(v))

	@field_validator("related", mode="before")
	@classmethod
	def _default_related(cls, v):
		return v if v is not None else ()


class House(BaseModel):
	"""A house record. `allegiance` holds house names."""
	model_config = ConfigDict(frozen=True)

	id: str = Field(validation_alias=AliasChoices("_id", "id"))
	name: str
	words: Optional[str] = None
	region: Tuple[str, ...] = ()
	allegiance: Tuple[str, ...] = ()
	logoURL: Optional[str] = None

	@field_validator("id", mode="before")
	@classmethod
	def _stringify_id(cls, v):
		return str(v) if v is not None else v

	@field_validator("name", mode="before")
	@classmethod
	def _clean_name(cls, v):
		return strip_value(v)

	@field_validator("region", "allegiance", mode="before")
	@classmethod
	def _clean_names(cls, v):
		return tuple(clean_list(v))
