"""
GraphQL schema definition using Strawberry
"""

import logging
from typing import Any, Dict, List, Optional

import strawberry
from fastapi import Request
from strawberry.fastapi import GraphQLRouter

from westeros.query.facade import QueryFacade
from .dependencies import facade_from_info
from .types import Character, House

logger = logging.getLogger(__name__)


@strawberry.type
class Query:
	"""Root GraphQL query type."""

	@strawberry.field
	def characters(self, info: strawberry.Info) -> List[Character]:
		"""All characters, in source order."""
		return [Character.from_record(c) for c in facade_from_info(info).list_characters()]

	@strawberry.field
	def character(self, info: strawberry.Info, name: str) -> Optional[Character]:
		"""Get a character by exact name."""
		rec = facade_from_info(info).get_character(name)
		return Character.from_record(rec) if rec is not None else None

	@strawberry.field
	def houses(self, info: strawberry.Info) -> List[House]:
		return [House.from_record(h) for h in facade_from_info(info).list_houses()]

	@strawberry.field
	def house(self, info: strawberry.Info, name: str) -> Optional[House]:
		"""Get a house by exact name."""
		rec = facade_from_info(info).get_house(name)
		return House.from_record(rec) if rec is not None else None


schema = strawberry.Schema(query=Query)


def create_graphql_router(facade: QueryFacade, graphiql: bool = True) -> GraphQLRouter:
	"""Create a GraphQL router bound to `facade`."""

	async def get_context(request: Request) -> Dict[str, Any]:
		return {
			"request": request,
			"facade": facade,
		}

	logger.debug(f"GraphQL router created (graphiql={graphiql})")
	return GraphQLRouter(
		schema,
		path="/graphql",
		graphql_ide="graphiql" if graphiql else None,
		context_getter=get_context,
	)
