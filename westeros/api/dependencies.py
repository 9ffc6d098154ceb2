"""Dependency wiring for FastAPI routes and GraphQL resolvers.

The QueryFacade is built once by `create_app` and stored on `app.state`;
routes and resolvers read it from there instead of from module globals.
"""

from fastapi import Request
import strawberry

from westeros.query.facade import QueryFacade


def get_facade(request: Request) -> QueryFacade:
	"""Return the QueryFacade attached to the running application."""
	return request.app.state.facade


def facade_from_info(info: strawberry.Info) -> QueryFacade:
	"""Return the QueryFacade carried in the GraphQL context."""
	return info.context["facade"]
