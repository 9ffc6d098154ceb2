"""FastAPI application factory for the Westeros Graph API."""

import logging

from fastapi import FastAPI

from westeros.query.facade import QueryFacade
from .routes import router
from .schema import create_graphql_router

logger = logging.getLogger(__name__)


def create_app(facade: QueryFacade, graphiql: bool = True, max_audit_examples: int = 10) -> FastAPI:
	"""Build the app around an already-loaded QueryFacade.

	The reference audit runs once here so unresolved names in the source data
	show up in the startup log.
	"""
	app = FastAPI(title="Westeros Graph API", version="0.1.0")
	app.state.facade = facade

	app.include_router(router)
	app.include_router(create_graphql_router(facade, graphiql=graphiql))

	facade.audit(max_examples_per_kind=max_audit_examples).log_summary()

	counts = facade.store.counts()
	logger.info(f"🐉 API ready with {counts['characters']} characters and {counts['houses']} houses")
	return app
