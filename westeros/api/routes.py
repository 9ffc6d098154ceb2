"""Plain HTTP routes for the Westeros Graph API."""

from fastapi import APIRouter, Depends

from westeros.query.facade import QueryFacade
from .dependencies import get_facade

router = APIRouter(tags=["meta"])


@router.get("/health")
def health_check(facade: QueryFacade = Depends(get_facade)) -> dict:
	"""Liveness check used by monitors and CI, with the loaded record counts."""
	return {"status": "ok", **facade.store.counts()}
