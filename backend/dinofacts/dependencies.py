"""
Dinosaur Facts Backend — Request Dependencies
==============================================

What:  FastAPI dependencies handing the startup-built store and service to
       route handlers.
Why:   The store is constructed once in the lifespan and stored on
       `app.state`; handlers receive it by injection instead of importing a
       module-level global. Tests swap it with `app.dependency_overrides`.

Example usage in a route:
    @router.get("/dinosaurs")
    async def list_dinosaurs(service: FactService = Depends(get_fact_service)):
        result = await service.list_all()
"""

from typing import Optional

from fastapi import Request

from dinofacts.exceptions import StoreError
from dinofacts.services.fact_service import FactService
from dinofacts.services.store_base import RecordStore


def get_record_store(request: Request) -> Optional[RecordStore]:
    """The shared record store, or None when DATABASE_URL was not configured."""
    return getattr(request.app.state, "record_store", None)


def get_fact_service(request: Request) -> FactService:
    """
    The shared FactService.

    Raises:
        StoreError: When startup could not build a store. The global
            handler answers 500 with a generic body.
    """
    service = getattr(request.app.state, "fact_service", None)
    if service is None:
        raise StoreError(message="Record store is not configured (DATABASE_URL missing)")
    return service
