"""
Dinosaur Facts Backend — Dinosaur Route Handlers
=================================================

What:  Handles GET /api/dinosaurs (list) and GET /api/dinosaurs/{name} (search).
Why:   The only API surface of the service.
How:   Delegates to FactService and maps the FactQueryResult to a response.
Who:   Called by the static client and any HTTP consumer.

Response Contract:
    GET /api/dinosaurs          200 [records...]   | 500 {"error": ...}
    GET /api/dinosaurs/{name}   200 [matches...]   | 404 {"message": ...}
                                                   | 500 {"error": ...}

    Records are passed through exactly as the store returned them.
    Store error details are never included in a response body.
"""

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from dinofacts.dependencies import get_fact_service
from dinofacts.schemas.fact import DinosaurFact, NotFoundMessage, StoreErrorResponse
from dinofacts.services.fact_service import FactQueryResult, FactService

router = APIRouter(prefix="/api", tags=["Dinosaurs"])

LIST_ERROR_MESSAGE = "Error fetching dinosaurs"
SEARCH_ERROR_MESSAGE = "Error fetching dinosaur"
NOT_FOUND_MESSAGE = "Dinosaur not found"


def _records_response(result: FactQueryResult) -> JSONResponse:
    # jsonable_encoder handles datetime/Decimal/UUID column values
    return JSONResponse(status_code=200, content=jsonable_encoder(result.records))


def _store_error_response(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": message})


@router.get(
    "/dinosaurs",
    response_model=list[DinosaurFact],
    responses={
        200: {"description": "Every stored fact"},
        500: {"description": "Record store failure", "model": StoreErrorResponse},
    },
    summary="List all dinosaur facts",
    description="Returns every record of the facts table, unfiltered and unpaginated.",
)
@router.head("/dinosaurs", include_in_schema=False)
# An empty name segment lists everything; the static mount would otherwise
# claim the trailing-slash path before the router could redirect it
@router.api_route("/dinosaurs/", methods=["GET", "HEAD"], include_in_schema=False)
async def list_dinosaurs(service: FactService = Depends(get_fact_service)) -> JSONResponse:
    result = await service.list_all()
    if not result.ok:
        return _store_error_response(LIST_ERROR_MESSAGE)
    return _records_response(result)


# `:path` keeps a decoded "/" (sent as %2F) inside the name
@router.get(
    "/dinosaurs/{name:path}",
    response_model=list[DinosaurFact],
    responses={
        200: {"description": "Facts whose name contains the search text"},
        404: {"description": "No fact matched", "model": NotFoundMessage},
        500: {"description": "Record store failure", "model": StoreErrorResponse},
    },
    summary="Search dinosaur facts by name",
    description=(
        "Case-insensitive substring search on the `name` field. "
        "All matches are returned in one response."
    ),
)
@router.head("/dinosaurs/{name:path}", include_in_schema=False)
async def search_dinosaurs(
    name: str,
    service: FactService = Depends(get_fact_service),
) -> JSONResponse:
    """
    Search facts by name.

    A search that matches nothing is answered with 404 and a message body
    (no array). It is not logged as an error.
    """
    result = await service.search_by_name(name)
    if not result.ok:
        return _store_error_response(SEARCH_ERROR_MESSAGE)
    if result.is_empty:
        return JSONResponse(status_code=404, content={"message": NOT_FOUND_MESSAGE})
    return _records_response(result)
