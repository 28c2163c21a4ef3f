"""
Load catalog routes.

- GET  /api/loads            every load, catalog order
- GET  /api/loads/{load_id}  one load by exact identifier
- POST /api/loads/search     AND-filter by origin, destination, equipment, rate range
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, status

from carrier_sales.api.dependencies import get_load_catalog
from carrier_sales.api.models import ErrorResponse, LoadListResponse, LoadResponse
from carrier_sales.loads.catalog import LoadCatalog
from carrier_sales.models.load import LoadSearchCriteria

router = APIRouter()


@router.get(
    "",
    response_model=LoadListResponse,
    status_code=status.HTTP_200_OK,
    summary="List all loads",
)
def list_loads(
    catalog: LoadCatalog = Depends(get_load_catalog),
) -> LoadListResponse:
    loads = catalog.get_all()
    return LoadListResponse(data=loads, count=len(loads))


@router.post(
    "/search",
    response_model=LoadListResponse,
    status_code=status.HTTP_200_OK,
    summary="Search loads",
    description="""
    Filter loads by any combination of criteria (all supplied criteria must match):

    - origin / destination: case-insensitive substring
    - equipment_type: case-insensitive exact match
    - min_rate / max_rate: inclusive bounds on loadboard_rate

    An empty body returns every load.
    """,
    responses={400: {"model": ErrorResponse, "description": "Malformed criteria"}},
)
def search_loads(
    criteria: Optional[LoadSearchCriteria] = Body(default=None),
    catalog: LoadCatalog = Depends(get_load_catalog),
) -> LoadListResponse:
    result = catalog.search(criteria)
    return LoadListResponse(data=result.data, count=result.count)


@router.get(
    "/{load_id}",
    response_model=LoadResponse,
    status_code=status.HTTP_200_OK,
    summary="Get load by identifier",
    responses={404: {"model": ErrorResponse, "description": "Load not found"}},
)
def get_load(
    load_id: str,
    catalog: LoadCatalog = Depends(get_load_catalog),
) -> LoadResponse:
    return LoadResponse(data=catalog.get_by_id(load_id))
