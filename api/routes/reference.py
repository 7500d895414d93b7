"""
Reference data endpoints.

GET /api/v1/reference/finding-types  → the finding categories, in form order
GET /api/v1/reference/users          → the reporting users, in form order
GET /api/v1/reference/area           → the fixed area for this deployment
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.deps import get_enums
from utils.config import Enumerations

router = APIRouter(prefix="/reference", tags=["reference"])

_CACHE_HEADER = {"Cache-Control": "max-age=3600"}


@router.get("/finding-types", response_model=list[str], summary="List finding types")
def list_finding_types(enums: Enumerations = Depends(get_enums)) -> JSONResponse:
    """Return every finding type the capture form accepts."""
    return JSONResponse(content=list(enums.finding_types), headers=_CACHE_HEADER)


@router.get("/users", response_model=list[str], summary="List reporting users")
def list_users(enums: Enumerations = Depends(get_enums)) -> JSONResponse:
    """Return every user allowed to report findings."""
    return JSONResponse(content=list(enums.users), headers=_CACHE_HEADER)


@router.get("/area", summary="Deployment area")
def get_area(enums: Enumerations = Depends(get_enums)) -> JSONResponse:
    return JSONResponse(content={"area": enums.area}, headers=_CACHE_HEADER)
