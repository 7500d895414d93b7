"""
GET /api/v1/parts endpoint.

Searches the part catalog by id or description (case-insensitive substring,
either field may match) and returns one page of results.  Clients reset to
page 1 whenever the query text changes; match_count and page_count are
returned so they can render the pager.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from api.deps import get_catalog, get_page_size
from api.models import PartOut, PartsPage
from findings.catalog import CatalogIndex

router = APIRouter(prefix="/parts", tags=["parts"])


@router.get("", response_model=PartsPage, summary="Search the part catalog")
def search_parts(
    q: str = Query("", description="Substring of the part id or description"),
    page: int = Query(1, ge=1, description="1-based page number"),
    catalog: CatalogIndex = Depends(get_catalog),
    page_size: int = Depends(get_page_size),
) -> PartsPage:
    """Return one page of catalog parts matching *q*, in catalog order."""
    result = catalog.page(q, page=page, page_size=page_size)
    return PartsPage(
        query=q,
        page=result.page,
        page_size=result.page_size,
        match_count=result.match_count,
        page_count=result.page_count,
        items=[PartOut(id=p.id, description=p.description) for p in result.items],
    )


@router.get("/{part_id}", response_model=PartOut, summary="Get one catalog part")
def get_part(
    part_id: str,
    catalog: CatalogIndex = Depends(get_catalog),
) -> PartOut:
    """Return a single catalog entry by part number."""
    entry = catalog.get(part_id)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"Part {part_id} not found")
    return PartOut(id=entry.id, description=entry.description)
