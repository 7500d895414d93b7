"""
Findings endpoints.

GET  /api/v1/findings  → filtered, paginated list (newest first)
POST /api/v1/findings  → validate and store a new finding

The list is recomputed from a fresh load of the whole record set on every
request.  Filters (date_from, date_to, user) combine with AND; clients reset
to page 1 whenever any of them changes.
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from api.database import FindingStore, get_store
from api.deps import get_catalog, get_enums, get_page_size
from api.models import ErrorResponse, FindingIn, FindingOut, FindingsPage
from findings.catalog import CatalogIndex
from findings.filters import page_records
from findings.models import FindingRecord
from findings.validation import validate_finding
from utils.config import Enumerations
from utils.query import build_record_filters

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/findings", tags=["findings"])


def finding_out(record: FindingRecord, catalog: CatalogIndex) -> FindingOut:
    """Convert a record, adding the catalog description when the part is known."""
    entry = catalog.get(record.part_number)
    return FindingOut(
        **record.to_dict(),
        part_description=entry.description if entry else None,
        part_label=catalog.describe(record.part_number),
    )


@router.get("", response_model=FindingsPage, summary="List findings")
def list_findings(
    date_from: str | None = Query(None, description="Inclusive start date (YYYY-MM-DD)"),
    date_to: str | None = Query(None, description="Inclusive end date (YYYY-MM-DD)"),
    user: str | None = Query(None, description="Exact reporting user"),
    page: int = Query(1, ge=1, description="1-based page number"),
    store: FindingStore = Depends(get_store),
    catalog: CatalogIndex = Depends(get_catalog),
    page_size: int = Depends(get_page_size),
) -> FindingsPage:
    """Return one page of findings matching every supplied filter."""
    filters = build_record_filters(date_from, date_to, user)
    view = page_records(store.load_all(), filters, page=page, page_size=page_size)
    return FindingsPage(
        total=view.total,
        filtered_total=view.filtered_total,
        has_active_filters=view.has_active_filters,
        empty_reason=view.empty_reason,
        page=view.page.page,
        page_size=view.page.page_size,
        page_count=view.page.page_count,
        items=[finding_out(r, catalog) for r in view.page.items],
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=FindingOut,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid fields"},
        502: {"model": ErrorResponse, "description": "The record store rejected the finding"},
    },
    summary="Register a new finding",
)
def create_finding(
    body: FindingIn,
    store: FindingStore = Depends(get_store),
    catalog: CatalogIndex = Depends(get_catalog),
    enums: Enumerations = Depends(get_enums),
) -> FindingOut:
    """Validate the finding, store it, and return the stored record.

    Nothing is sent to the store when validation fails.
    """
    fields = validate_finding(body.model_dump(), enums)
    if len(catalog) and catalog.get(fields.part_number) is None:
        logger.warning("Finding for order %s uses unknown part %s",
                       fields.order_number, fields.part_number)
    return finding_out(store.insert(fields), catalog)
