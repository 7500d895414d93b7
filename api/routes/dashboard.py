"""Dashboard summary endpoint for the overview page."""

from fastapi import APIRouter, Depends, Query

from api.database import FindingStore, get_store
from api.deps import get_catalog
from api.models import CategoryRow, CombinationRow, ContributorRow, DashboardResponse
from findings.aggregation import summarize
from findings.catalog import CatalogIndex
from utils.formatting import format_percent, percentage_of_total

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/summary", response_model=DashboardResponse, summary="Dashboard summary statistics")
def dashboard_summary(
    part_number: str | None = Query(None, description="Scope every aggregation to one part number"),
    store: FindingStore = Depends(get_store),
    catalog: CatalogIndex = Depends(get_catalog),
) -> DashboardResponse:
    """Return aggregated statistics for the dashboard overview page.

    Includes:
    - Totals (finding count, summed quantity)
    - Finding type x part number combinations with their frequency band
    - Number of combinations per band
    - Finding type distribution with percentage of total
    - Top 10 kitteo users (UNASSIGNED for findings without one)

    Pass part_number to restrict all aggregations to that part.
    """
    summary = summarize(store.load_all(), part_number=part_number)
    category_total = sum(c.value for c in summary.categories)

    combinations = []
    for combo in summary.combinations:
        entry = catalog.get(combo.part_number)
        combinations.append(CombinationRow(
            finding_type=combo.finding_type,
            part_number=combo.part_number,
            part_description=entry.description if entry else None,
            part_label=catalog.describe(combo.part_number),
            count=combo.count,
            band=combo.band,
        ))

    categories = []
    for cat in summary.categories:
        pct = percentage_of_total(cat.value, category_total)
        categories.append(CategoryRow(
            name=cat.name, value=cat.value,
            pct_of_total=pct, pct_label=format_percent(pct),
        ))

    return DashboardResponse(
        part_number=(part_number or "").strip() or None,
        total_records=summary.total_records,
        total_quantity=summary.total_quantity,
        combinations=combinations,
        bands=summary.bands,
        categories=categories,
        top_contributors=[
            ContributorRow(name=c.name, count=c.count) for c in summary.contributors
        ],
    )
