"""
Pydantic request/response models for the API.

Optional fields default to None so that records from earlier data revisions
(no required part number, no kitteo user) are still valid responses.
Field() descriptions and examples feed the OpenAPI docs.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


# ── Catalog models ────────────────────────────────────────────────────────────

class PartOut(BaseModel):
    """A part catalog entry."""
    id: str = Field(..., description="Catalog part number", examples=["P100"])
    description: str = Field(..., description="Part description", examples=["SHAFT STEEL R"])


class PartsPage(BaseModel):
    """Response body for GET /api/v1/parts."""
    query: str = Field("", description="The search string", examples=["shaft"])
    page: int = Field(..., description="1-based page number", examples=[1])
    page_size: int = Field(..., description="Items per page", examples=[100])
    match_count: int = Field(..., description="Parts matching the query", examples=[240])
    page_count: int = Field(..., description="ceil(match_count / page_size)", examples=[3])
    items: list[PartOut] = Field(..., description="Parts on this page")


# ── Finding models ────────────────────────────────────────────────────────────

class FindingIn(BaseModel):
    """Request body for POST /api/v1/findings.

    Every field is optional here so that missing values reach the findings
    validator, which reports all of them in one 400 response.
    """
    date: str | None = Field(None, description="ISO date YYYY-MM-DD", examples=["2024-03-05"])
    order_number: str | None = Field(None, description="Order number", examples=["ORD-4471"])
    finding_type: str | None = Field(None, description="One of the finding types", examples=["SHAFT EQUIVOCADO"])
    part_number: str | None = Field(None, description="Catalog part number", examples=["P100"])
    required_part_number: str | None = Field(None, description="Part that should have shipped", examples=["P101"])
    quantity: int | None = Field(1, description="Affected quantity (>= 1)", examples=[1])
    reporting_user: str | None = Field(None, description="User who logs the finding", examples=["KARLA"])
    kitteo_user: str | None = Field(None, description="Operator who did the rework (upper-cased)", examples=["LUIS"])


class FindingOut(BaseModel):
    """A stored finding record."""
    id: int | str = Field(..., description="Record id assigned by the store", examples=[17])
    date: str = Field(..., description="ISO date", examples=["2024-03-05"])
    area: str = Field(..., description="Deployment area", examples=["KITTEO"])
    order_number: str = Field(..., description="Order number", examples=["ORD-4471"])
    finding_type: str = Field(..., description="Finding category", examples=["SHAFT EQUIVOCADO"])
    part_number: str = Field(..., description="Catalog part number", examples=["P100"])
    part_description: str | None = Field(None, description="Catalog description, None for orphan part numbers")
    part_label: str = Field("", description="\"<id> - <description>\" for catalog parts, the bare id otherwise", examples=["P100 - SHAFT STEEL R"])
    required_part_number: str | None = Field(None, description="Part that should have shipped")
    quantity: int = Field(..., description="Affected quantity", examples=[1])
    reporting_user: str = Field(..., description="User who logged the finding", examples=["KARLA"])
    kitteo_user: str | None = Field(None, description="Operator who did the rework")
    created_at: str | None = Field(None, description="Store timestamp")


class FindingsPage(BaseModel):
    """Response body for GET /api/v1/findings."""
    total: int = Field(..., description="Records before filtering", examples=[812])
    filtered_total: int = Field(..., description="Records after filtering", examples=[40])
    has_active_filters: bool = Field(..., description="Any filter dimension set")
    empty_reason: str | None = Field(
        None,
        description="'filtered' when filters removed every record, 'empty' when there are no records",
    )
    page: int = Field(..., description="1-based page number", examples=[1])
    page_size: int = Field(..., description="Items per page", examples=[100])
    page_count: int = Field(..., description="Pages after filtering", examples=[1])
    items: list[FindingOut] = Field(..., description="Findings on this page, newest first")


# ── Dashboard models ──────────────────────────────────────────────────────────

class CombinationRow(BaseModel):
    """One (finding type, part number) group."""
    finding_type: str = Field(..., examples=["GRIP FALTANTE"])
    part_number: str = Field(..., examples=["P100"])
    part_description: str | None = Field(None, description="Catalog description when known")
    part_label: str = Field("", description="\"<id> - <description>\" for catalog parts, the bare id otherwise", examples=["P100 - GRIP MIDSIZE"])
    count: int = Field(..., examples=[4])
    band: str = Field(..., description="'1-2 times' | '2-5 times' | 'more than 5 times'", examples=["2-5 times"])


class CategoryRow(BaseModel):
    """One finding type and its share of all findings."""
    name: str = Field(..., examples=["SHAFT EQUIVOCADO"])
    value: int = Field(..., examples=[12])
    pct_of_total: float = Field(..., description="value / sum of values * 100", examples=[37.5])
    pct_label: str = Field(..., examples=["37.5%"])


class ContributorRow(BaseModel):
    """One kitteo user (or UNASSIGNED) and their finding count."""
    name: str = Field(..., examples=["LUIS"])
    count: int = Field(..., examples=[9])


class DashboardResponse(BaseModel):
    """Response body for GET /api/v1/dashboard/summary."""
    part_number: str | None = Field(None, description="Part number scope, if any")
    total_records: int = Field(..., examples=[32])
    total_quantity: int = Field(..., examples=[41])
    combinations: list[CombinationRow]
    bands: dict[str, int] = Field(..., description="Number of combination groups per band")
    categories: list[CategoryRow]
    top_contributors: list[ContributorRow]


# ── Error model ───────────────────────────────────────────────────────────────

class ErrorResponse(BaseModel):
    """Standard error response body."""
    error: str = Field(..., description="Short error category", examples=["Bad request"])
    detail: str | None = Field(None, description="Extended error detail")
    fields: list[str] | None = Field(None, description="Fields that failed validation")
    status_code: int = Field(..., ge=400, le=599, description="HTTP status code", examples=[400])
