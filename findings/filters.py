"""
Record filtering for the findings list, the export and the dashboard.

Three independent, optional dimensions (date from, date to, reporting user)
combine with AND.  Date bounds are inclusive and compared as ISO strings,
which is only valid because the encoding is zero-padded and year-first.
Filtering never reorders: the store already returns newest-first.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from findings.models import FindingRecord, RecordFilters
from utils.pagination import DEFAULT_PAGE_SIZE, Page, paginate

EMPTY_FILTERED = "filtered"
EMPTY_DATASET = "empty"


def _matches(record: FindingRecord, filters: RecordFilters) -> bool:
    if filters.date_from and record.date < filters.date_from:
        return False
    if filters.date_to and record.date > filters.date_to:
        return False
    if filters.user and record.reporting_user != filters.user:
        return False
    return True


def apply_filters(
    records: Iterable[FindingRecord],
    filters: RecordFilters | None = None,
) -> list[FindingRecord]:
    """Return the records that satisfy every supplied filter, in input order."""
    if filters is None or not filters.is_active:
        return list(records)
    return [r for r in records if _matches(r, filters)]


def has_active_filters(filters: RecordFilters | None) -> bool:
    return filters is not None and filters.is_active


def filter_by_part_number(
    records: Iterable[FindingRecord],
    part_number: str | None,
) -> list[FindingRecord]:
    """Scope records to one part number (exact match); blank is a no-op."""
    part_number = (part_number or "").strip()
    if not part_number:
        return list(records)
    return [r for r in records if r.part_number == part_number]


@dataclass(frozen=True)
class FilteredView:
    """A page of filtered records plus the counts the records list shows."""

    page: Page[FindingRecord]
    total: int
    filtered_total: int
    has_active_filters: bool

    @property
    def empty_reason(self) -> str | None:
        """Why the view is empty: active filters, an empty dataset, or not empty."""
        if self.filtered_total:
            return None
        if self.has_active_filters and self.total:
            return EMPTY_FILTERED
        return EMPTY_DATASET


def page_records(
    records: Sequence[FindingRecord],
    filters: RecordFilters | None = None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> FilteredView:
    """Filter *records* then slice out page number *page*."""
    filtered = apply_filters(records, filters)
    return FilteredView(
        page=paginate(filtered, page_size=page_size, page=page),
        total=len(records),
        filtered_total=len(filtered),
        has_active_filters=has_active_filters(filters),
    )
