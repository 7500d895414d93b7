"""
Findings package -- KITTEO finding records, catalog lookup and reporting.

Everything here is a pure function of (dataset, filter parameters) -> view.
Loading and storing records is left to the host (see ``api/database.py``).

Re-exports key entry points so callers can do::

    from findings import CatalogIndex, RecordFilters, apply_filters, summarize
"""

from findings.aggregation import (
    band_summary,
    category_distribution,
    combination_frequency,
    frequency_band,
    summarize,
    top_contributors,
)
from findings.catalog import CatalogIndex, load_catalog
from findings.errors import (
    CatalogLoadError,
    FindingsError,
    InsertError,
    LoadError,
    ValidationError,
)
from findings.export import CSV_HEADERS, export_filename, to_csv
from findings.filters import (
    apply_filters,
    filter_by_part_number,
    has_active_filters,
    page_records,
)
from findings.models import FindingRecord, PartCatalogEntry, RecordFilters

__all__ = [
    # Models
    "FindingRecord",
    "PartCatalogEntry",
    "RecordFilters",
    # Errors
    "FindingsError",
    "LoadError",
    "CatalogLoadError",
    "InsertError",
    "ValidationError",
    # Catalog
    "CatalogIndex",
    "load_catalog",
    # Filters
    "apply_filters",
    "filter_by_part_number",
    "has_active_filters",
    "page_records",
    # Aggregation
    "frequency_band",
    "combination_frequency",
    "band_summary",
    "category_distribution",
    "top_contributors",
    "summarize",
    # Export
    "CSV_HEADERS",
    "to_csv",
    "export_filename",
]
