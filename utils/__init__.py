"""Shared utilities for the KITTEO findings tool."""

# Configuration
from utils.config import (
    AppConfig,
    Config,
    Enumerations,
    KnownValues,
    load_enumerations,
)

# Output formatting
from utils.formatting import format_percent, percentage_of_total

# Pagination
from utils.pagination import DEFAULT_PAGE_SIZE, Page, count_pages, paginate

# Query-string filters
from utils.query import build_record_filters, describe_filters, validate_iso_date

__all__ = [
    # Config
    "AppConfig",
    "Config",
    "Enumerations",
    "KnownValues",
    "load_enumerations",
    # Formatting
    "format_percent",
    "percentage_of_total",
    # Pagination
    "DEFAULT_PAGE_SIZE",
    "Page",
    "count_pages",
    "paginate",
    # Query
    "build_record_filters",
    "describe_filters",
    "validate_iso_date",
]
