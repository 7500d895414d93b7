"""Shared filter builder for the findings API routes.

Turns query-string parameters into a ``RecordFilters`` value; used by
findings.py and download.py so the list and the export always apply the
same filters.
"""

import re

from findings.models import RecordFilters

ISO_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
_ISO_DATE = re.compile(ISO_DATE_PATTERN)


def validate_iso_date(value: str | None, name: str = "date") -> str | None:
    """Return *value* unchanged if it is a YYYY-MM-DD string (or empty).

    Raises:
        ValueError: If the value is not zero-padded and year-first.
    """
    if value is None or not value.strip():
        return None
    value = value.strip()
    if not _ISO_DATE.match(value):
        raise ValueError(f"{name} must be an ISO date (YYYY-MM-DD), got '{value}'")
    return value


def build_record_filters(
    date_from: str | None = None,
    date_to: str | None = None,
    user: str | None = None,
) -> RecordFilters:
    """Build a RecordFilters value from query parameters.

    Args:
        date_from: Inclusive lower date bound (YYYY-MM-DD).
        date_to: Inclusive upper date bound (YYYY-MM-DD).
        user: Exact reporting user.

    Returns:
        RecordFilters; blank parameters leave their dimension unset.
    """
    return RecordFilters(
        date_from=validate_iso_date(date_from, "date_from"),
        date_to=validate_iso_date(date_to, "date_to"),
        user=user,
    )


def describe_filters(filters: RecordFilters) -> str:
    """Human-readable summary, e.g. ``date_from=2024-01-01; user=KARLA``."""
    active: list[str] = []
    if filters.date_from:
        active.append(f"date_from={filters.date_from}")
    if filters.date_to:
        active.append(f"date_to={filters.date_to}")
    if filters.user:
        active.append(f"user={filters.user}")
    return "; ".join(active) if active else "none"
