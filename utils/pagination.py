"""Fixed-page-size slicing shared by the catalog picker and the records list.

Pages are 1-based.  ``page_count`` is ``ceil(match_count / page_size)``, so an
empty sequence has zero pages, and asking for a page outside
``1..page_count`` returns an empty page rather than raising.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 100


@dataclass(frozen=True)
class Page(Generic[T]):
    """One slice of a larger sequence plus the numbers a pager needs."""

    items: list[T] = field(default_factory=list)
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    match_count: int = 0

    @property
    def page_count(self) -> int:
        return count_pages(self.match_count, self.page_size)


def count_pages(match_count: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """Return ``ceil(match_count / page_size)``."""
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return (match_count + page_size - 1) // page_size


def paginate(
    items: Sequence[T],
    page_size: int = DEFAULT_PAGE_SIZE,
    page: int = 1,
) -> Page[T]:
    """Slice *items* into page number *page* (1-based).

    Args:
        items: Already-filtered sequence, in display order.
        page_size: Items per page (default 100).
        page: Requested page number.

    Returns:
        Page whose ``items`` is empty when *page* is out of range.
    """
    total = len(items)
    if page < 1 or page > count_pages(total, page_size):
        return Page(items=[], page=page, page_size=page_size, match_count=total)
    start = (page - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        page=page,
        page_size=page_size,
        match_count=total,
    )
