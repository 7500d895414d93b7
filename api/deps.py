"""
Request-scoped access to the state loaded once at startup.

create_app() puts the part catalog, the enumeration table and the page size
on ``app.state``; routes reach them through these dependencies so tests can
swap them by building a new app.
"""

from fastapi import Request

from findings.catalog import CatalogIndex
from utils.config import Enumerations
from utils.pagination import DEFAULT_PAGE_SIZE


def get_catalog(request: Request) -> CatalogIndex:
    """Return the app's part catalog (empty when it failed to load)."""
    return getattr(request.app.state, "catalog", None) or CatalogIndex()


def get_enums(request: Request) -> Enumerations:
    return getattr(request.app.state, "enums", None) or Enumerations()


def get_page_size(request: Request) -> int:
    return getattr(request.app.state, "page_size", DEFAULT_PAGE_SIZE)
