"""
Part catalog lookup.

Wraps the flat ``parts_data.json`` list (``[{"id": ..., "description": ...}]``)
and answers the picker's questions: which parts match a search string, which
page of them to show, and how to describe a part number on the records list.

Matching is a case-insensitive substring test against the id OR the
description.  Results keep the catalog's load order, so page contents only
depend on (catalog, query, page).
"""

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from findings.errors import CatalogLoadError
from findings.models import PartCatalogEntry
from utils.pagination import DEFAULT_PAGE_SIZE, Page, paginate

logger = logging.getLogger(__name__)


def load_catalog(path: Path) -> list[PartCatalogEntry]:
    """Read the part catalog from a JSON file.

    Args:
        path: Path to ``parts_data.json``.

    Returns:
        Entries in file order.

    Raises:
        CatalogLoadError: If the file is missing, is not valid JSON, or is not
            a list of ``{id, description}`` objects.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogLoadError(f"Could not read part catalog {path}: {exc}") from exc

    if not isinstance(data, list):
        raise CatalogLoadError(f"Part catalog {path} must be a JSON list")

    entries: list[PartCatalogEntry] = []
    for i, item in enumerate(data):
        if not isinstance(item, dict) or "id" not in item:
            raise CatalogLoadError(f"Part catalog {path}: entry {i} has no 'id'")
        entries.append(PartCatalogEntry(
            id=str(item["id"]),
            description=str(item.get("description") or ""),
        ))
    logger.info("Loaded %d catalog parts from %s", len(entries), path)
    return entries


class CatalogIndex:
    """Read-only search index over the part catalog."""

    def __init__(self, entries: Iterable[PartCatalogEntry] = ()) -> None:
        self._entries: list[PartCatalogEntry] = list(entries)
        # First occurrence wins when the catalog repeats an id.
        self._by_id: dict[str, PartCatalogEntry] = {}
        for entry in self._entries:
            self._by_id.setdefault(entry.id, entry)

    def __len__(self) -> int:
        return len(self._entries)

    def search(self, query: str | None = "") -> list[PartCatalogEntry]:
        """Return entries whose id or description contains *query*.

        An empty query matches every entry.
        """
        needle = (query or "").lower()
        if not needle:
            return list(self._entries)
        return [
            e for e in self._entries
            if needle in e.id.lower() or needle in e.description.lower()
        ]

    def page(
        self,
        query: str | None = "",
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> Page[PartCatalogEntry]:
        """Return one page of search results with match and page counts."""
        return paginate(self.search(query), page_size=page_size, page=page)

    def get(self, part_id: str | None) -> PartCatalogEntry | None:
        if not part_id:
            return None
        return self._by_id.get(part_id)

    def describe(self, part_id: str | None) -> str:
        """Return ``"<id> - <description>"``, or the bare id for orphans."""
        entry = self.get(part_id)
        if entry is None:
            return part_id or ""
        return f"{entry.id} - {entry.description}"
