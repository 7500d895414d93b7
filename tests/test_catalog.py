"""
Tests for findings/catalog.py: part search, paging and catalog loading.
"""
import json

import pytest

from findings.catalog import CatalogIndex, load_catalog
from findings.errors import CatalogLoadError, LoadError
from findings.models import PartCatalogEntry


def _many(n: int) -> CatalogIndex:
    return CatalogIndex(
        PartCatalogEntry(id=f"P{i:04d}", description=f"part number {i}")
        for i in range(n)
    )


class TestSearch:
    def test_empty_query_matches_everything(self, catalog):
        assert len(catalog.search("")) == 4
        assert len(catalog.search(None)) == 4

    def test_matches_id(self, catalog):
        ids = [p.id for p in catalog.search("P100")]
        assert ids == ["P100", "H-P100X"]

    def test_matches_description(self, catalog):
        assert [p.id for p in catalog.search("steel")] == ["P100"]

    def test_id_or_description_not_and(self):
        index = CatalogIndex([PartCatalogEntry(id="P100", description="shaft steel")])
        assert len(index.search("P100")) == 1
        assert len(index.search("steel")) == 1

    def test_case_insensitive(self, catalog):
        assert [p.id for p in catalog.search("GRIP")] == ["P200"]
        assert [p.id for p in catalog.search("p200")] == ["P200"]

    def test_no_match(self, catalog):
        assert catalog.search("zzz") == []

    def test_preserves_load_order(self):
        index = CatalogIndex([
            PartCatalogEntry(id="Z9", description="shaft"),
            PartCatalogEntry(id="A1", description="shaft"),
            PartCatalogEntry(id="M5", description="shaft"),
        ])
        assert [p.id for p in index.search("shaft")] == ["Z9", "A1", "M5"]


class TestPage:
    def test_first_page(self):
        page = _many(250).page("", page=1)
        assert len(page.items) == 100
        assert page.match_count == 250
        assert page.page_count == 3

    def test_last_page_partial(self):
        page = _many(250).page("", page=3)
        assert len(page.items) == 50
        assert page.items[0].id == "P0200"

    def test_beyond_range_is_empty(self):
        page = _many(250).page("", page=4)
        assert page.items == []
        assert page.match_count == 250

    def test_query_narrows_counts(self):
        page = _many(250).page("part number 1", page=1)
        # 1, 10-19, 100-199
        assert page.match_count == 111
        assert page.page_count == 2

    def test_no_matches_has_zero_pages(self, catalog):
        page = catalog.page("zzz")
        assert page.match_count == 0
        assert page.page_count == 0
        assert page.items == []

    def test_custom_page_size(self, catalog):
        page = catalog.page("", page=2, page_size=3)
        assert [p.id for p in page.items] == ["H-P100X"]
        assert page.page_count == 2


class TestLookup:
    def test_get_known(self, catalog):
        assert catalog.get("P200").description == "grip midsize black"

    def test_get_orphan(self, catalog):
        assert catalog.get("P999") is None
        assert catalog.get(None) is None

    def test_describe_known(self, catalog):
        assert catalog.describe("P100") == "P100 - shaft steel regular"

    def test_describe_orphan_returns_bare_id(self, catalog):
        assert catalog.describe("P999") == "P999"

    def test_empty_index(self):
        index = CatalogIndex()
        assert len(index) == 0
        assert index.search("x") == []
        assert index.page("").page_count == 0


class TestLoadCatalog:
    def test_loads_file(self, catalog_file):
        entries = load_catalog(catalog_file)
        assert [e.id for e in entries] == ["P100", "P200", "P300", "H-P100X"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogLoadError):
            load_catalog(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "parts_data.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogLoadError):
            load_catalog(path)

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "parts_data.json"
        path.write_text(json.dumps({"id": "P1"}), encoding="utf-8")
        with pytest.raises(CatalogLoadError):
            load_catalog(path)

    def test_entry_without_id(self, tmp_path):
        path = tmp_path / "parts_data.json"
        path.write_text(json.dumps([{"description": "x"}]), encoding="utf-8")
        with pytest.raises(CatalogLoadError):
            load_catalog(path)

    def test_missing_description_defaults_to_empty(self, tmp_path):
        path = tmp_path / "parts_data.json"
        path.write_text(json.dumps([{"id": 123}]), encoding="utf-8")
        entries = load_catalog(path)
        assert entries == [PartCatalogEntry(id="123", description="")]

    def test_catalog_load_error_is_a_load_error(self):
        assert issubclass(CatalogLoadError, LoadError)
