"""
Tests for utils/pagination.py
"""
import pytest

from utils.pagination import DEFAULT_PAGE_SIZE, Page, count_pages, paginate


class TestCountPages:
    @pytest.mark.parametrize("matches,size,expected", [
        (0, 100, 0),
        (1, 100, 1),
        (100, 100, 1),
        (101, 100, 2),
        (250, 100, 3),
        (7, 3, 3),
    ])
    def test_ceil(self, matches, size, expected):
        assert count_pages(matches, size) == expected

    def test_non_positive_size_raises(self):
        with pytest.raises(ValueError):
            count_pages(10, 0)


class TestPaginate:
    def test_first_page(self):
        page = paginate(list(range(250)))
        assert page.items == list(range(100))
        assert page.match_count == 250
        assert page.page_count == 3

    def test_last_partial_page(self):
        page = paginate(list(range(250)), page=3)
        assert page.items == list(range(200, 250))

    def test_out_of_range_is_empty(self):
        assert paginate(list(range(5)), page_size=2, page=4).items == []
        assert paginate(list(range(5)), page_size=2, page=0).items == []

    def test_empty_input(self):
        page = paginate([])
        assert page.items == []
        assert page.page_count == 0

    def test_default_page_size(self):
        assert paginate([1]).page_size == DEFAULT_PAGE_SIZE == 100

    def test_page_defaults(self):
        page = Page()
        assert page.items == []
        assert page.page_count == 0
