"""Tests for pagination helpers."""

import pytest

from src.content.pagination import generate_page_numbers, generate_pagination_paths, paginate


class TestPaginate:
    def test_first_page(self):
        result = paginate(list(range(25)), 1, 10)
        assert result.data == list(range(10))
        assert result.total_pages == 3
        assert result.has_next and not result.has_prev

    def test_last_page(self):
        result = paginate(list(range(25)), 3, 10)
        assert result.data == [20, 21, 22, 23, 24]
        assert not result.has_next and result.has_prev

    def test_past_the_end(self):
        assert paginate(list(range(5)), 4, 10).data == []

    def test_empty(self):
        result = paginate([], 1, 10)
        assert result.total_pages == 0
        assert not result.has_next

    def test_invalid_per_page(self):
        with pytest.raises(ValueError):
            paginate([1, 2, 3], 1, 0)


class TestPaginationPaths:
    def test_paths_and_links(self):
        paths = generate_pagination_paths(list(range(25)), per_page=10)
        assert [p.page for p in paths] == [1, 2, 3]
        assert paths[0].links.next_url == "/posts/page/2"
        assert paths[0].links.prev_url is None
        assert paths[2].links.prev_url == "/posts/page/2"
        assert paths[2].items == [20, 21, 22, 23, 24]

    def test_custom_base_path(self):
        paths = generate_pagination_paths([1, 2, 3], per_page=2, base_path="/categories/ta/page/")
        assert paths[0].links.next_url == "/categories/ta/page/2"

    def test_no_items(self):
        assert generate_pagination_paths([], per_page=10) == []

    def test_invalid_per_page(self):
        with pytest.raises(ValueError):
            generate_pagination_paths([1], per_page=-1)


class TestPageNumbers:
    def test_few_pages(self):
        assert generate_page_numbers(2, 3) == [1, 2, 3]

    def test_start(self):
        assert generate_page_numbers(1, 10) == [1, 2, 3, 4, 5]

    def test_middle(self):
        assert generate_page_numbers(6, 10) == [4, 5, 6, 7, 8]

    def test_end(self):
        assert generate_page_numbers(10, 10) == [6, 7, 8, 9, 10]
