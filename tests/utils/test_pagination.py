"""
Tests for the page selector window and page math.
"""

import pytest

from dashboard.utils.pagination import (
    ELLIPSIS,
    count_pages,
    generate_pagination,
    page_offset,
)


class TestGeneratePagination:
    """Test page-number tokens for the page selector."""

    def test_no_pages(self):
        assert generate_pagination(1, 0) == []

    def test_single_page(self):
        assert generate_pagination(1, 1) == [1]

    @pytest.mark.parametrize("total_pages", [2, 5, 7])
    def test_shows_every_page_up_to_seven(self, total_pages):
        result = generate_pagination(1, total_pages)

        assert result == list(range(1, total_pages + 1))
        assert len(result) == total_pages

    def test_near_start_shows_first_three_and_last_two(self):
        assert generate_pagination(3, 10) == [1, 2, 3, ELLIPSIS, 9, 10]

    @pytest.mark.parametrize("current_page", [1, 2, 3])
    def test_first_pages_have_six_tokens(self, current_page):
        assert len(generate_pagination(current_page, 10)) == 6

    def test_near_end_shows_first_two_and_last_three(self):
        assert generate_pagination(8, 10) == [1, 2, ELLIPSIS, 8, 9, 10]

    @pytest.mark.parametrize("current_page", [8, 9, 10])
    def test_last_pages_have_six_tokens(self, current_page):
        assert len(generate_pagination(current_page, 10)) == 6

    def test_middle_page_shows_neighbours(self):
        assert generate_pagination(5, 10) == [1, ELLIPSIS, 4, 5, 6, ELLIPSIS, 10]

    @pytest.mark.parametrize("current_page", [4, 5, 6, 7])
    def test_middle_pages_have_seven_tokens(self, current_page):
        assert len(generate_pagination(current_page, 10)) == 7

    def test_eight_pages_switches_to_windowing(self):
        assert generate_pagination(4, 8) == [1, ELLIPSIS, 3, 4, 5, ELLIPSIS, 8]

    def test_ellipsis_is_not_a_page_number(self):
        assert ELLIPSIS == "..."
        assert not isinstance(ELLIPSIS, int)


class TestPageMath:
    """Test offset and page count helpers (6 rows per page)."""

    @pytest.mark.parametrize("current_page, expected", [(1, 0), (2, 6), (3, 12)])
    def test_page_offset(self, current_page, expected):
        assert page_offset(current_page) == expected

    @pytest.mark.parametrize(
        "count, expected",
        [(0, 0), (1, 1), (3, 1), (6, 1), (7, 2), (10, 2), (12, 2), (15, 3), (18, 3)],
    )
    def test_count_pages(self, count, expected):
        assert count_pages(count) == expected
