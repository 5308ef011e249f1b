import math

import pytest

from core.filters.page_pagination import PagePagination
from core.utils.constants import MAX_PAGE, MAX_PAGE_SIZE, MAX_SKIP


class TestNormalizePage:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("2", 2),
            ("2.7", 2),
            (3, 3),
            ("0", 1),
            ("-3", 1),
            ("abc", 1),
            ("", 1),
            (None, 1),
            (True, 1),
            ("Infinity", 1),
            (math.nan, 1),
            (["2"], 1),
        ],
    )
    def test_normalize_page(self, raw, expected) -> None:
        assert PagePagination.normalize_page(raw) == expected

    @pytest.mark.parametrize("raw", ["1e19", 10**30, "99999999999999999999999"])
    def test_huge_page_is_capped(self, raw) -> None:
        page = PagePagination.normalize_page(raw)

        assert page == MAX_PAGE
        assert PagePagination.skip(page, MAX_PAGE_SIZE) <= MAX_SKIP


class TestNormalizeLimit:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("5", 5),
            ("3.9", 3),
            ("10", 10),
            ("500", 10),
            ("0", 10),
            ("-1", 10),
            ("abc", 10),
            (None, 10),
            ("-Infinity", 10),
        ],
    )
    def test_normalize_limit(self, raw, expected) -> None:
        assert PagePagination.normalize_limit(raw) == expected

    def test_limit_never_exceeds_maximum(self) -> None:
        assert PagePagination.normalize_limit(1e12) == 10


class TestPageArithmetic:
    def test_skip(self) -> None:
        assert PagePagination.skip(1, 10) == 0
        assert PagePagination.skip(3, 10) == 20

    def test_skip_is_capped(self) -> None:
        assert PagePagination.skip(10**20, 10) == MAX_SKIP

    @pytest.mark.parametrize(
        "total,size,expected",
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 10, 3)],
    )
    def test_total_pages(self, total, size, expected) -> None:
        assert PagePagination.total_pages(total, size) == expected

    def test_paginate_middle_page(self) -> None:
        items = list(range(1, 26))

        page_items, total = PagePagination.paginate(items, 2, 10)

        assert page_items == list(range(11, 21))
        assert total == 25

    def test_paginate_beyond_last_page_is_empty(self) -> None:
        page_items, total = PagePagination.paginate([1, 2, 3], 5, 10)

        assert page_items == []
        assert total == 3

    def test_get_page_info(self) -> None:
        info = PagePagination.get_page_info(2, 10, 25)

        assert info.model_dump(by_alias=True) == {
            "total": 25,
            "totalPages": 3,
            "currentPage": 2,
            "pageSize": 10,
        }
