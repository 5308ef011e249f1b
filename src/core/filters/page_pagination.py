"""
Page-number based pagination utilities.
"""

import math
from typing import Any, TypeVar

from core.models.pagination import PaginationInfo
from core.utils.constants import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE,
    MAX_PAGE_SIZE,
    MAX_SKIP,
)

T = TypeVar("T")


def _to_number(raw: Any) -> float:
    """Coerce a raw query value to a float, returning NaN when it is not numeric."""
    if isinstance(raw, bool) or raw is None:
        return math.nan

    if isinstance(raw, (int, float)):
        return float(raw)

    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return math.nan
        try:
            return float(text)
        except ValueError:
            return math.nan

    return math.nan


class PagePagination:
    """
    Page-number pagination helper.

    Raw ``page`` and ``limit`` values are never rejected. Anything that is
    not a finite number in range falls back to a safe default, and the page
    size is capped at MAX_PAGE_SIZE so no request can ask for an unbounded
    result set.

    Typical usage:
    1. Normalize raw page and limit parameters
    2. Compute the skip for the store, or slice an in-memory list
    3. Build the pagination envelope from the total count
    """

    @staticmethod
    def normalize_page(raw: Any) -> int:
        """
        Normalize a raw page number.

        Example:
            normalize_page("2.7") → 2
            normalize_page("-3")  → 1
            normalize_page("abc") → 1
            normalize_page("1e19") → MAX_PAGE
        """
        number = _to_number(raw)
        if not math.isfinite(number) or number < 1:
            return DEFAULT_PAGE
        return min(math.floor(number), MAX_PAGE)

    @staticmethod
    def normalize_limit(raw: Any) -> int:
        """
        Normalize a raw page size into [1, MAX_PAGE_SIZE].

        Example:
            normalize_limit("500") → 10
            normalize_limit("0")   → 10
            normalize_limit("3.9") → 3
        """
        number = _to_number(raw)
        if not math.isfinite(number) or number < 1:
            return DEFAULT_PAGE_SIZE
        if number > MAX_PAGE_SIZE:
            return MAX_PAGE_SIZE
        return math.floor(number)

    @staticmethod
    def skip(page: int, page_size: int) -> int:
        """Number of items preceding ``page``, capped at MAX_SKIP."""
        return min((page - 1) * page_size, MAX_SKIP)

    @staticmethod
    def total_pages(total: int, page_size: int) -> int:
        """Pages needed for ``total`` items; 0 when there are none."""
        if total <= 0 or page_size <= 0:
            return 0
        return math.ceil(total / page_size)

    @staticmethod
    def paginate(
        items: list[T],
        page: int = DEFAULT_PAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> tuple[list[T], int]:
        """
        Paginate an already materialized list.

        Returns:
            A tuple containing:
            - page_items: items of the requested page
            - total_count: number of items before pagination

        Example:
            items = [1, 2, 3, 4, 5]
            page = 2
            page_size = 2

            → ([3, 4], 5)
        """
        start = PagePagination.skip(page, page_size)
        return items[start : start + page_size], len(items)

    @staticmethod
    def get_page_info(
        page: int,
        page_size: int,
        total_count: int,
    ) -> PaginationInfo:
        """
        Build the pagination block of a listing response.

        Notes:
            - Page numbering starts at 1
            - total_pages is rounded up
        """
        return PaginationInfo(
            total=total_count,
            total_pages=PagePagination.total_pages(total_count, page_size),
            current_page=page,
            page_size=page_size,
        )
