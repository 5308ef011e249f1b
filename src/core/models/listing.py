"""Shared query-parameter model for paginated listings.

Pagination and sort parameters never fail validation: bad values fall
back to safe defaults. Filter parameters (dates, numbers, search) are
rejected when malformed, on every listing alike.
"""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from core.filters.page_pagination import PagePagination
from core.filters.search import SearchTerm
from core.filters.sorting import SortSpec, normalize_sort_field, normalize_sort_order
from core.utils.constants import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT_FIELD,
    DEFAULT_SORT_ORDER,
)
from core.utils.time import end_of_day, parse_date_param
from core.utils.validators import parse_finite_number


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_date_from(value: Any) -> datetime | None:
    """Lower date bound; blank means absent."""
    if _is_blank(value):
        return None
    if not isinstance(value, str):
        raise ValueError("Invalid date parameter")
    return parse_date_param(value)


def parse_date_to(value: Any) -> datetime | None:
    """Upper date bound, moved to the end of its day; blank means absent."""
    parsed = parse_date_from(value)
    return end_of_day(parsed) if parsed is not None else None


def parse_number(value: Any) -> float | None:
    """Finite numeric bound; blank means absent."""
    if _is_blank(value):
        return None
    if not isinstance(value, (str, int, float)):
        raise ValueError("Invalid number parameter")
    return parse_finite_number(value)


class ListingRequest(BaseModel):
    """Query parameters common to every listing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    SORT_FIELDS: ClassVar[tuple[str, ...]] = (DEFAULT_SORT_FIELD,)

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_PAGE_SIZE
    sort_field: str = DEFAULT_SORT_FIELD
    sort_order: str = DEFAULT_SORT_ORDER
    search: str | None = None

    @field_validator("page", mode="before")
    @classmethod
    def normalize_page(cls, value: Any) -> int:
        return PagePagination.normalize_page(value)

    @field_validator("limit", mode="before")
    @classmethod
    def normalize_limit(cls, value: Any) -> int:
        return PagePagination.normalize_limit(value)

    @field_validator("sort_field", mode="before")
    @classmethod
    def whitelist_sort_field(cls, value: Any) -> str:
        return normalize_sort_field(value, cls.SORT_FIELDS)

    @field_validator("sort_order", mode="before")
    @classmethod
    def whitelist_sort_order(cls, value: Any) -> str:
        return normalize_sort_order(value)

    @field_validator("search", mode="before")
    @classmethod
    def validate_search(cls, value: Any) -> str | None:
        return SearchTerm.validate(value)

    @property
    def sort(self) -> SortSpec:
        return SortSpec(field=self.sort_field, order=self.sort_order)
