"""
Pydantic models for the admin order listing request.
"""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import field_validator

from core.filters.criteria import DateRange, NumberRange, OrderFilterCriteria
from core.models.errors import ValidationError
from core.models.listing import ListingRequest, parse_date_from, parse_date_to, parse_number
from core.utils.constants import ERROR_CODE_INVALID_FILTER, ORDER_SORT_FIELDS


class ListOrdersRequest(ListingRequest):
    """
    Validation model for the admin order listing API.

    Supports:
    - Status as a single value (exact match) or a list (any of)
    - Total amount and order date ranges ("to" is end-of-day inclusive)
    - Search on product titles or the order number
    """

    SORT_FIELDS: ClassVar[tuple[str, ...]] = ORDER_SORT_FIELDS

    status: str | tuple[str, ...] | None = None
    total_amount_from: float | None = None
    total_amount_to: float | None = None
    order_date_from: datetime | None = None
    order_date_to: datetime | None = None

    @field_validator("status", mode="before")
    @classmethod
    def validate_status(cls, value: Any) -> str | tuple[str, ...] | None:
        """Accept a string or a list of strings; reject any other shape."""
        if value is None:
            return None

        if isinstance(value, str):
            return value.strip() or None

        if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
            return tuple(item.strip() for item in value if item.strip()) or None

        raise ValidationError(
            message="Invalid status parameter",
            error_code=ERROR_CODE_INVALID_FILTER,
            details={"status": "must be a string or a list of strings"},
        )

    @field_validator("order_date_from", mode="before")
    @classmethod
    def validate_date_from(cls, value: Any) -> datetime | None:
        return parse_date_from(value)

    @field_validator("order_date_to", mode="before")
    @classmethod
    def validate_date_to(cls, value: Any) -> datetime | None:
        return parse_date_to(value)

    @field_validator("total_amount_from", "total_amount_to", mode="before")
    @classmethod
    def validate_number(cls, value: Any) -> float | None:
        return parse_number(value)

    def to_criteria(self) -> OrderFilterCriteria:
        return OrderFilterCriteria(
            status=self.status,
            total_amount=NumberRange(gte=self.total_amount_from, lte=self.total_amount_to),
            order_date=DateRange(gte=self.order_date_from, lte=self.order_date_to),
            search=self.search,
        )
