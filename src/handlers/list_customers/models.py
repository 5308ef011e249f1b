"""
Pydantic models for the customer listing request.
"""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import field_validator

from core.filters.criteria import CustomerFilterCriteria, DateRange, NumberRange
from core.models.listing import ListingRequest, parse_date_from, parse_date_to, parse_number
from core.utils.constants import CUSTOMER_SORT_FIELDS


class ListCustomersRequest(ListingRequest):
    """
    Validation model for the customer listing API.

    Supports:
    - Registration and last-order date ranges ("to" is end-of-day inclusive)
    - Total spend and order count ranges
    - Search on name or last order delivery address
    """

    SORT_FIELDS: ClassVar[tuple[str, ...]] = CUSTOMER_SORT_FIELDS

    registration_date_from: datetime | None = None
    registration_date_to: datetime | None = None
    last_order_date_from: datetime | None = None
    last_order_date_to: datetime | None = None
    total_amount_from: float | None = None
    total_amount_to: float | None = None
    order_count_from: float | None = None
    order_count_to: float | None = None

    @field_validator("registration_date_from", "last_order_date_from", mode="before")
    @classmethod
    def validate_date_from(cls, value: Any) -> datetime | None:
        return parse_date_from(value)

    @field_validator("registration_date_to", "last_order_date_to", mode="before")
    @classmethod
    def validate_date_to(cls, value: Any) -> datetime | None:
        return parse_date_to(value)

    @field_validator(
        "total_amount_from",
        "total_amount_to",
        "order_count_from",
        "order_count_to",
        mode="before",
    )
    @classmethod
    def validate_number(cls, value: Any) -> float | None:
        return parse_number(value)

    def to_criteria(self) -> CustomerFilterCriteria:
        return CustomerFilterCriteria(
            registration_date=DateRange(
                gte=self.registration_date_from,
                lte=self.registration_date_to,
            ),
            last_order_date=DateRange(
                gte=self.last_order_date_from,
                lte=self.last_order_date_to,
            ),
            total_amount=NumberRange(gte=self.total_amount_from, lte=self.total_amount_to),
            order_count=NumberRange(gte=self.order_count_from, lte=self.order_count_to),
            search=self.search,
        )
