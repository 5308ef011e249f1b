"""
Typed listing criteria and their translation into MongoDB filters.

Each criteria model has one optional field per supported predicate and is
built only from already validated request values. The builders below are
pure: they never touch the database and never copy raw request input into
the query document.
"""

from datetime import datetime
from typing import Any

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

from core.filters.search import SearchTerm

MongoFilter = dict[str, Any]


class NumberRange(BaseModel):
    """Inclusive numeric bounds; either side may be open."""

    model_config = ConfigDict(frozen=True)

    gte: float | None = None
    lte: float | None = None

    def to_condition(self) -> dict[str, float] | None:
        condition: dict[str, float] = {}
        if self.gte is not None:
            condition["$gte"] = self.gte
        if self.lte is not None:
            condition["$lte"] = self.lte
        return condition or None


class DateRange(BaseModel):
    """Inclusive datetime bounds; ``lte`` is expected to already be end-of-day."""

    model_config = ConfigDict(frozen=True)

    gte: datetime | None = None
    lte: datetime | None = None

    def to_condition(self) -> dict[str, datetime] | None:
        condition: dict[str, datetime] = {}
        if self.gte is not None:
            condition["$gte"] = self.gte
        if self.lte is not None:
            condition["$lte"] = self.lte
        return condition or None


class CustomerFilterCriteria(BaseModel):
    """Predicates supported by the customer listing."""

    model_config = ConfigDict(frozen=True)

    registration_date: DateRange = Field(default_factory=DateRange)
    last_order_date: DateRange = Field(default_factory=DateRange)
    total_amount: NumberRange = Field(default_factory=NumberRange)
    order_count: NumberRange = Field(default_factory=NumberRange)
    search: str | None = None


class OrderFilterCriteria(BaseModel):
    """Predicates supported by the order listing."""

    model_config = ConfigDict(frozen=True)

    status: str | tuple[str, ...] | None = None
    total_amount: NumberRange = Field(default_factory=NumberRange)
    order_date: DateRange = Field(default_factory=DateRange)
    search: str | None = None


def _add_range(filters: MongoFilter, field: str, bounds: NumberRange | DateRange) -> None:
    condition = bounds.to_condition()
    if condition:
        filters[field] = condition


def build_customer_filter(
    criteria: CustomerFilterCriteria,
    *,
    matching_order_ids: list[ObjectId] | None = None,
) -> MongoFilter:
    """Build the ``users`` collection filter for a customer listing.

    When the criteria carry a search term, ``matching_order_ids`` must hold
    the ids of orders whose delivery address matched it; customers match on
    their name or on their last order being one of those.
    """
    filters: MongoFilter = {}

    _add_range(filters, "createdAt", criteria.registration_date)
    _add_range(filters, "lastOrderDate", criteria.last_order_date)
    _add_range(filters, "totalAmount", criteria.total_amount)
    _add_range(filters, "orderCount", criteria.order_count)

    if criteria.search:
        filters["$or"] = [
            {"name": SearchTerm.pattern(criteria.search)},
            {"lastOrder": {"$in": list(matching_order_ids or [])}},
        ]

    return filters


def build_delivery_address_filter(search: str) -> MongoFilter:
    """Sub-query used to resolve orders whose delivery address matches ``search``."""
    return {"deliveryAddress": SearchTerm.pattern(search)}


def build_order_filter(criteria: OrderFilterCriteria) -> MongoFilter:
    """Build the base ``$match`` filter for an order listing.

    The search term is not part of this filter; it applies to joined
    product titles and is added by the aggregation pipeline.
    """
    filters: MongoFilter = {}

    if isinstance(criteria.status, str):
        filters["status"] = criteria.status
    elif criteria.status is not None:
        filters["status"] = {"$in": list(criteria.status)}

    _add_range(filters, "totalAmount", criteria.total_amount)
    _add_range(filters, "createdAt", criteria.order_date)

    return filters
