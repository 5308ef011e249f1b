"""
Pydantic models for the current customer's order history request.
"""

from core.models.listing import ListingRequest


class ListMyOrdersRequest(ListingRequest):
    """
    Validation model for the caller's own order listing.

    Only ``page``, ``limit`` and ``search`` are used. Orders keep the
    order of the customer's history, so sort parameters are ignored.
    """
