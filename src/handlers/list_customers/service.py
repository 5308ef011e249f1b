"""
Business logic for the admin customer listing.
"""

from typing import Any

from aws_lambda_powertools import Logger

from core.filters.criteria import (
    CustomerFilterCriteria,
    build_customer_filter,
    build_delivery_address_filter,
)
from core.filters.page_pagination import PagePagination
from core.filters.sorting import SortSpec
from core.infrastructure.mongo.customer_store import MongoCustomerStore
from core.infrastructure.mongo.order_store import MongoOrderStore

Document = dict[str, Any]

logger = Logger(UTC=True)


class ListCustomersService:
    """Application service responsible for listing customers.

    This service coordinates:
    - Resolving orders whose delivery address matches the search
    - Building the customer filter from typed criteria
    - Fetching one page and, separately, the total count
    """

    def __init__(self) -> None:
        self.customers = MongoCustomerStore()
        self.orders = MongoOrderStore()

    def list_customers(
        self,
        *,
        criteria: CustomerFilterCriteria,
        sort: SortSpec,
        page: int,
        page_size: int,
    ) -> tuple[list[Document], int, int]:
        """List customers with filtering, sorting, and pagination.

        Returns:
            A tuple of (customers, total_count, total_pages)
        """
        matching_order_ids = None
        if criteria.search:
            # Step 1: Orders whose delivery address matches the search
            matching_order_ids = self.orders.ids_matching(
                filters=build_delivery_address_filter(criteria.search),
            )

        # Step 2: Customer filter from the typed criteria
        filters = build_customer_filter(criteria, matching_order_ids=matching_order_ids)

        # Step 3: Page of customers, then the count as its own query
        customers = self.customers.find_page(
            filters=filters,
            sort=sort.to_cursor_sort(),
            skip=PagePagination.skip(page, page_size),
            limit=page_size,
        )
        total = self.customers.count(filters=filters)
        total_pages = PagePagination.total_pages(total, page_size)

        logger.info(
            "Customers listed successfully",
            extra={"count": len(customers), "total": total, "page": page},
        )

        return customers, total, total_pages
