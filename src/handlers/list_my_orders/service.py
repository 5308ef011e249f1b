"""
Business logic for the current customer's order history.

Unlike the admin listing, this path materializes the whole history of one
customer and searches and paginates it in application memory.
"""

from typing import Any

from aws_lambda_powertools import Logger
from bson import ObjectId

from core.filters.in_memory_order_filter import InMemoryOrderFilter
from core.filters.page_pagination import PagePagination
from core.infrastructure.mongo.customer_store import MongoCustomerStore
from core.infrastructure.mongo.order_store import MongoOrderStore
from core.infrastructure.mongo.product_store import MongoProductStore
from core.models.errors import NotFoundError
from core.utils.constants import ERROR_CODE_CUSTOMER_NOT_FOUND

Document = dict[str, Any]

logger = Logger(UTC=True)


class ListMyOrdersService:
    """Application service responsible for one customer's orders.

    This service coordinates:
    - Loading the customer's orders with products and customer expanded
    - Resolving products whose title matches the search
    - In-memory search filtering and page slicing
    """

    def __init__(self) -> None:
        self.customers = MongoCustomerStore()
        self.orders = MongoOrderStore()
        self.products = MongoProductStore()
        self.filters = InMemoryOrderFilter()

    def list_orders(
        self,
        *,
        customer_id: ObjectId,
        search: str | None,
        page: int,
        page_size: int,
    ) -> tuple[list[Document], int, int]:
        """List the customer's orders.

        Returns:
            A tuple of (orders, total_count, total_pages)

        Raises:
            NotFoundError: If the customer does not exist
        """
        order_ids = self.customers.fetch_order_ids(customer_id=customer_id)
        if order_ids is None:
            logger.warning("Customer not found", extra={"customer_id": str(customer_id)})
            raise NotFoundError(
                message="Customer not found",
                error_code=ERROR_CODE_CUSTOMER_NOT_FOUND,
                details={"customer_id": str(customer_id)},
            )

        orders = self.orders.fetch_by_ids(order_ids=order_ids)

        if search:
            orders = self.filters.filter_by_search(
                orders,
                search=search,
                matching_product_ids=self.products.ids_matching_title(search=search),
            )

        page_items, total = self.filters.paginate(orders, page=page, page_size=page_size)
        total_pages = PagePagination.total_pages(total, page_size)

        logger.info(
            "Customer orders listed successfully",
            extra={"customer_id": str(customer_id), "count": len(page_items), "total": total},
        )

        return page_items, total, total_pages
