"""
Order filtering for the current customer's order history.

Provides a coordination layer that applies search and pagination to an
already materialized list of a customer's orders. This service does not
perform data access; product ids matching the search are resolved by the
caller and passed in.
"""

from typing import Any

from aws_lambda_powertools import Logger
from bson import ObjectId

from core.filters.page_pagination import PagePagination
from core.filters.search import SearchTerm

OrderItem = dict[str, Any]
logger = Logger(UTC=True)


def _product_id(product: Any) -> Any:
    if isinstance(product, dict):
        return product.get("_id")
    return product


class InMemoryOrderFilter:
    """
    Service responsible for filtering and paginating one customer's orders.

    An order matches a search when its order number equals the numeric
    value of the term, or when any of its products is among the products
    whose title matched the term.

    IMPORTANT:
    - The total is the length of the filtered list, so unlike the admin
      listing there is no separate count round-trip.
    """

    def __init__(self) -> None:
        self._pagination: PagePagination = PagePagination()

    def filter_by_search(
        self,
        orders: list[OrderItem],
        *,
        search: str | None,
        matching_product_ids: list[ObjectId],
    ) -> list[OrderItem]:
        """
        Keep orders that match ``search`` by number or by product title.

        Args:
            orders: Orders with ``products`` expanded or as ids
            search: Validated search term
            matching_product_ids: Ids of products whose title matched

        Returns:
            Filtered list of orders, in their original order
        """
        if not search:
            return orders

        number = SearchTerm.as_number(search)
        product_ids = set(matching_product_ids)

        def matches(order: OrderItem) -> bool:
            if number is not None and order.get("orderNumber") == number:
                return True
            return any(
                _product_id(product) in product_ids
                for product in order.get("products") or []
            )

        result = [order for order in orders if matches(order)]
        logger.debug(
            "Filtered customer orders",
            extra={"search": search, "before": len(orders), "after": len(result)},
        )
        return result

    def paginate(
        self,
        orders: list[OrderItem],
        *,
        page: int,
        page_size: int,
    ) -> tuple[list[OrderItem], int]:
        """
        Slice one page out of the filtered orders.

        Returns:
            A tuple of (page_items, total_count)
        """
        return self._pagination.paginate(orders, page, page_size)
