"""
Business logic for the admin order listing.
"""

from typing import Any

from aws_lambda_powertools import Logger

from core.filters.criteria import OrderFilterCriteria
from core.filters.order_pipeline import OrderAggregationPipeline
from core.filters.page_pagination import PagePagination
from core.filters.sorting import SortSpec
from core.infrastructure.mongo.order_store import MongoOrderStore

Document = dict[str, Any]

logger = Logger(UTC=True)


class ListOrdersService:
    """Application service responsible for the admin order listing.

    Orders are joined to products and customers by the store's
    aggregation engine. The page and the total are two independent
    aggregations over the same joined rows.
    """

    def __init__(self) -> None:
        self.orders = MongoOrderStore()

    def list_orders(
        self,
        *,
        criteria: OrderFilterCriteria,
        sort: SortSpec,
        page: int,
        page_size: int,
    ) -> tuple[list[Document], int, int]:
        """List orders with filtering, search, sorting, and pagination.

        Returns:
            A tuple of (orders, total_count, total_pages)
        """
        pipeline = OrderAggregationPipeline(criteria)

        orders = self.orders.aggregate(
            pipeline=pipeline.page_pipeline(sort, page, page_size),
        )

        counted = self.orders.aggregate(pipeline=pipeline.count_pipeline())
        total = int(counted[0]["total"]) if counted else 0
        total_pages = PagePagination.total_pages(total, page_size)

        logger.info(
            "Orders listed successfully",
            extra={"count": len(orders), "total": total, "page": page},
        )

        return orders, total, total_pages
