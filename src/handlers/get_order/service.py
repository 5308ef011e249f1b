"""
Business logic for retrieving an order by its number.
"""

from typing import Any

from aws_lambda_powertools import Logger

from core.infrastructure.mongo.order_store import MongoOrderStore
from core.models.errors import NotFoundError
from core.utils.constants import ERROR_CODE_ORDER_NOT_FOUND

Document = dict[str, Any]

logger = Logger(UTC=True)


class GetOrderService:
    """Application service responsible for reading one order."""

    def __init__(self) -> None:
        self.orders = MongoOrderStore()

    def get_order(self, order_number: int) -> Document:
        """Return the order with ``customer`` and ``products`` expanded.

        Raises:
            NotFoundError: If no order has this number
        """
        order = self.orders.fetch_by_number(order_number=order_number)

        if order is None:
            logger.warning("Order not found", extra={"order_number": order_number})
            raise NotFoundError(
                message="Order not found",
                error_code=ERROR_CODE_ORDER_NOT_FOUND,
                details={"order_number": order_number},
            )

        return order
