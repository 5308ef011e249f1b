"""
Business logic for changing an order's status.
"""

from typing import Any

from aws_lambda_powertools import Logger

from core.infrastructure.mongo.order_store import MongoOrderStore
from core.models.errors import NotFoundError
from core.utils.constants import ERROR_CODE_ORDER_NOT_FOUND

Document = dict[str, Any]

logger = Logger(UTC=True)


class UpdateOrderService:
    """Application service responsible for order status changes."""

    def __init__(self) -> None:
        self.orders = MongoOrderStore()

    def update_status(self, order_number: int, *, status: str) -> Document:
        """Set the status and return the updated, expanded order.

        Raises:
            NotFoundError: If no order has this number
        """
        order = self.orders.update_status(order_number=order_number, status=status)

        if order is None:
            logger.warning("Order not found for update", extra={"order_number": order_number})
            raise NotFoundError(
                message="Order not found",
                error_code=ERROR_CODE_ORDER_NOT_FOUND,
                details={"order_number": order_number},
            )

        return order
