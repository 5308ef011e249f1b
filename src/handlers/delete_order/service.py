"""
Business logic for deleting an order.
"""

from typing import Any

from aws_lambda_powertools import Logger
from bson import ObjectId

from core.infrastructure.mongo.customer_store import MongoCustomerStore
from core.infrastructure.mongo.order_store import MongoOrderStore
from core.models.errors import NotFoundError
from core.utils.constants import ERROR_CODE_ORDER_NOT_FOUND

Document = dict[str, Any]

logger = Logger(UTC=True)


class DeleteOrderService:
    """Application service responsible for deleting orders.

    This service orchestrates:
    - Removing the order document
    - Re-deriving the owning customer's order aggregates
    """

    def __init__(self) -> None:
        self.orders = MongoOrderStore()
        self.customers = MongoCustomerStore()

    def delete_order(self, order_id: ObjectId) -> Document:
        """Delete the order and return it expanded.

        Raises:
            NotFoundError: If the order does not exist
        """
        order = self.orders.delete(order_id=order_id)

        if order is None:
            logger.warning("Order not found for delete", extra={"order_id": str(order_id)})
            raise NotFoundError(
                message="Order not found",
                error_code=ERROR_CODE_ORDER_NOT_FOUND,
                details={"order_id": str(order_id)},
            )

        customer = order.get("customer")
        if isinstance(customer, dict):
            self.customers.refresh_order_stats(customer_id=customer["_id"])

        return order
