"""
Business logic for retrieving one of the caller's own orders.
"""

from typing import Any

from aws_lambda_powertools import Logger
from bson import ObjectId

from core.infrastructure.mongo.order_store import MongoOrderStore
from core.models.errors import NotFoundError
from core.utils.constants import ERROR_CODE_ORDER_NOT_FOUND

Document = dict[str, Any]

logger = Logger(UTC=True)


class GetMyOrderService:
    """Application service responsible for reading an owned order.

    Orders of other customers are reported as missing, never as forbidden,
    so order numbers of other customers cannot be probed.
    """

    def __init__(self) -> None:
        self.orders = MongoOrderStore()

    def get_order(self, order_number: int, *, customer_id: ObjectId) -> Document:
        """Return the order if ``customer_id`` placed it.

        Raises:
            NotFoundError: If the order does not exist or belongs to someone else
        """
        order = self.orders.fetch_by_number(order_number=order_number)
        details = {"order_number": order_number, "customer_id": str(customer_id)}

        if order is None or self._owner_id(order) != customer_id:
            logger.warning("Order not found for customer", extra=details)
            raise NotFoundError(
                message="Order not found",
                error_code=ERROR_CODE_ORDER_NOT_FOUND,
                details={"order_number": order_number},
            )

        return order

    @staticmethod
    def _owner_id(order: Document) -> ObjectId | None:
        customer = order.get("customer")
        if isinstance(customer, dict):
            return customer.get("_id")
        return customer
