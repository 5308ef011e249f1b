"""
Business logic for placing orders.

Every check runs before anything is written, so a rejected order leaves
no trace: no order document, no consumed order number.
"""

from typing import Any

from aws_lambda_powertools import Logger
from bson import ObjectId

from core.infrastructure.mongo.customer_store import MongoCustomerStore
from core.infrastructure.mongo.order_store import MongoOrderStore
from core.infrastructure.mongo.product_store import MongoProductStore
from core.models.errors import ValidationError
from core.utils.constants import (
    DEFAULT_ORDER_STATUS,
    ERROR_CODE_INVALID_ORDER_TOTAL,
    ERROR_CODE_PRODUCT_UNAVAILABLE,
)
from core.utils.time import utc_now

from .models import CreateOrderRequest

Document = dict[str, Any]

logger = Logger(UTC=True)


class CreateOrderService:
    """Application service responsible for placing orders.

    This service orchestrates:
    - Resolving each requested product and checking it is for sale
    - Checking the client's total against the catalog prices
    - Allocating the order number and inserting the order
    - Re-deriving the customer's order aggregates
    """

    def __init__(self) -> None:
        self.products = MongoProductStore()
        self.orders = MongoOrderStore()
        self.customers = MongoCustomerStore()

    @staticmethod
    def _product_not_found(item: str) -> ValidationError:
        return ValidationError(
            message=f"Product with id {item} not found",
            error_code=ERROR_CODE_PRODUCT_UNAVAILABLE,
            details={"product_id": item},
        )

    def price_basket(self, items: list[str]) -> tuple[list[ObjectId], float]:
        """Resolve the items and sum their prices.

        Returns:
            A tuple of (product_ids, basket_total), ids in request order

        Raises:
            ValidationError: If an item does not exist or is not for sale
        """
        for item in items:
            if not ObjectId.is_valid(item):
                raise self._product_not_found(item)

        product_ids = [ObjectId(item) for item in items]
        catalog = {
            product["_id"]: product
            for product in self.products.fetch_by_ids(product_ids=product_ids)
        }

        basket_total = 0.0
        for item, product_id in zip(items, product_ids):
            product = catalog.get(product_id)
            if product is None:
                raise self._product_not_found(item)

            price = product.get("price")
            if price is None:
                raise ValidationError(
                    message=f"Product with id {item} is not for sale",
                    error_code=ERROR_CODE_PRODUCT_UNAVAILABLE,
                    details={"product_id": item},
                )
            basket_total += price

        return product_ids, basket_total

    def create_order(self, *, customer_id: ObjectId, request: CreateOrderRequest) -> Document:
        """Validate and place an order for ``customer_id``.

        Returns:
            The created order with ``products`` and ``customer`` expanded

        Raises:
            ValidationError: If an item is unknown or not for sale, or the
                total does not match the catalog prices
        """
        logger.debug(
            "Placing order",
            extra={"customer_id": str(customer_id), "items": len(request.items)},
        )

        product_ids, basket_total = self.price_basket(request.items)

        # Prices are currency amounts; compare at cent precision.
        if round(basket_total, 2) != round(request.total, 2):
            logger.warning(
                "Order total mismatch",
                extra={"expected": basket_total, "received": request.total},
            )
            raise ValidationError(
                message="Invalid order total",
                error_code=ERROR_CODE_INVALID_ORDER_TOTAL,
                details={"total": request.total},
            )

        order = self.orders.create(
            order={
                "orderNumber": self.orders.next_order_number(),
                "status": DEFAULT_ORDER_STATUS,
                "totalAmount": request.total,
                "products": product_ids,
                "payment": request.payment,
                "phone": request.phone,
                "email": request.email,
                "comment": request.comment,
                "customer": customer_id,
                "deliveryAddress": request.address,
                "createdAt": utc_now(),
            }
        )

        self.customers.refresh_order_stats(customer_id=customer_id)

        logger.info(
            "Order placed successfully",
            extra={"customer_id": str(customer_id), "order_number": order["orderNumber"]},
        )

        return order
