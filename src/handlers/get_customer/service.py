"""
Business logic for retrieving a single customer.
"""

from typing import Any

from aws_lambda_powertools import Logger
from bson import ObjectId

from core.infrastructure.mongo.customer_store import MongoCustomerStore
from core.models.errors import NotFoundError
from core.utils.constants import ERROR_CODE_CUSTOMER_NOT_FOUND

Document = dict[str, Any]

logger = Logger(UTC=True)


class GetCustomerService:
    """Application service responsible for reading one customer."""

    def __init__(self) -> None:
        self.customers = MongoCustomerStore()

    def get_customer(self, customer_id: ObjectId) -> Document:
        """Return the customer with ``orders`` and ``lastOrder`` expanded.

        Raises:
            NotFoundError: If the customer does not exist
        """
        customer = self.customers.fetch(customer_id=customer_id)

        if customer is None:
            logger.warning("Customer not found", extra={"customer_id": str(customer_id)})
            raise NotFoundError(
                message="Customer not found",
                error_code=ERROR_CODE_CUSTOMER_NOT_FOUND,
                details={"customer_id": str(customer_id)},
            )

        return customer
