"""
Business logic for updating a customer.
"""

from typing import Any

from aws_lambda_powertools import Logger
from bson import ObjectId

from core.infrastructure.mongo.customer_store import MongoCustomerStore
from core.models.errors import NotFoundError
from core.utils.constants import ERROR_CODE_CUSTOMER_NOT_FOUND

Document = dict[str, Any]

logger = Logger(UTC=True)


class UpdateCustomerService:
    """Application service responsible for customer updates."""

    def __init__(self) -> None:
        self.customers = MongoCustomerStore()

    def update_customer(self, customer_id: ObjectId, *, changes: dict[str, Any]) -> Document:
        """Apply ``changes`` and return the updated, expanded customer.

        Raises:
            NotFoundError: If the customer does not exist
        """
        customer = self.customers.update(customer_id=customer_id, fields=changes)

        if customer is None:
            logger.warning("Customer not found for update", extra={"customer_id": str(customer_id)})
            raise NotFoundError(
                message="Customer not found",
                error_code=ERROR_CODE_CUSTOMER_NOT_FOUND,
                details={"customer_id": str(customer_id)},
            )

        return customer
