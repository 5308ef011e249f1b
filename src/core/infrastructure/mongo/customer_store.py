"""MongoDB-backed implementation of CustomerRepository."""

from typing import Any

from aws_lambda_powertools import Logger
from bson import ObjectId

from core.infrastructure.adapters.mongo_adapter import MongoAdapter
from core.infrastructure.mongo.errors import database_errors
from core.infrastructure.mongo.references import (
    CUSTOMER_PROJECTION,
    PRIVATE_CUSTOMER_FIELDS,
    ReferenceExpander,
)
from core.repositories.customer_repository import CustomerRepository
from core.utils.constants import (
    CUSTOMERS_COLLECTION,
    ERROR_CODE_COUNT_FAILED,
    ERROR_CODE_FETCH_FAILED,
    ERROR_CODE_LIST_FAILED,
    ERROR_CODE_WRITE_FAILED,
    ORDERS_COLLECTION,
)

Document = dict[str, Any]

logger = Logger(UTC=True)


class MongoCustomerStore(CustomerRepository):
    """Customer storage in the ``users`` collection.

    All pymongo errors are translated into storefront errors
    with stable semantics.
    """

    def __init__(self, adapter: MongoAdapter | None = None) -> None:
        self._db = adapter or MongoAdapter()
        self._references = ReferenceExpander(self._db)

    def find_page(
        self,
        *,
        filters: dict[str, Any],
        sort: list[tuple[str, int]],
        skip: int,
        limit: int,
    ) -> list[Document]:
        logger.debug(
            "Listing customers",
            extra={"sort": sort, "skip": skip, "limit": limit},
        )

        with database_errors("Unable to retrieve customers", error_code=ERROR_CODE_LIST_FAILED):
            customers = self._db.find(
                CUSTOMERS_COLLECTION,
                filters=filters,
                projection=CUSTOMER_PROJECTION,
                sort=sort,
                skip=skip,
                limit=limit,
            )
            return self._references.expand_customers(customers)

    def count(self, *, filters: dict[str, Any]) -> int:
        with database_errors("Unable to count customers", error_code=ERROR_CODE_COUNT_FAILED):
            return self._db.count(CUSTOMERS_COLLECTION, filters=filters)

    def fetch(self, *, customer_id: ObjectId) -> Document | None:
        details = {"customer_id": str(customer_id)}

        with database_errors(
            "Unable to retrieve customer",
            error_code=ERROR_CODE_FETCH_FAILED,
            details=details,
        ):
            customer = self._db.find_one(CUSTOMERS_COLLECTION, filters={"_id": customer_id})
            if customer is None:
                return None
            return self._references.expand_customers([self._public(customer)])[0]

    def fetch_order_ids(self, *, customer_id: ObjectId) -> list[ObjectId] | None:
        with database_errors(
            "Unable to retrieve customer",
            error_code=ERROR_CODE_FETCH_FAILED,
            details={"customer_id": str(customer_id)},
        ):
            customer = self._db.find_one(CUSTOMERS_COLLECTION, filters={"_id": customer_id})

        if customer is None:
            return None
        return list(customer.get("orders") or [])

    def update(self, *, customer_id: ObjectId, fields: dict[str, Any]) -> Document | None:
        details = {"customer_id": str(customer_id)}

        with database_errors(
            "Unable to update customer",
            error_code=ERROR_CODE_WRITE_FAILED,
            details=details,
        ):
            if fields:
                customer = self._db.find_one_and_update(
                    CUSTOMERS_COLLECTION,
                    filters={"_id": customer_id},
                    update={"$set": fields},
                )
            else:
                customer = self._db.find_one(CUSTOMERS_COLLECTION, filters={"_id": customer_id})

            if customer is None:
                return None

            logger.info("Customer updated", extra={**details, "fields": sorted(fields)})
            return self._references.expand_customers([self._public(customer)])[0]

    def delete(self, *, customer_id: ObjectId) -> Document | None:
        details = {"customer_id": str(customer_id)}

        with database_errors(
            "Unable to delete customer",
            error_code=ERROR_CODE_WRITE_FAILED,
            details=details,
        ):
            customer = self._db.find_one_and_delete(
                CUSTOMERS_COLLECTION,
                filters={"_id": customer_id},
            )
            if customer is None:
                return None

            logger.info("Customer deleted", extra=details)
            return self._public(customer)

    def refresh_order_stats(self, *, customer_id: ObjectId) -> None:
        """Recompute orderCount, totalAmount, orders and the last order."""
        details = {"customer_id": str(customer_id)}

        with database_errors(
            "Unable to update customer order statistics",
            error_code=ERROR_CODE_WRITE_FAILED,
            details=details,
        ):
            orders = self._db.find(
                ORDERS_COLLECTION,
                filters={"customer": customer_id},
                projection={"_id": 1, "totalAmount": 1, "createdAt": 1},
                sort=[("createdAt", 1), ("_id", 1)],
            )
            last = orders[-1] if orders else None

            self._db.update_one(
                CUSTOMERS_COLLECTION,
                filters={"_id": customer_id},
                update={
                    "$set": {
                        "orders": [order["_id"] for order in orders],
                        "orderCount": len(orders),
                        "totalAmount": sum(order.get("totalAmount", 0) for order in orders),
                        "lastOrder": last["_id"] if last else None,
                        "lastOrderDate": last.get("createdAt") if last else None,
                    }
                },
            )

        logger.debug("Customer order statistics refreshed", extra=details)

    @staticmethod
    def _public(customer: Document) -> Document:
        return {
            key: value for key, value in customer.items() if key not in PRIVATE_CUSTOMER_FIELDS
        }
