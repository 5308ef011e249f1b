"""MongoDB-backed implementation of OrderRepository."""

from typing import Any

from aws_lambda_powertools import Logger
from bson import ObjectId

from core.infrastructure.adapters.mongo_adapter import MongoAdapter
from core.infrastructure.mongo.errors import database_errors
from core.infrastructure.mongo.references import ReferenceExpander
from core.repositories.order_repository import OrderRepository
from core.utils.constants import (
    COUNTERS_COLLECTION,
    ERROR_CODE_FETCH_FAILED,
    ERROR_CODE_LIST_FAILED,
    ERROR_CODE_WRITE_FAILED,
    ORDER_NUMBER_SEQUENCE,
    ORDERS_COLLECTION,
)

Document = dict[str, Any]

logger = Logger(UTC=True)


class MongoOrderStore(OrderRepository):
    """Order storage in the ``orders`` collection.

    Order numbers come from a counter document in ``counters`` that is
    incremented atomically, so concurrent creations never share a number.
    """

    def __init__(self, adapter: MongoAdapter | None = None) -> None:
        self._db = adapter or MongoAdapter()
        self._references = ReferenceExpander(self._db)

    def aggregate(self, *, pipeline: list[dict[str, Any]]) -> list[Document]:
        logger.debug("Running order aggregation", extra={"stages": len(pipeline)})

        with database_errors("Unable to retrieve orders", error_code=ERROR_CODE_LIST_FAILED):
            return self._db.aggregate(ORDERS_COLLECTION, pipeline=pipeline)

    def ids_matching(self, *, filters: dict[str, Any]) -> list[ObjectId]:
        with database_errors("Unable to retrieve orders", error_code=ERROR_CODE_LIST_FAILED):
            orders = self._db.find(ORDERS_COLLECTION, filters=filters, projection={"_id": 1})
        return [order["_id"] for order in orders]

    def fetch_by_number(self, *, order_number: int) -> Document | None:
        details = {"order_number": order_number}

        with database_errors(
            "Unable to retrieve order",
            error_code=ERROR_CODE_FETCH_FAILED,
            details=details,
        ):
            order = self._db.find_one(ORDERS_COLLECTION, filters={"orderNumber": order_number})
            if order is None:
                return None
            return self._references.expand_orders([order])[0]

    def fetch_by_ids(self, *, order_ids: list[ObjectId]) -> list[Document]:
        if not order_ids:
            return []

        with database_errors("Unable to retrieve orders", error_code=ERROR_CODE_FETCH_FAILED):
            found = {
                order["_id"]: order
                for order in self._db.find(
                    ORDERS_COLLECTION,
                    filters={"_id": {"$in": order_ids}},
                )
            }
            ordered = [found[order_id] for order_id in order_ids if order_id in found]
            return self._references.expand_orders(ordered)

    def next_order_number(self) -> int:
        with database_errors(
            "Unable to allocate order number",
            error_code=ERROR_CODE_WRITE_FAILED,
        ):
            counter = self._db.find_one_and_update(
                COUNTERS_COLLECTION,
                filters={"_id": ORDER_NUMBER_SEQUENCE},
                update={"$inc": {"seq": 1}},
                upsert=True,
            )
        return int(counter["seq"])  # type: ignore[index]

    def create(self, *, order: Document) -> Document:
        details = {"order_number": order.get("orderNumber")}

        with database_errors(
            "Unable to save order",
            error_code=ERROR_CODE_WRITE_FAILED,
            details=details,
        ):
            order_id = self._db.insert_one(ORDERS_COLLECTION, document=dict(order))
            logger.info("Order created", extra={**details, "order_id": str(order_id)})
            return self._references.expand_orders([{**order, "_id": order_id}])[0]

    def update_status(self, *, order_number: int, status: str) -> Document | None:
        details = {"order_number": order_number, "status": status}

        with database_errors(
            "Unable to update order",
            error_code=ERROR_CODE_WRITE_FAILED,
            details=details,
        ):
            order = self._db.find_one_and_update(
                ORDERS_COLLECTION,
                filters={"orderNumber": order_number},
                update={"$set": {"status": status}},
            )
            if order is None:
                return None

            logger.info("Order status updated", extra=details)
            return self._references.expand_orders([order])[0]

    def delete(self, *, order_id: ObjectId) -> Document | None:
        details = {"order_id": str(order_id)}

        with database_errors(
            "Unable to delete order",
            error_code=ERROR_CODE_WRITE_FAILED,
            details=details,
        ):
            order = self._db.find_one_and_delete(ORDERS_COLLECTION, filters={"_id": order_id})
            if order is None:
                return None

            logger.info("Order deleted", extra=details)
            return self._references.expand_orders([order])[0]
