"""Reference expansion ("populate") for stored documents.

References are stored as ObjectIds. Expansion batches one ``$in`` query per
referenced collection and substitutes the documents in place, keeping the
order of the reference list. References whose target no longer exists are
dropped from lists and become None for single references.
"""

from collections.abc import Iterable
from typing import Any

from bson import ObjectId

from core.infrastructure.adapters.mongo_adapter import MongoAdapter
from core.utils.constants import (
    CUSTOMERS_COLLECTION,
    ORDERS_COLLECTION,
    PRODUCTS_COLLECTION,
)

Document = dict[str, Any]

# Never expand credentials or session material into a response.
PRIVATE_CUSTOMER_FIELDS: frozenset[str] = frozenset({"password", "tokens"})
CUSTOMER_PROJECTION: dict[str, int] = {field: 0 for field in PRIVATE_CUSTOMER_FIELDS}


def _ref_id(value: Any) -> Any:
    if isinstance(value, dict):
        return value.get("_id")
    return value


class ReferenceExpander:
    """Resolves order and customer references into embedded documents."""

    def __init__(self, adapter: MongoAdapter) -> None:
        self._db = adapter

    def _by_id(
        self,
        collection: str,
        ids: Iterable[Any],
        projection: dict[str, int] | None = None,
    ) -> dict[ObjectId, Document]:
        unique_ids = list({ref for ref in ids if isinstance(ref, ObjectId)})
        if not unique_ids:
            return {}

        documents = self._db.find(
            collection,
            filters={"_id": {"$in": unique_ids}},
            projection=projection,
        )
        return {doc["_id"]: doc for doc in documents}

    def expand_orders(self, orders: list[Document]) -> list[Document]:
        """Expand ``products`` and ``customer`` of each order."""
        products = self._by_id(
            PRODUCTS_COLLECTION,
            (ref for order in orders for ref in order.get("products") or []),
        )
        customers = self._by_id(
            CUSTOMERS_COLLECTION,
            (order.get("customer") for order in orders),
            CUSTOMER_PROJECTION,
        )

        expanded: list[Document] = []
        for order in orders:
            product_refs = order.get("products") or []
            expanded.append(
                {
                    **order,
                    "products": [
                        products[ref] for ref in product_refs if ref in products
                    ],
                    "customer": customers.get(order.get("customer")),
                }
            )
        return expanded

    def expand_customers(self, customers: list[Document]) -> list[Document]:
        """Expand ``orders`` and ``lastOrder``; the last order is expanded in turn."""
        orders = self._by_id(
            ORDERS_COLLECTION,
            (ref for customer in customers for ref in customer.get("orders") or []),
        )
        last_orders = self._by_id(
            ORDERS_COLLECTION,
            (customer.get("lastOrder") for customer in customers),
        )
        expanded_last = {
            order["_id"]: order
            for order in self.expand_orders(list(last_orders.values()))
        }

        expanded: list[Document] = []
        for customer in customers:
            order_refs = customer.get("orders") or []
            expanded.append(
                {
                    **customer,
                    "orders": [orders[ref] for ref in order_refs if ref in orders],
                    "lastOrder": expanded_last.get(_ref_id(customer.get("lastOrder"))),
                }
            )
        return expanded
