"""Abstract contract for order persistence."""

from abc import ABC, abstractmethod
from typing import Any

from bson import ObjectId

Document = dict[str, Any]


class OrderRepository(ABC):
    """Contract for storing and retrieving orders.

    Returned orders have ``products`` and ``customer`` expanded unless
    stated otherwise.
    """

    @abstractmethod
    def aggregate(self, *, pipeline: list[dict[str, Any]]) -> list[Document]:
        """Run an aggregation pipeline over the orders collection.

        Raises:
            DatabaseError: If the aggregation fails
        """

    @abstractmethod
    def ids_matching(self, *, filters: dict[str, Any]) -> list[ObjectId]:
        """Return the ids of orders matching ``filters``.

        Raises:
            DatabaseError: If the query fails
        """

    @abstractmethod
    def fetch_by_number(self, *, order_number: int) -> Document | None:
        """Fetch an order by its sequential number.

        Raises:
            DatabaseError: If the fetch fails
        """

    @abstractmethod
    def fetch_by_ids(self, *, order_ids: list[ObjectId]) -> list[Document]:
        """Fetch several orders, keeping the order of ``order_ids``.

        Raises:
            DatabaseError: If the fetch fails
        """

    @abstractmethod
    def next_order_number(self) -> int:
        """Allocate the next sequential order number.

        Raises:
            DatabaseError: If the counter cannot be incremented
        """

    @abstractmethod
    def create(self, *, order: Document) -> Document:
        """Insert a new order and return it expanded.

        Raises:
            ValidationError: If the store rejects the document
            DatabaseError: If the insert fails
        """

    @abstractmethod
    def update_status(self, *, order_number: int, status: str) -> Document | None:
        """Set the status of an order, or return None if it does not exist.

        Raises:
            ValidationError: If the store rejects the status
            DatabaseError: If the update fails
        """

    @abstractmethod
    def delete(self, *, order_id: ObjectId) -> Document | None:
        """Delete an order and return it expanded, or None if it did not exist.

        Raises:
            DatabaseError: If the deletion fails
        """
