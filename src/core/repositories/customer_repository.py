"""Abstract contract for customer persistence."""

from abc import ABC, abstractmethod
from typing import Any

from bson import ObjectId

Document = dict[str, Any]


class CustomerRepository(ABC):
    """Contract for storing and retrieving customers.

    Handlers depend on this interface, not the implementation.
    Returned customers have ``orders`` and ``lastOrder`` expanded.
    """

    @abstractmethod
    def find_page(
        self,
        *,
        filters: dict[str, Any],
        sort: list[tuple[str, int]],
        skip: int,
        limit: int,
    ) -> list[Document]:
        """Fetch one page of customers matching ``filters``.

        Args:
            filters: MongoDB filter document built from validated criteria
            sort: Cursor sort keys
            skip: Number of matches to skip
            limit: Maximum number of customers to return

        Raises:
            DatabaseError: If the query fails
        """

    @abstractmethod
    def count(self, *, filters: dict[str, Any]) -> int:
        """Count customers matching ``filters``.

        Raises:
            DatabaseError: If the count fails
        """

    @abstractmethod
    def fetch(self, *, customer_id: ObjectId) -> Document | None:
        """Fetch one customer, or None if it does not exist.

        Raises:
            DatabaseError: If the fetch fails
        """

    @abstractmethod
    def fetch_order_ids(self, *, customer_id: ObjectId) -> list[ObjectId] | None:
        """Return the ids in the customer's order history, or None if it does not exist.

        Raises:
            DatabaseError: If the fetch fails
        """

    @abstractmethod
    def update(self, *, customer_id: ObjectId, fields: dict[str, Any]) -> Document | None:
        """Set ``fields`` on a customer and return it, or None if it does not exist.

        Raises:
            ValidationError: If the store rejects the new values
            DatabaseError: If the update fails
        """

    @abstractmethod
    def delete(self, *, customer_id: ObjectId) -> Document | None:
        """Delete a customer and return it, or None if it did not exist.

        Raises:
            DatabaseError: If the deletion fails
        """

    @abstractmethod
    def refresh_order_stats(self, *, customer_id: ObjectId) -> None:
        """Re-derive the customer's order aggregates from the orders collection.

        Raises:
            DatabaseError: If the update fails
        """
