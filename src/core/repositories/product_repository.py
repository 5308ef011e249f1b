"""Abstract contract for product lookups."""

from abc import ABC, abstractmethod
from typing import Any

from bson import ObjectId

Document = dict[str, Any]


class ProductRepository(ABC):
    """Read-only access to the product catalog."""

    @abstractmethod
    def fetch_by_ids(self, *, product_ids: list[ObjectId]) -> list[Document]:
        """Fetch the products with the given ids; missing ids are skipped.

        Raises:
            DatabaseError: If the fetch fails
        """

    @abstractmethod
    def ids_matching_title(self, *, search: str) -> list[ObjectId]:
        """Return ids of products whose title contains ``search``, case-insensitively.

        Raises:
            DatabaseError: If the query fails
        """
