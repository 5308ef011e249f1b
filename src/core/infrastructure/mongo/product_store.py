"""MongoDB-backed implementation of ProductRepository."""

from typing import Any

from bson import ObjectId

from core.filters.search import SearchTerm
from core.infrastructure.adapters.mongo_adapter import MongoAdapter
from core.infrastructure.mongo.errors import database_errors
from core.repositories.product_repository import ProductRepository
from core.utils.constants import ERROR_CODE_FETCH_FAILED, PRODUCTS_COLLECTION

Document = dict[str, Any]


class MongoProductStore(ProductRepository):
    """Product lookups against the ``products`` collection."""

    def __init__(self, adapter: MongoAdapter | None = None) -> None:
        self._db = adapter or MongoAdapter()

    def fetch_by_ids(self, *, product_ids: list[ObjectId]) -> list[Document]:
        if not product_ids:
            return []

        with database_errors("Unable to retrieve products", error_code=ERROR_CODE_FETCH_FAILED):
            return self._db.find(
                PRODUCTS_COLLECTION,
                filters={"_id": {"$in": list(set(product_ids))}},
            )

    def ids_matching_title(self, *, search: str) -> list[ObjectId]:
        with database_errors("Unable to search products", error_code=ERROR_CODE_FETCH_FAILED):
            products = self._db.find(
                PRODUCTS_COLLECTION,
                filters={"title": SearchTerm.pattern(search)},
                projection={"_id": 1},
            )
        return [product["_id"] for product in products]
