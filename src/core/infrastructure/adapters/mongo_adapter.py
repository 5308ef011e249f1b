"""Thin MongoDB adapter wrapping pymongo collection operations."""

import os
from collections.abc import Mapping, Sequence
from functools import lru_cache
from typing import Any

from pymongo import MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from core.utils.constants import (
    DEFAULT_MONGODB_DATABASE,
    DEFAULT_MONGODB_URI,
    ENV_MONGODB_DATABASE,
    ENV_MONGODB_URI,
)

Document = dict[str, Any]


@lru_cache(maxsize=None)
def _get_client(uri: str) -> MongoClient:
    """One client per URI and process, reused across Lambda invocations."""
    return MongoClient(uri, tz_aware=False)


def get_database() -> Database:
    """Return the configured database."""
    uri = os.getenv(ENV_MONGODB_URI, DEFAULT_MONGODB_URI)
    name = os.getenv(ENV_MONGODB_DATABASE, DEFAULT_MONGODB_DATABASE)
    return _get_client(uri)[name]


class MongoAdapter:
    """Low-level MongoDB operations (mechanical, no error handling).

    This adapter:
    - Wraps a pymongo Database
    - Does NOT handle errors (lets them bubble up)
    - Domain implementations catch and translate errors
    """

    def __init__(self, database: Database | None = None) -> None:
        """Bind to the given database, or the one configured in the environment."""
        self.db: Database = database if database is not None else get_database()

    def collection(self, name: str) -> Collection:
        return self.db[name]

    def find(
        self,
        collection: str,
        *,
        filters: Mapping[str, Any],
        projection: Mapping[str, Any] | None = None,
        sort: Sequence[tuple[str, int]] | None = None,
        skip: int = 0,
        limit: int = 0,
    ) -> list[Document]:
        """Run a find and materialize the cursor.

        Raises pymongo exceptions - caught by domain implementation.
        """
        # Copied: drivers may write into the projection they are given.
        cursor = self.collection(collection).find(
            filters, dict(projection) if projection is not None else None
        )
        if sort:
            cursor = cursor.sort(list(sort))
        if skip:
            cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)
        return list(cursor)

    def find_one(self, collection: str, *, filters: Mapping[str, Any]) -> Document | None:
        return self.collection(collection).find_one(filters)

    def count(self, collection: str, *, filters: Mapping[str, Any]) -> int:
        return self.collection(collection).count_documents(filters)

    def aggregate(self, collection: str, *, pipeline: list[dict[str, Any]]) -> list[Document]:
        return list(self.collection(collection).aggregate(pipeline))

    def insert_one(self, collection: str, *, document: Document) -> Any:
        """Insert a document and return its ``_id``."""
        return self.collection(collection).insert_one(document).inserted_id

    def update_one(
        self,
        collection: str,
        *,
        filters: Mapping[str, Any],
        update: Mapping[str, Any],
    ) -> int:
        """Apply ``update`` to the first match and return the matched count."""
        return self.collection(collection).update_one(filters, update).matched_count

    def find_one_and_update(
        self,
        collection: str,
        *,
        filters: Mapping[str, Any],
        update: Mapping[str, Any],
        upsert: bool = False,
    ) -> Document | None:
        """Update the first match and return the document after the update."""
        return self.collection(collection).find_one_and_update(
            filters,
            update,
            upsert=upsert,
            return_document=ReturnDocument.AFTER,
        )

    def find_one_and_delete(
        self,
        collection: str,
        *,
        filters: Mapping[str, Any],
    ) -> Document | None:
        return self.collection(collection).find_one_and_delete(filters)
