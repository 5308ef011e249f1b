"""
Pytest configuration and fixtures for storefront tests.
Provides a mongomock database in place of MongoDB, S3 mocking, and
helpers that seed products, customers and orders.
"""

import itertools
import os
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("UPLOAD_S3_BUCKET_NAME", "storefront-uploads-test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "storefront-test")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "StorefrontTest")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "1")

import boto3
import mongomock
import pytest
from bson import ObjectId
from botocore.exceptions import ClientError
from moto import mock_aws

from core.infrastructure.adapters.mongo_adapter import MongoAdapter
from core.infrastructure.mongo.customer_store import MongoCustomerStore

Document = dict[str, Any]

BASE_TIME = datetime(2024, 1, 1, 10, 0, 0)


@pytest.fixture(scope="function")
def mongo_db(monkeypatch):
    """
    Fresh in-memory database per test.

    Every store built without an explicit adapter resolves its database
    through ``get_database``, which is patched to return this one.
    """
    database = mongomock.MongoClient()["storefront-test"]
    monkeypatch.setattr(
        "core.infrastructure.adapters.mongo_adapter.get_database",
        lambda: database,
    )
    return database


@pytest.fixture
def mongo_adapter(mongo_db) -> MongoAdapter:
    return MongoAdapter(database=mongo_db)


@pytest.fixture
def insert_product(mongo_db) -> Callable[..., Document]:
    """
    Helper to insert a product.

    Usage:
        product = insert_product("Red mug", price=250)
    """

    def _insert(title: str = "Product", price: float | None = 100.0, **extra: Any) -> Document:
        product = {"_id": ObjectId(), "title": title, "price": price, **extra}
        mongo_db.products.insert_one(product)
        return product

    return _insert


@pytest.fixture
def insert_customer(mongo_db) -> Callable[..., Document]:
    """
    Helper to insert a customer with empty order aggregates.

    Usage:
        customer = insert_customer("Alice", created_at=datetime(2024, 1, 5))
    """

    def _insert(
        name: str = "Customer",
        *,
        created_at: datetime = BASE_TIME,
        roles: list[str] | None = None,
        **extra: Any,
    ) -> Document:
        customer = {
            "_id": ObjectId(),
            "name": name,
            "email": f"{name.lower().replace(' ', '.')}@example.com",
            "phone": "+10000000000",
            "password": "hashed-secret",
            "roles": roles or ["customer"],
            "createdAt": created_at,
            "orders": [],
            "orderCount": 0,
            "totalAmount": 0,
            "lastOrder": None,
            "lastOrderDate": None,
            **extra,
        }
        mongo_db.users.insert_one(customer)
        return customer

    return _insert


@pytest.fixture
def insert_order(mongo_db, mongo_adapter) -> Callable[..., Document]:
    """
    Helper to insert an order and refresh its customer's aggregates.

    Order numbers are assigned sequentially per test unless given.

    Usage:
        order = insert_order(customer, [product], total=100)
    """
    numbers = itertools.count(1)
    customers = MongoCustomerStore(mongo_adapter)

    def _insert(
        customer: Document,
        products: list[Document],
        *,
        total: float | None = None,
        status: str = "new",
        created_at: datetime | None = None,
        order_number: int | None = None,
        address: str = "1 Main Street",
    ) -> Document:
        number = order_number if order_number is not None else next(numbers)
        order = {
            "_id": ObjectId(),
            "orderNumber": number,
            "status": status,
            "totalAmount": total if total is not None else sum(p["price"] or 0 for p in products),
            "deliveryAddress": address,
            "payment": "card",
            "phone": "+10000000000",
            "email": customer["email"],
            "comment": "",
            "products": [p["_id"] for p in products],
            "customer": customer["_id"],
            "createdAt": created_at or BASE_TIME + timedelta(minutes=number),
        }
        mongo_db.orders.insert_one(order)
        customers.refresh_order_stats(customer_id=customer["_id"])
        return order

    return _insert


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def s3_client(aws_mock):
    """S3 client for bucket operations."""
    return boto3.client("s3", region_name=os.getenv("AWS_REGION"))


@pytest.fixture(scope="function")
def s3_bucket(s3_client):
    """
    Create the upload bucket for testing.

    The bucket lives only as long as the moto context of the test.
    """
    bucket_name = os.getenv("UPLOAD_S3_BUCKET_NAME")

    try:
        s3_client.create_bucket(Bucket=bucket_name)
    except ClientError as e:
        if e.response["Error"]["Code"] != "BucketAlreadyOwnedByYou":
            raise

    return s3_client


@pytest.fixture
def s3_get_object(s3_client) -> Callable[[str], dict[str, Any]]:
    """
    Helper to read an uploaded object back from S3.

    Usage:
        obj = s3_get_object("temp/abc.png")
    """

    def _get(key: str) -> dict[str, Any]:
        response: dict[str, Any] = s3_client.get_object(
            Bucket=os.getenv("UPLOAD_S3_BUCKET_NAME"),
            Key=key,
        )
        return {
            "body": response["Body"].read(),
            "content_type": response["ContentType"],
        }

    return _get


@pytest.fixture
def png_bytes() -> bytes:
    """PNG signature followed by enough payload to pass the size check."""
    return b"\x89PNG\r\n\x1a\n" + b"\x01" * 4096


@pytest.fixture
def jpeg_bytes() -> bytes:
    return b"\xff\xd8\xff\xe0" + b"\x02" * 4096


@pytest.fixture
def gif_bytes() -> bytes:
    return b"GIF89a" + b"\x03" * 4096
