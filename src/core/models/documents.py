"""Shared storefront document models.

Documents come straight from MongoDB: camelCase field names, ``_id`` as an
ObjectId, references either as ids or, once expanded, as nested documents.
The models accept both shapes and serialize ids as strings.
"""

from datetime import datetime
from typing import Annotated, Any

from bson import ObjectId
from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.models.pagination import PaginationInfo


def _stringify_object_id(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    return value


ObjectIdStr = Annotated[str, BeforeValidator(_stringify_object_id)]


class StoreDocument(BaseModel):
    """Base for documents read from the store."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: ObjectIdStr = Field(
        ...,
        validation_alias=AliasChoices("_id", "id"),
        serialization_alias="id",
        description="Document identifier",
    )

    def to_response(self) -> dict[str, Any]:
        """JSON-safe dict using the public camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)


class Product(StoreDocument):
    """A catalog product. A null price means it is not for sale."""

    title: str
    price: float | None = None
    description: str | None = None
    category: str | None = None
    image: str | None = None


class Order(StoreDocument):
    """A placed order with its products and customer as ids or expanded."""

    order_number: int
    status: str
    total_amount: float
    delivery_address: str | None = None
    payment: str | None = None
    phone: str | None = None
    email: str | None = None
    comment: str | None = None
    products: list[ObjectIdStr | Product] = Field(default_factory=list)
    customer: "ObjectIdStr | Customer | None" = None
    created_at: datetime | None = None


class Customer(StoreDocument):
    """A registered customer with aggregates derived from their orders."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    roles: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
    order_count: int = 0
    total_amount: float = 0
    last_order: ObjectIdStr | Order | None = None
    last_order_date: datetime | None = None
    orders: list[ObjectIdStr | Order] = Field(default_factory=list)


Order.model_rebuild()


class ListCustomersResponse(BaseModel):
    """Paginated response for listing customers."""

    customers: list[Customer] = Field(..., description="Customers on this page")
    pagination: PaginationInfo = Field(..., description="Pagination metadata")

    def to_response(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class ListOrdersResponse(BaseModel):
    """Paginated response for listing orders."""

    orders: list[Order] = Field(..., description="Orders on this page")
    pagination: PaginationInfo = Field(..., description="Pagination metadata")

    def to_response(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
