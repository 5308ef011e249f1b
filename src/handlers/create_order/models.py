"""Pydantic models for the create order request."""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.utils.constants import PAYMENT_METHODS


class CreateOrderRequest(BaseModel):
    """Validation model for placing an order."""

    model_config = ConfigDict(str_strip_whitespace=True)

    address: str = Field(..., min_length=1, description="Delivery address")
    payment: str = Field(..., description="Payment method")
    phone: str = Field(..., min_length=1, max_length=32, description="Contact phone")
    email: str = Field(..., min_length=3, max_length=254, pattern=r"^[^@\s]+@[^@\s]+$")
    total: float = Field(..., ge=0, description="Order total as shown to the customer")
    items: list[str] = Field(..., min_length=1, description="Product ids, one per unit")
    comment: str = Field("", max_length=1000)

    @field_validator("payment", mode="before")
    @classmethod
    def known_payment(cls, value: Any) -> Any:
        if isinstance(value, str) and value.strip() not in PAYMENT_METHODS:
            raise ValueError(f"Invalid payment. Expected one of: {', '.join(PAYMENT_METHODS)}")
        return value

    @field_validator("total")
    @classmethod
    def finite_total(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("Invalid order total")
        return value

    @field_validator("comment", mode="before")
    @classmethod
    def empty_comment(cls, value: Any) -> Any:
        return "" if value is None else value
