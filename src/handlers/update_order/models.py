"""Pydantic models for the update order request."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.utils.constants import ORDER_STATUSES


class UpdateOrderRequest(BaseModel):
    """Validation model for an order status change."""

    model_config = ConfigDict(str_strip_whitespace=True)

    status: str = Field(..., description="New order status")

    @field_validator("status", mode="before")
    @classmethod
    def known_status(cls, value: Any) -> Any:
        if isinstance(value, str) and value.strip() not in ORDER_STATUSES:
            raise ValueError(f"Invalid status. Expected one of: {', '.join(ORDER_STATUSES)}")
        return value
