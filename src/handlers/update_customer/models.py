"""Pydantic models for the update customer request."""

from pydantic import BaseModel, ConfigDict, Field


class UpdateCustomerRequest(BaseModel):
    """Fields an admin may change on a customer.

    Any other key in the body is ignored.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: str | None = Field(None, min_length=1, max_length=200, description="Display name")
    phone: str | None = Field(None, min_length=1, max_length=32, description="Contact phone")

    def changes(self) -> dict[str, str]:
        """Fields explicitly sent with a value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)
