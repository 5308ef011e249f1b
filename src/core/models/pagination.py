"""Pagination model."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel


class PaginationInfo(BaseModel):
    """Pagination metadata for list responses."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total: StrictInt = Field(..., description="Total number of items matching the query")
    total_pages: StrictInt = Field(..., description="Number of pages at the current page size")
    current_page: StrictInt = Field(..., description="Page number being returned (1-based)")
    page_size: StrictInt = Field(..., description="Maximum number of items per page")
