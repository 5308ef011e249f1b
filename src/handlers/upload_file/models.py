"""Pydantic models for the file upload request/response."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UploadFileRequest(BaseModel):
    """Validation model for a file upload."""

    file: str = Field(..., min_length=1, description="Base64-encoded file content")


class UploadFileResponse(BaseModel):
    """Response model for a stored upload."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    file_name: str = Field(..., description="Object key of the stored file")
