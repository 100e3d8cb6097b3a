"""Standardized error response schemas."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ErrorResponse(BaseModel):
    """Error body for functional (400) and technical (500) failures."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type: str = Field(..., description="Problem type tag for the error class")
    title: str = Field(..., description="Name of the error kind")
    detail: str = Field(..., description="Human-readable, localized message")
    status: str = Field(..., description="HTTP status code")
    trace_id: str | None = Field(None, description="Identifier to correlate with server logs")


class ApiKeyErrorResponse(BaseModel):
    """Body returned when the api key check fails."""

    error: str
