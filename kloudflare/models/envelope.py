"""Pydantic models for the uniform Cloudflare response envelope.

Every API response is wrapped as::

    {"errors": [...], "messages": [...], "success": true, "result": ..., "result_info": {...}}
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field, field_validator

# =============================================================================
# Constants
# =============================================================================

RESPONSE_INFO_MIN_STATUS = 1000

T = TypeVar("T")

# =============================================================================
# Envelope Parts
# =============================================================================


class ResponseInfo(BaseModel):
    """A coded error or message in the API's own status namespace.

    The status is not an HTTP status code; Cloudflare codes start at 1000.
    """

    status: int
    message: str

    model_config = {"frozen": True}

    @field_validator("status")
    @classmethod
    def status_in_api_namespace(cls, v: int) -> int:
        if v < RESPONSE_INFO_MIN_STATUS:
            raise ValueError(f"status must be greater than or equal to {RESPONSE_INFO_MIN_STATUS}")
        return v


class ResultInfo(BaseModel):
    """Pagination metadata attached to list responses."""

    count: int = Field(default=0, ge=0)
    page: int = Field(default=1, ge=0)
    per_page: int = Field(default=0, ge=0)
    total_count: int = Field(default=0, ge=0)


class Envelope(BaseModel, Generic[T]):
    """Response wrapper. ``result`` is meaningless when ``success`` is false."""

    errors: list[ResponseInfo] = Field(default_factory=list)
    messages: list[ResponseInfo] = Field(default_factory=list)
    success: bool = True
    result: T | None = None
    result_info: ResultInfo | None = None


# =============================================================================
# Small Shared Results
# =============================================================================


class Id(BaseModel):
    """Result carrying only an ``id`` (returned by most delete endpoints)."""

    id: str


class Key(BaseModel):
    """Result carrying only a ``key``."""

    key: str
