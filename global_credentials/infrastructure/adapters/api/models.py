"""API response models (sensitive credential fields are masked)."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "unhealthy"]
    version: str
    timestamp: datetime


class LookupResponse(BaseModel):
    """Result of a global credential lookup."""

    id: str | None = Field(default=None, description="Synthetic identifier of the result")
    method: str | None = Field(
        default=None, description="Backend operation used, null when no filter was supplied"
    )
    item: list[dict[str, Any]] | None = Field(
        default=None, description="Credential sub type, set when looking up by id"
    )
    items: list[dict[str, Any]] | None = Field(
        default=None, description="Global credentials, set when listing"
    )


class ErrorResponse(BaseModel):
    """Error response."""

    error: str
    detail: str | None = None
