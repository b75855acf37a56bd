"""
Memos Backend — Shared Response Schemas
========================================

What:  The response envelope, the error body and the health check body.
Why:   Every successful API response is wrapped as `{"data": ...}`; every
       error uses the same four-field shape so clients parse one format.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """
    Success envelope.

    Examples:
        POST /api/tag            → {"data": "work"}
        GET  /api/tag            → {"data": ["work", "ideas"]}
        POST /api/tag/delete     → {"data": true}
    """
    data: T


def compose_response(data: T) -> DataResponse[T]:
    """Wraps a payload in the success envelope."""
    return DataResponse(data=data)


class ErrorResponse(BaseModel):
    """
    Standardized error body for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "Tag name not found: work",
            "details": null,
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
