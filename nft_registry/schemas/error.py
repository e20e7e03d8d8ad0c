"""
Pydantic schemas for error responses.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standard error response format.

    Examples:
        400: {"error": "bad_parameters", "message": "thumbnail must be a valid URL"}
        401: {"error": "unauthorized", "message": "Valid token required"}
        403: {"error": "not_authorized", "message": "Caller is not the registry controller"}
        404: {"error": "non_existent_item", "message": "No record registered for '...'"}
        500: {"error": "unknown", "message": "..."}
    """

    error: str = Field(
        ...,
        description="Error code string",
        examples=["bad_parameters", "not_authorized", "non_existent_item", "unknown"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] | None = Field(
        default=None,
        description="Optional additional error details",
    )
