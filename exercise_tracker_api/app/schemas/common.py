"""Schemas shared by all endpoints."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Failure body.

    Domain errors are delivered with HTTP 200 and this single field,
    which existing clients of the service rely on.
    """

    error: str = Field(..., example="User not found")
