"""
Pydantic models for user data.

Users only carry a free‑form ``username``; it is neither unique nor
checked for emptiness.  Identifiers are opaque strings generated by
the store.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Body of ``POST /api/users``.

    ``username`` must be a string when present.  A missing value is
    passed through and rejected by the store.
    """

    username: Optional[str] = Field(None, example="fcc_test")


class UserCreated(BaseModel):
    """Schema returned after registering a user."""

    username: str = Field(..., example="fcc_test")
    id: str = Field(..., example="65a1f0c2b3e4d5f6a7b8c9d0")


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str
    username: str
