"""
User endpoints.

Domain failures are reported with HTTP 200 and an ``{"error": ...}``
body rather than an error status code; existing clients depend on
this contract.
"""

import logging
from typing import List, Union

import aiosqlite
from fastapi import APIRouter, Depends, Request

from exercise_tracker_api.app.api.deps import read_payload
from exercise_tracker_api.app.core.db import get_db
from exercise_tracker_api.app.schemas.common import ErrorResponse
from exercise_tracker_api.app.schemas.user import UserCreate, UserCreated, UserRead
from exercise_tracker_api.app.services.user_service import UserService


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=Union[UserCreated, ErrorResponse])
async def create_user(
    request: Request,
    conn: aiosqlite.Connection = Depends(get_db),
) -> Union[UserCreated, ErrorResponse]:
    """Register a new user from the ``username`` body field."""
    try:
        payload = await read_payload(request)
        data = UserCreate.model_validate(payload)
        return await UserService.create_user(conn, data.username)
    except Exception:
        logger.exception("Failed to create user")
        return ErrorResponse(error="Error creating user")


@router.get("", response_model=List[UserRead])
async def list_users(conn: aiosqlite.Connection = Depends(get_db)) -> List[UserRead]:
    """List every user as ``{id, username}``.

    Store failures are not translated here and surface as a server
    error.
    """
    return await UserService.list_users(conn)
