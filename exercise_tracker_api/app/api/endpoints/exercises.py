"""
Exercise endpoints for a given user.

``POST /{user_id}/exercises`` logs an exercise, ``GET /{user_id}/logs``
returns the filtered log.  As with the user endpoints, failures are
delivered as ``{"error": ...}`` bodies with HTTP 200.
"""

import logging
from typing import Optional, Union

import aiosqlite
from fastapi import APIRouter, Depends, Query, Request

from exercise_tracker_api.app.api.deps import read_payload
from exercise_tracker_api.app.core.db import get_db
from exercise_tracker_api.app.schemas.common import ErrorResponse
from exercise_tracker_api.app.schemas.exercise import ExerciseAdded, ExerciseCreate, ExerciseLog
from exercise_tracker_api.app.services.exercise_service import ExerciseService
from exercise_tracker_api.app.services.user_service import UserNotFoundError


router = APIRouter()
logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"


@router.post("/{user_id}/exercises", response_model=Union[ExerciseAdded, ErrorResponse])
async def add_exercise(
    user_id: str,
    request: Request,
    conn: aiosqlite.Connection = Depends(get_db),
) -> Union[ExerciseAdded, ErrorResponse]:
    """Log an exercise with ``description``, ``duration`` and optional ``date``.

    The response carries the user's ``id`` and ``username`` together
    with the stored exercise fields.
    """
    try:
        payload = await read_payload(request)
        data = ExerciseCreate.model_validate(payload)
        return await ExerciseService.add_exercise(conn, user_id, data)
    except UserNotFoundError:
        return ErrorResponse(error=USER_NOT_FOUND)
    except Exception:
        logger.exception("Failed to add exercise for user %s", user_id)
        return ErrorResponse(error="Error adding exercise")


@router.get("/{user_id}/logs", response_model=Union[ExerciseLog, ErrorResponse])
async def get_logs(
    user_id: str,
    date_from: Optional[str] = Query(None, alias="from"),
    date_to: Optional[str] = Query(None, alias="to"),
    limit: Optional[str] = Query(None),
    conn: aiosqlite.Connection = Depends(get_db),
) -> Union[ExerciseLog, ErrorResponse]:
    """Return the user's log, optionally bounded by ``from``/``to`` and capped by ``limit``."""
    try:
        return await ExerciseService.get_log(conn, user_id, date_from, date_to, limit)
    except UserNotFoundError:
        return ErrorResponse(error=USER_NOT_FOUND)
    except Exception:
        logger.exception("Failed to fetch logs for user %s", user_id)
        return ErrorResponse(error="Error fetching logs")
