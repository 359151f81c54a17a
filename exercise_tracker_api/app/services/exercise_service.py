"""
Business logic for exercises and exercise logs.

Each exercise stores its date twice: ``date`` holds the display
string returned to clients and ``date_value`` the ISO calendar date
(``NULL`` for an invalid date).  Log filters and ordering use
``date_value`` so that they are chronological; display strings such
as ``"Mon Jan 01 1990"`` do not sort by time.
"""

import logging
from typing import Any, List, Optional

import aiosqlite

from ..core.dates import parse_date, to_date_string
from ..core.db import new_object_id
from ..core.numbers import INT64_MAX, fits_int64, parse_int
from ..schemas.exercise import ExerciseAdded, ExerciseCreate, ExerciseLog, LogEntry
from .user_service import UserService


logger = logging.getLogger(__name__)


class ExerciseService:
    """Service class for logging exercises and reading them back."""

    @classmethod
    async def add_exercise(
        cls,
        conn: aiosqlite.Connection,
        user_id: str,
        data: ExerciseCreate,
    ) -> ExerciseAdded:
        """Record an exercise for an existing user.

        Raises ``UserNotFoundError`` if ``user_id`` is unknown.  A
        missing date means today.  A ``duration`` without leading digits,
        or one outside the 64-bit integer range, is stored as ``NULL``.
        """
        user = await UserService.require_user(conn, user_id)
        date_text = to_date_string(data.date)
        parsed = parse_date(date_text)
        duration = parse_int(data.duration)
        if duration is not None and not fits_int64(duration):
            duration = None

        exercise_id = new_object_id()
        await conn.execute(
            """
            INSERT INTO exercises (id, user_id, description, duration, date, date_value)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                exercise_id,
                user.id,
                data.description,
                duration,
                date_text,
                parsed.isoformat() if parsed else None,
            ),
        )
        await conn.commit()
        logger.info("Added exercise %s for user %s on %s", exercise_id, user.id, date_text)
        return ExerciseAdded(
            id=user.id,
            username=user.username,
            description=data.description,
            duration=duration,
            date=date_text,
        )

    @classmethod
    async def get_log(
        cls,
        conn: aiosqlite.Connection,
        user_id: str,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        limit: Any = None,
    ) -> ExerciseLog:
        """Return the exercise log of a user.

        ``date_from`` and ``date_to`` are inclusive bounds and are
        ignored when they cannot be parsed.  ``limit`` caps the number
        of entries only when it parses to a positive integer.  Raises
        ``UserNotFoundError`` if ``user_id`` is unknown.
        """
        user = await UserService.require_user(conn, user_id)

        clauses = ["user_id = ?"]
        params: List[Any] = [user.id]
        lower = parse_date(date_from) if date_from else None
        if lower:
            clauses.append("date_value >= ?")
            params.append(lower.isoformat())
        upper = parse_date(date_to) if date_to else None
        if upper:
            clauses.append("date_value <= ?")
            params.append(upper.isoformat())

        query = (
            "SELECT description, duration, date FROM exercises WHERE "
            + " AND ".join(clauses)
            + " ORDER BY date_value ASC, rowid ASC"
        )
        max_rows = parse_int(limit)
        if max_rows is not None and max_rows > 0:
            query += " LIMIT ?"
            params.append(min(max_rows, INT64_MAX))

        logger.debug("Log query for %s: %s %s", user.id, query, params)
        async with conn.execute(query, params) as cursor:
            rows = await cursor.fetchall()

        log = [
            LogEntry(
                description=row["description"],
                duration=row["duration"],
                date=to_date_string(row["date"]),
            )
            for row in rows
        ]
        return ExerciseLog(username=user.username, count=len(log), id=user.id, log=log)
