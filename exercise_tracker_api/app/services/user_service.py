"""
Business logic for users.

Users are created with a username and listed; they are never updated
or deleted.  All operations run against the connection passed in by
the caller.
"""

import logging
from typing import List, Optional

import aiosqlite

from ..core.db import new_object_id
from ..schemas.user import UserCreated, UserRead


logger = logging.getLogger(__name__)


class UserNotFoundError(LookupError):
    """Raised when a user identifier does not resolve to a record."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User {user_id!r} not found")
        self.user_id = user_id


class UserService:
    """Service class for creating and looking up users."""

    @classmethod
    async def create_user(cls, conn: aiosqlite.Connection, username: Optional[str]) -> UserCreated:
        """Insert a new user and return its username and identifier.

        A missing ``username`` violates the ``NOT NULL`` constraint and
        the resulting ``sqlite3.IntegrityError`` is propagated.
        """
        user_id = new_object_id()
        await conn.execute(
            "INSERT INTO users (id, username) VALUES (?, ?)",
            (user_id, username),
        )
        await conn.commit()
        logger.info("Created user %s (%s)", user_id, username)
        return UserCreated(username=username, id=user_id)

    @classmethod
    async def list_users(cls, conn: aiosqlite.Connection) -> List[UserRead]:
        """Return all users in insertion order."""
        async with conn.execute("SELECT id, username FROM users ORDER BY rowid") as cursor:
            rows = await cursor.fetchall()
        return [UserRead(id=row["id"], username=row["username"]) for row in rows]

    @classmethod
    async def get_user(cls, conn: aiosqlite.Connection, user_id: str) -> Optional[UserRead]:
        async with conn.execute(
            "SELECT id, username FROM users WHERE id = ?",
            (user_id,),
        ) as cursor:
            row = await cursor.fetchone()
        if not row:
            return None
        return UserRead(id=row["id"], username=row["username"])

    @classmethod
    async def require_user(cls, conn: aiosqlite.Connection, user_id: str) -> UserRead:
        """Like ``get_user`` but raise ``UserNotFoundError`` instead of returning ``None``."""
        user = await cls.get_user(conn, user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
