"""
SQLite database integration and simple migration system.

Two access paths are provided.  ``init_db`` runs once at application
start with the blocking ``sqlite3`` module and applies the versioned
migrations listed below.  Request handlers use ``get_db``, a FastAPI
dependency yielding an ``aiosqlite`` connection so that store calls
never block the event loop.  Services receive that connection as an
explicit argument.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import os
import secrets
import sqlite3
import time
from contextlib import contextmanager
from pathlib import Path
from typing import AsyncIterator, Iterator

import aiosqlite

from .config import settings


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id TEXT PRIMARY KEY,
            username TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS exercises (
            id TEXT PRIMARY KEY,
            user_id TEXT NOT NULL,
            description TEXT,
            duration INTEGER,
            date TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
        """,
    ),
    # Migration 2: ISO calendar date next to the display string so that
    # log filters and ordering are chronological.
    (
        2,
        """
        ALTER TABLE exercises ADD COLUMN date_value TEXT;
        CREATE INDEX IF NOT EXISTS idx_exercises_user_date ON exercises(user_id, date_value);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def new_object_id() -> str:
    """Return a new opaque 24 character hexadecimal identifier.

    The first eight characters encode the creation time in seconds,
    the remaining sixteen are random.
    """
    return f"{int(time.time()):08x}{secrets.token_hex(8)}"


def get_connection() -> sqlite3.Connection:
    """Create and return a new blocking SQLite connection."""
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  New migrations must be appended with an
    incremented version number.
    """
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version


async def connect() -> aiosqlite.Connection:
    """Open an asynchronous connection with rows addressable by column name."""
    conn = await aiosqlite.connect(get_database_path())
    conn.row_factory = aiosqlite.Row
    return conn


async def get_db() -> AsyncIterator[aiosqlite.Connection]:
    """FastAPI dependency providing one store connection per request."""
    conn = await connect()
    try:
        yield conn
    finally:
        await conn.close()
