"""
Pydantic models for exercises and exercise logs.

``duration`` is optional on output: input that does not start with
digits is kept as "not a number" and serialised as ``null``.
``date`` is always the display string (see ``core.dates``).
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class ExerciseCreate(BaseModel):
    """Body of ``POST /api/users/{id}/exercises``.

    Values usually arrive form‑encoded, so ``duration`` is accepted in
    any shape and coerced by the service.
    """

    description: Optional[str] = Field(None, example="run")
    duration: Any = Field(None, example="15")
    date: Optional[str] = Field(None, example="1990-01-01")


class ExerciseAdded(BaseModel):
    """The owning user merged with the fields of the new exercise."""

    id: str
    username: str
    description: Optional[str] = None
    duration: Optional[int] = None
    date: str


class LogEntry(BaseModel):
    description: Optional[str] = None
    duration: Optional[int] = None
    date: str


class ExerciseLog(BaseModel):
    """A user's exercise log; ``count`` is the length of ``log``."""

    username: str
    count: int
    id: str
    log: List[LogEntry]
