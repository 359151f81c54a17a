"""
Top‑level API router.

Aggregates the domain routers under a unified prefix.  Both routers
share the ``/users`` prefix: exercises and logs are addressed through
the user that owns them.
"""

from fastapi import APIRouter

from .endpoints import exercises, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(exercises.router, prefix="/users", tags=["exercises"])
