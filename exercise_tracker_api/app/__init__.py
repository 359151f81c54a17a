"""
Application package initializer.

The project is organised into small logical pieces: ``core`` holds
configuration, logging, persistence and date handling, ``services``
holds the business logic for users and exercises, ``schemas`` holds
the response models and ``api`` exposes the HTTP routes.
"""

from .main import app  # noqa: F401
