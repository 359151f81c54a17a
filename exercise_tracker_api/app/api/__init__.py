"""
API package containing the HTTP routes.

``router.py`` aggregates the domain routers defined in ``endpoints``
and is mounted under ``/api`` by the application factory.
"""
