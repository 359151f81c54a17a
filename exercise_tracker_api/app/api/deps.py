"""Request helpers shared by the endpoint modules."""

from typing import Any, Dict

from fastapi import Request


async def read_payload(request: Request) -> Dict[str, Any]:
    """Return the request body as a flat dictionary.

    HTML forms post ``application/x-www-form-urlencoded`` bodies; API
    clients may send JSON instead.  Both are accepted.  An empty body
    yields an empty dictionary.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        body = await request.body()
        if not body:
            return {}
        data = await request.json()
        if not isinstance(data, dict):
            raise ValueError("JSON body must be an object")
        return data
    form = await request.form()
    return dict(form)
