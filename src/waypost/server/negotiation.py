"""Content negotiation — maps handler return values to Response objects.

isinstance-based dispatch, no magic, fully predictable.
"""

import json as json_module
from typing import Any

from waypost.http.response import Response


def negotiate(value: Any) -> Response:
    """Convert a route handler's return value to a Response.

    Dispatch order:

    1. ``Response`` -> pass through
    2. ``str`` / ``bytes`` -> 200, ``text/html``
    3. ``None`` -> 200 with an empty body (the handler produced no output)
    4. ``dict`` / ``list`` -> 200, JSON

    Raises ``TypeError`` for anything else.
    """
    match value:
        case Response():
            return value
        case str() | bytes():
            return Response(body=value)
        case None:
            return Response(body="")
        case dict() | list():
            return Response(
                body=json_module.dumps(value, default=str),
                content_type="application/json",
            )
        case _:
            msg = (
                f"Cannot convert {type(value).__name__} to a response. "
                "Return a Response, str, bytes, dict, list, or None."
            )
            raise TypeError(msg)
