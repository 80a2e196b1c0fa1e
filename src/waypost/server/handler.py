"""ASGI handler — translates ASGI scope/messages to waypost calls.

The only component that touches raw ASGI HTTP messages directly. Reads
the request method and path from the scope, dispatches through the
router, and sends the Response back through ASGI send().
"""

import inspect
import logging

from waypost._internal.asgi import HTTPScope, Receive, Scope, Send
from waypost.errors import HTTPError
from waypost.http.response import Response
from waypost.routing.router import Router
from waypost.server.negotiation import negotiate
from waypost.server.sender import send_response

logger = logging.getLogger("waypost.server")


def error_response(exc: HTTPError) -> Response:
    """Empty-bodied response carrying the error's status and headers."""
    return Response(body="", status=exc.status, headers=exc.headers)


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
) -> None:
    """Process a single HTTP request: dispatch, negotiate, send."""
    if scope["type"] != "http":
        return

    http_scope = HTTPScope.from_scope(scope)

    try:
        result = router.dispatch(http_scope.method, http_scope.request_uri)
        if inspect.isawaitable(result):
            result = await result
        response = negotiate(result)
    except HTTPError as exc:
        response = error_response(exc)
    except Exception:
        logger.exception(
            "Unhandled error dispatching %s %s", http_scope.method, http_scope.path
        )
        response = Response(body="", status=500)

    await send_response(response, send)
