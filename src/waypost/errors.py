"""Waypost exception hierarchy.

Shared across Router, App, and the ASGI boundary so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class WaypostError(Exception):
    """Base for all waypost-specific errors."""


class ConfigurationError(WaypostError):
    """Raised when a route registration or app configuration is invalid.

    Raised eagerly from ``Router.register()`` so mistakes surface at
    startup rather than as a silent 404 at request time.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(WaypostError):
    """An error that maps directly to an HTTP status code.

    Raised by the router or by handlers. The ASGI handler catches these
    and sends a response with ``status`` and ``headers`` and no body.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no route or view matched the request."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
