"""Typed ASGI definitions.

Replaces the standard Scope = MutableMapping[str, Any] with a typed
dataclass for internal use. Users never see these.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from dataclasses import dataclass
from typing import Any, TypeAlias

# Raw ASGI 3.0 types
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class HTTPScope:
    """The request line as the router sees it.

    This is the ambient request context: the server supplies the method
    and path here, and the handler passes them to ``Router.dispatch()``.
    """

    method: str
    path: str
    raw_path: bytes = b""

    @classmethod
    def from_scope(cls, scope: Scope) -> "HTTPScope":
        """Parse raw ASGI scope into typed object."""
        return cls(
            method=scope["method"],
            path=scope["path"],
            raw_path=scope.get("raw_path") or b"",
        )

    @property
    def request_uri(self) -> str:
        """The path exactly as the client sent it, still percent-encoded.

        ``path`` is already decoded by the server, so an encoded ``%2F``
        inside a parameter would split into two segments. Servers that
        omit ``raw_path`` fall back to ``path``.
        """
        if self.raw_path:
            return self.raw_path.decode("latin-1")
        return self.path
