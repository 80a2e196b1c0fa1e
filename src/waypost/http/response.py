"""The value a handler returns (or ``negotiate()`` builds) to answer a request."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Response:
    """An immutable HTTP response.

    Handlers that need more than a 200 with an HTML body build one and
    adjust it; every ``with_*`` call returns a copy::

        return Response("Created").with_status(201).with_header("Location", "/records/7")
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> Response:
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        return replace(self, headers=(*self.headers, (name, value)))

    @property
    def body_bytes(self) -> bytes:
        """Body encoded as UTF-8 when it is a ``str``."""
        return self.body.encode("utf-8") if isinstance(self.body, str) else self.body

    @property
    def text(self) -> str:
        """Body decoded as UTF-8 when it is ``bytes``."""
        return self.body.decode("utf-8") if isinstance(self.body, bytes) else self.body
