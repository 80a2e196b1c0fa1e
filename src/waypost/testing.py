"""Test client for waypost applications.

Sends requests through the app's ASGI interface, with no network, and
hands back the ``Response`` the app sent.
"""

from typing import Any
from urllib.parse import unquote

from waypost.app import App
from waypost.http.response import Response


class TestClient:
    """Async client that drives an ``App`` like an ASGI server would.

    The request target is split the way servers split it: ``raw_path``
    carries the path as sent, ``path`` carries it percent-decoded, and
    anything after ``?`` goes to ``query_string``::

        async with TestClient(app) as client:
            response = await client.get("/records/a%2Fb")
            assert response.text == "id=a%2fb"
    """

    __test__ = False  # not a pytest test class
    __slots__ = ("app",)

    def __init__(self, app: App) -> None:
        self.app = app

    async def __aenter__(self) -> "TestClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        pass

    async def get(self, target: str) -> Response:
        return await self.request("GET", target)

    async def post(self, target: str) -> Response:
        return await self.request("POST", target)

    async def put(self, target: str) -> Response:
        return await self.request("PUT", target)

    async def delete(self, target: str) -> Response:
        return await self.request("DELETE", target)

    async def request(self, method: str, target: str) -> Response:
        """Send *method* *target* and collect the response messages."""
        raw_path, _, query = target.partition("?")
        scope: dict[str, Any] = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": method.upper(),
            "path": unquote(raw_path),
            "raw_path": raw_path.encode("latin-1"),
            "query_string": query.encode("latin-1"),
            "root_path": "",
            "headers": [],
            "server": ("testserver", 80),
            "client": ("127.0.0.1", 0),
        }

        async def receive() -> dict[str, Any]:
            return {"type": "http.request", "body": b"", "more_body": False}

        started: dict[str, Any] = {}
        chunks: list[bytes] = []

        async def send(message: dict[str, Any]) -> None:
            if message["type"] == "http.response.start":
                started.update(message)
            elif message["type"] == "http.response.body":
                chunks.append(message.get("body", b""))

        await self.app(scope, receive, send)

        headers = [
            (name.decode("latin-1"), value.decode("latin-1"))
            for name, value in started.get("headers", [])
        ]
        content_type = next(
            (value for name, value in headers if name == "content-type"),
            "text/html; charset=utf-8",
        )
        return Response(
            body=b"".join(chunks),
            status=started.get("status", 200),
            content_type=content_type,
            headers=tuple(
                (name, value)
                for name, value in headers
                if name not in ("content-type", "content-length")
            ),
        )
