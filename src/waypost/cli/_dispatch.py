"""``waypost dispatch`` — send one request through an app.

Goes through the full ASGI pipeline via ``TestClient``, so the printed
status and body are exactly what a server would send.
"""

import argparse
import sys

import anyio

from waypost.cli._resolve import resolve_app
from waypost.testing import TestClient


def run_dispatch(args: argparse.Namespace) -> None:
    """Print ``<status>`` followed by the response body.

    Exits with status 1 when the response is a 4xx or 5xx.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    client = TestClient(app)
    response = anyio.run(client.request, args.method, args.path)

    print(response.status)
    if response.body:
        print(response.text)
    if response.status >= 400:
        raise SystemExit(1)
