"""Waypost CLI — route table inspection and one-off dispatch.

Entry point registered as ``waypost`` in ``pyproject.toml``::

    [project.scripts]
    waypost = "waypost.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waypost`` command."""
    parser = argparse.ArgumentParser(
        prog="waypost",
        description="Waypost — a small method/path router with default views.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- waypost routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("app", help="Import string (e.g. myapp:app)")

    # -- waypost dispatch -------------------------------------------------
    dispatch_parser = subparsers.add_parser(
        "dispatch", help="Send one request through the app and print the response"
    )
    dispatch_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    dispatch_parser.add_argument("method", help="HTTP method (e.g. GET)")
    dispatch_parser.add_argument("path", help="Request path (e.g. /records/42)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from waypost.cli._routes import run_routes

        run_routes(args)
    elif args.command == "dispatch":
        from waypost.cli._dispatch import run_dispatch

        run_dispatch(args)
