"""``waypost routes`` — list registered routes.

Prints METHOD, PATH, KIND and HANDLER for every entry in registration
order, which is also the order dynamic patterns are tried in.
"""

import argparse
import sys

from waypost.cli._resolve import resolve_app
from waypost.routing.route import DynamicRoute, StaticRoute


def _describe(entry: StaticRoute | DynamicRoute) -> tuple[str, str, str]:
    if isinstance(entry, DynamicRoute):
        handler_name = getattr(entry.handler, "__name__", str(entry.handler))
        return entry.pattern, "dynamic", handler_name
    if entry.is_default:
        return entry.path or "/", "view", "(default view)"
    handler_name = getattr(entry.handler, "__name__", str(entry.handler))
    return entry.path or "/", "static", handler_name


def run_routes(args: argparse.Namespace) -> None:
    """List registered routes for a waypost app."""
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = app.router.routes
    if not routes:
        print("No routes registered.")
        return

    rows = [(method, *_describe(entry)) for method, entry in routes]

    widths = [max(len(header), *(len(row[i]) for row in rows))
              for i, header in enumerate(("METHOD", "PATH", "KIND"))]
    fmt = f"{{:<{widths[0]}}}  {{:<{widths[1]}}}  {{:<{widths[2]}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "KIND", "HANDLER"))
    sep_len = sum(widths) + 6 + max(len(row[3]) for row in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
