"""Method-keyed router with static-first, then dynamic, matching.

Routes are registered during setup and frozen on the first dispatch.
The table is a two-level mapping ``{method: {key: RouteEntry}}`` where
``key`` is the stripped path for static routes and the literal pattern
for dynamic ones.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from waypost._internal.types import Handler, StaticHandler
from waypost.errors import ConfigurationError, NotFound
from waypost.routing.params import extract_params, has_params, match_segments
from waypost.routing.route import DynamicRoute, RouteEntry, StaticRoute, is_param_segment

if TYPE_CHECKING:
    from waypost.templating.views import ViewResolver

logger = logging.getLogger("waypost.routing")


def normalize_request_path(uri: str) -> str:
    """Reduce a request URI to the key used for matching.

    Drops the query string and fragment, strips trailing slashes, and
    lowercases. The root path normalizes to ``""``.
    """
    path = uri.partition("?")[0].partition("#")[0]
    return path.rstrip("/").lower()


class Router:
    """Route table plus the dispatch algorithm.

    Usage::

        router = Router(views=resolver)
        router.register("GET", "/")                       # renders views/home.html
        router.register("GET", "/about", about)
        router.register("GET", "/records/{id}", show_record)
        router.dispatch("GET", "/records/42")             # show_record("42")

    Static routes are looked up directly and always win over dynamic
    patterns that would also match. Dynamic patterns are tried in the
    order they were registered; the first match is the only handler
    invoked.
    """

    __slots__ = ("_frozen", "_routes", "_views")

    def __init__(self, views: ViewResolver | None = None) -> None:
        self._routes: dict[str, dict[str, RouteEntry]] = {}
        self._views = views
        self._frozen = False

    # -- Registration --

    def register(self, method: str, path: str, handler: Handler | None = None) -> None:
        """Register a handler for *method* and *path*.

        A path containing ``{param}`` segments is registered as a dynamic
        route and requires a handler that accepts one positional string
        per segment. A static path without a handler falls back to the
        view named after the path (``/about`` renders ``about``, ``/``
        renders the home view).

        Registering the same method and path again replaces the earlier
        entry.

        Raises:
            ConfigurationError: If *method* is empty, or *path* is
                dynamic and no handler was given.
            RuntimeError: If the router has already dispatched.
        """
        if self._frozen:
            msg = "Cannot register routes after dispatch has begun."
            raise RuntimeError(msg)
        if not method or not method.strip():
            msg = "Route method cannot be empty."
            raise ConfigurationError(msg)

        path = path.rstrip("/")
        if any(seg != seg.lower() for seg in path.split("/") if not is_param_segment(seg)):
            logger.warning(
                "Route %s %r has uppercase literal segments; request paths are "
                "lowercased before matching, so it will never match.",
                method,
                path,
            )

        dynamic = has_params(path)
        if dynamic and handler is None:
            msg = (
                f"Dynamic route {method} {path!r} needs a handler. "
                "Only static paths fall back to a default view."
            )
            raise ConfigurationError(msg)

        table = self._routes.setdefault(method, {})

        if dynamic:
            table[path] = DynamicRoute(
                pattern=path,
                handler=handler,
                segments=tuple(path.split("/")),
            )
            logger.debug("Registered dynamic route %s %r", method, path)
            return

        if handler is None:
            table[path] = StaticRoute(
                path=path, handler=self._default_handler(path), is_default=True
            )
            logger.debug("Registered default view route %s %r", method, path)
            return

        table[path] = StaticRoute(path=path, handler=handler)
        logger.debug("Registered static route %s %r", method, path)

    def _default_handler(self, path: str) -> StaticHandler:
        """Build the zero-argument handler that renders the view for *path*."""

        def render_view() -> str:
            if self._views is None:
                raise NotFound(f"No view resolver configured for {path or '/'!r}")
            body = self._views.resolve(path)
            if body is None:
                raise NotFound(f"No view for {path or '/'!r}")
            return body

        return render_view

    def freeze(self) -> None:
        """Freeze the route table. No more routes can be registered."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def routes(self) -> list[tuple[str, RouteEntry]]:
        """Return ``(method, entry)`` pairs in registration order.

        Useful for introspection (``waypost routes``) and debugging.
        """
        return [
            (method, entry)
            for method, table in self._routes.items()
            for entry in table.values()
        ]

    # -- Dispatch --

    def dispatch(self, method: str, uri: str) -> Any:
        """Invoke the handler matching *method* and *uri* and return its result.

        The path component of *uri* is stripped of trailing slashes and
        lowercased, then tried as a static key before dynamic patterns
        are scanned. Parameters are passed to dynamic handlers
        positionally, sanitized, in pattern order.

        Raises ``NotFound`` if nothing matches. Exceptions raised by the
        handler propagate unchanged.
        """
        self._frozen = True

        path = normalize_request_path(uri)
        url_segments = path.split("/")
        table = self._routes.get(method, {})

        # 1. Static — exact key lookup
        entry = table.get("/".join(url_segments))
        if isinstance(entry, StaticRoute):
            logger.debug("Dispatch %s %r -> static %r", method, uri, entry.path)
            return entry.handler()

        # 2. Dynamic — first matching pattern in registration order
        for entry in table.values():
            if not isinstance(entry, DynamicRoute):
                continue
            if match_segments(entry.segments, url_segments):
                params = extract_params(entry.segments, url_segments)
                logger.debug("Dispatch %s %r -> dynamic %r", method, uri, entry.pattern)
                return entry.handler(*params)

        logger.debug("Dispatch %s %r -> no match", method, uri)
        raise NotFound(f"No route matches {method} {path or '/'!r}")
