"""Waypost — a small method/path router with default views.

Static paths resolve by exact lookup, ``{param}`` patterns by a
positional scan, and static paths registered without a handler render
the view named after them.

Basic usage::

    from waypost import App

    app = App()

    app.register("GET", "/")  # views/home.html

    @app.route("/records/{id}")
    def record(id: str):
        return f"Record {id}"

Serve ``app`` with any ASGI server.
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "ConfigurationError",
    "HTTPError",
    "NotFound",
    "Response",
    "Router",
    "RouterConfig",
    "WaypostError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypost`` fast while providing a clean top-level API.
    """
    if name == "App":
        from waypost.app import App

        return App

    if name == "RouterConfig":
        from waypost.config import RouterConfig

        return RouterConfig

    if name == "Router":
        from waypost.routing.router import Router

        return Router

    if name == "Response":
        from waypost.http.response import Response

        return Response

    if name in ("WaypostError", "ConfigurationError", "HTTPError", "NotFound"):
        from waypost import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
