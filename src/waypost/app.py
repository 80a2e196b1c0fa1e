"""Waypost application class.

Mutable during setup (route registration). Frozen at runtime when
``__call__()`` or ``dispatch()`` is first invoked.
"""

import inspect
import threading
from collections.abc import Callable, Iterable
from typing import Any

from waypost._internal.asgi import Receive, Scope, Send
from waypost._internal.types import Handler
from waypost.config import RouterConfig
from waypost.routing.router import Router
from waypost.server.handler import handle_request
from waypost.templating.integration import create_environment
from waypost.templating.views import TemplateViewResolver, ViewResolver


class _LazyViews:
    """Defers building the kida environment until the first view render.

    Lets an app register routes before ``views_dir`` exists, and keeps
    apps that never fall back to a default view from touching the
    filesystem at all.
    """

    __slots__ = ("_config", "_lock", "_resolver")

    def __init__(self, config: RouterConfig) -> None:
        self._config = config
        self._resolver: TemplateViewResolver | None = None
        self._lock = threading.Lock()

    def resolve(self, identifier: str) -> str | None:
        if self._resolver is None:
            with self._lock:
                if self._resolver is None:
                    self._resolver = TemplateViewResolver(
                        create_environment(self._config),
                        suffix=self._config.view_suffix,
                        home=self._config.home_view,
                    )
        return self._resolver.resolve(identifier)


class App:
    """The waypost application.

    Wraps a ``Router`` with a decorator API, a default view resolver
    built from ``RouterConfig``, and an ASGI 3.0 entry point::

        app = App()

        @app.route("/records/{id}")
        def record(id: str):
            return f"Record {id}"

        app.register("GET", "/")  # renders views/home.html

    Thread safety:
        Registration is single-threaded (decorators at import time).
        The freeze transition uses a Lock + double-check so exactly one
        thread freezes the router, even if several ASGI workers call
        ``__call__()`` concurrently on first request.
    """

    __slots__ = (
        "_freeze_lock",
        "_frozen",
        "_router",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
    )

    def __init__(
        self,
        config: RouterConfig | None = None,
        *,
        views: ViewResolver | None = None,
    ) -> None:
        self.config: RouterConfig = config or RouterConfig()
        self._router = Router(views=views if views is not None else _LazyViews(self.config))
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    # -- Registration --

    def route(
        self,
        path: str,
        *,
        methods: Iterable[str] = ("GET",),
    ) -> Callable[[Handler], Handler]:
        """Register the decorated function for *path* under each method.

        Dynamic segments are passed to the function positionally::

            @app.route("/blog/{category}/{slug}")
            def post(category: str, slug: str): ...
        """

        def decorator(func: Handler) -> Handler:
            for method in methods:
                self.register(method, path, func)
            return func

        return decorator

    def register(self, method: str, path: str, handler: Handler | None = None) -> None:
        """Register a route. See ``Router.register()``."""
        self._check_not_frozen()
        self._router.register(method, path, handler)

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a hook to run at ASGI lifespan startup (sync or async)."""
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a hook to run at ASGI lifespan shutdown (sync or async)."""
        self._shutdown_hooks.append(func)
        return func

    @property
    def router(self) -> Router:
        return self._router

    # -- Dispatch --

    def dispatch(self, method: str, uri: str) -> Any:
        """Dispatch directly, bypassing ASGI. See ``Router.dispatch()``."""
        self._ensure_frozen()
        return self._router.dispatch(method, uri)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles the lifespan scope directly, then delegates HTTP scopes
        to the request handler.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(scope, receive, send)
            return

        self._ensure_frozen()
        await handle_request(scope, receive, send, router=self._router)

    async def _handle_lifespan(
        self,
        scope: Scope,
        receive: Receive,
        send: Send,
    ) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup (before first HTTP request), then
        runs registered startup/shutdown hooks and signals completion
        back to the server.
        """
        self._ensure_frozen()

        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    for hook in self._startup_hooks:
                        result = hook()
                        if inspect.isawaitable(result):
                            await result
                    await send({"type": "lifespan.startup.complete"})
                except Exception as exc:
                    await send(
                        {
                            "type": "lifespan.startup.failed",
                            "message": str(exc),
                        }
                    )
                    return

            elif msg_type == "lifespan.shutdown":
                try:
                    for hook in self._shutdown_hooks:
                        result = hook()
                        if inspect.isawaitable(result):
                            await result
                    await send({"type": "lifespan.shutdown.complete"})
                except Exception as exc:
                    await send(
                        {
                            "type": "lifespan.shutdown.failed",
                            "message": str(exc),
                        }
                    )
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._router.freeze()
            self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = "Cannot modify the app after it has started handling requests."
            raise RuntimeError(msg)
