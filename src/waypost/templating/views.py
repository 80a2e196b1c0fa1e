"""Default view resolution — maps a static path to a template.

Static routes registered without a handler render the view named after
their path: ``/about`` renders ``about.html``, ``/docs/intro`` renders
``docs/intro.html``, and the root path renders the home view. The router
only depends on the ``ViewResolver`` protocol, so the kida-backed
resolver here can be swapped for anything with a ``resolve()`` method.
"""

import logging
from typing import Protocol

from kida import Environment
from kida.environment.exceptions import TemplateNotFoundError

logger = logging.getLogger("waypost.views")


class ViewResolver(Protocol):
    """Anything that turns a resource identifier into a rendered body."""

    def resolve(self, identifier: str) -> str | None:
        """Return the rendered view, or ``None`` if there is none."""
        ...


def view_name(identifier: str, *, home: str = "home") -> str | None:
    """Map a stripped route path to a view name.

    Returns ``None`` for identifiers that try to leave the views
    directory (``..`` segments, backslashes, NUL bytes).
    """
    name = identifier.strip("/")
    if not name:
        return home
    if "\\" in name or "\x00" in name:
        return None
    if any(part in ("", ".", "..") for part in name.split("/")):
        return None
    return name


class TemplateViewResolver:
    """Render views from a kida Environment.

    Usage::

        env = Environment(loader=FileSystemLoader("views"))
        resolver = TemplateViewResolver(env)
        resolver.resolve("")        # views/home.html
        resolver.resolve("/about")  # views/about.html
        resolver.resolve("/nope")   # None

    Each view is rendered with a single context variable, ``view``,
    holding the resolved view name.
    """

    __slots__ = ("_env", "_home", "_suffix")

    def __init__(self, env: Environment, *, suffix: str = ".html", home: str = "home") -> None:
        self._env = env
        self._suffix = suffix
        self._home = home

    def resolve(self, identifier: str) -> str | None:
        name = view_name(identifier, home=self._home)
        if name is None:
            logger.warning("Rejected view identifier %r", identifier)
            return None
        try:
            template = self._env.get_template(name + self._suffix)
        except TemplateNotFoundError:
            return None
        return template.render({"view": name})
