"""Shared type aliases used across waypost modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Static route handler — called with no arguments
StaticHandler: TypeAlias = Callable[[], Any]

# Dynamic route handler — called with one positional str per {param}
DynamicHandler: TypeAlias = Callable[..., Any]

# Either of the above, as accepted by Router.register()
Handler: TypeAlias = Callable[..., Any]
