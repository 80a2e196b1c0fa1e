"""StaticRoute and DynamicRoute frozen dataclasses."""

from dataclasses import dataclass
from typing import TypeAlias

from waypost._internal.types import DynamicHandler, StaticHandler


@dataclass(frozen=True, slots=True)
class StaticRoute:
    """A route matched by exact path lookup.

    ``path`` is the registered path with trailing slashes stripped
    (the root route is stored as ``""``). ``is_default`` marks a
    handler synthesized by the router to render a view.
    """

    path: str
    handler: StaticHandler
    is_default: bool = False


@dataclass(frozen=True, slots=True)
class DynamicRoute:
    """A route whose pattern contains ``{param}`` segments.

    ``segments`` is the pattern split on ``/`` once at registration,
    including the leading empty segment of an absolute pattern.
    """

    pattern: str
    handler: DynamicHandler
    segments: tuple[str, ...]

    @property
    def param_names(self) -> tuple[str, ...]:
        """Parameter names in left-to-right order, braces removed."""
        return tuple(seg[1:-1] for seg in self.segments if is_param_segment(seg))


RouteEntry: TypeAlias = StaticRoute | DynamicRoute


def is_param_segment(segment: str) -> bool:
    """Whether *segment* is a ``{...}`` placeholder."""
    return segment.startswith("{") and segment.endswith("}")
