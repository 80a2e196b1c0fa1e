"""Routing — method-keyed route table with static-first dispatch.

Routes are registered during setup. Static paths resolve with a single
dict lookup; dynamic ``{param}`` patterns are scanned in registration
order and matched segment by segment.
"""

from waypost.routing.route import DynamicRoute, RouteEntry, StaticRoute
from waypost.routing.router import Router

__all__ = ["DynamicRoute", "RouteEntry", "Router", "StaticRoute"]
