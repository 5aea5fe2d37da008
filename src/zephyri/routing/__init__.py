"""Routing — pattern compilation and an ordered, first-match-wins route table."""

from zephyri.routing.compile import compile_route
from zephyri.routing.route import Route, RouteHandler, RouteMatch
from zephyri.routing.router import Router

__all__ = ["Route", "RouteHandler", "RouteMatch", "Router", "compile_route"]
