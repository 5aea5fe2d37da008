"""Ordered route table with first-match-wins lookup.

Routes are tested in the order they were registered. There is no
specificity ranking: register ``/app`` before ``/:param`` if ``/app``
should win.
"""

from zephyri.routing.compile import compile_route
from zephyri.routing.route import Route, RouteHandler, RouteMatch


class Router[*Ts]:
    """A use-case agnostic router for holding and matching routes.

    ``Ts`` are the types of the extra values passed from ``resolve()``
    through to every handler.

    Usage::

        router: Router[str] = Router()
        router.register("/user/:id", lambda params, who: print(who, params["id"]))
        router.resolve("/user/42", "alice")   # prints "alice 42"
        router.resolve("/nothing", "alice")   # no route, nothing happens

    Registration is not thread-safe. Finish registering before serving
    concurrent lookups.
    """

    __slots__ = ("_routes",)

    def __init__(self) -> None:
        self._routes: list[Route[*Ts]] = []

    @property
    def routes(self) -> list[Route[*Ts]]:
        """Registered routes, in registration (and therefore priority) order."""
        return list(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def register(self, pattern: str, handler: RouteHandler[*Ts]) -> None:
        """Compile *pattern* and append a route for it.

        Raises ``CompileError`` for a malformed pattern, leaving the table
        unchanged. Duplicate patterns are allowed; the earlier one wins.
        """
        self._routes.append(Route(path=pattern, matcher=compile_route(pattern), handler=handler))

    def find(self, path: str) -> Route[*Ts] | None:
        """Return the first route that matches *path*, or ``None``."""
        for route in self._routes:
            if route.matches(path):
                return route
        return None

    def match(self, path: str) -> RouteMatch[*Ts] | None:
        """Find the route for *path* and extract its parameters."""
        for route in self._routes:
            found = route.matcher.match(path)
            if found is not None:
                return RouteMatch(route=route, params=found.groupdict())
        return None

    def resolve(self, path: str, *data: *Ts) -> None:
        """Run the handler of the first route matching *path*.

        The handler receives ``(params, *data)``. Exceptions raised by the
        handler propagate unchanged. If nothing matches, this is a no-op.
        """
        found = self.match(path)
        if found is not None:
            found.route.handler(found.params, *data)
