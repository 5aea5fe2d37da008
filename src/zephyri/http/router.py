"""HTTP-facing router: method filtering on top of the generic ``Router``.

Usage::

    router = (
        HTTPRouter[Request, Response]()
        .on("GET", "/:param", lambda req, res, params: res.end(str(params)))
        .on("GET", "/user/:id", lambda req, res, params: res.end(params["id"]))
        .on("GET", "**", lambda req, res, params: res.end("404"))
    )
    router.lookup(request, response)
"""

from collections.abc import Callable
from typing import Protocol, Self
from urllib.parse import urlsplit

from zephyri.routing.router import Router


class URLReq(Protocol):
    """The minimum a request must provide to be routed."""

    @property
    def url(self) -> str: ...

    @property
    def method(self) -> str: ...


type HTTPRouterHandler[T, U] = Callable[[T, U, dict[str, str]], object]


def lookup_path(url: str) -> str:
    """Reduce a request URL to its path, the string matched against routes.

    Scheme, host, query string, and fragment are dropped. Query values
    may hold characters (``/``, ``.``, ``+``) the routes' optional
    ``?query`` suffix does not accept.
    """
    if "://" not in url:
        # Origin-form ("/a?b"); urlsplit would read "//a" as a host.
        return url.partition("#")[0].partition("?")[0]
    return urlsplit(url).path or "/"


class HTTPRouter[T: URLReq, U]:
    """A router for HTTP servers: ``(method, pattern) -> handler(req, res, params)``.

    Matching is by path only, in registration order. The method is checked
    after the path matched, so a ``GET /x`` route registered first will
    swallow a ``DELETE /x`` lookup without running anything.
    """

    __slots__ = ("router",)

    def __init__(self) -> None:
        self.router: Router[T, U] = Router()

    def on(self, method: str, pattern: str, handler: HTTPRouterHandler[T, U]) -> Self:
        """Register *handler* for *method* requests matching *pattern*. Chainable."""

        def dispatch(params: dict[str, str], req: T, res: U) -> None:
            if req.method == method:
                handler(req, res, params)

        self.router.register(pattern, dispatch)
        return self

    def lookup(self, req: T, res: U) -> None:
        """Run the handler for the first route matching ``req.url``, if any."""
        self.router.resolve(lookup_path(req.url), req, res)
