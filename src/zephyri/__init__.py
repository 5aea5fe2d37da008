"""Zephyri — a minimal, ordered, first-match-wins request router.

Generic usage::

    from zephyri import Router

    router = Router()
    router.register("/user/:name/:message", lambda params: print(params))
    router.resolve("/user/bree/123")  # {'name': 'bree', 'message': '123'}

HTTP usage (``pip install zephyri[server]`` to serve it)::

    from zephyri import ASGIApp, HTTPRouter, Request, Response, run_server

    router = (
        HTTPRouter[Request, Response]()
        .on("GET", "/user/:id", lambda req, res, params: res.end(params["id"]))
        .on("GET", "**", lambda req, res, params: res.end("404"))
    )
    run_server(ASGIApp(router))
"""

__version__ = "0.1.0"
__all__ = [
    "ASGIApp",
    "CompileError",
    "ConfigurationError",
    "HTTPRouter",
    "Request",
    "Response",
    "Route",
    "RouteMatch",
    "Router",
    "ServerConfig",
    "URLReq",
    "ZephyriError",
    "compile_route",
    "run_server",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import zephyri`` fast while providing a clean top-level API.
    """
    if name in ("Route", "RouteMatch", "Router", "compile_route"):
        from zephyri import routing as _routing

        return getattr(_routing, name)

    if name in ("HTTPRouter", "URLReq"):
        from zephyri.http import router as _http_router

        return getattr(_http_router, name)

    if name == "Request":
        from zephyri.http.request import Request

        return Request

    if name == "Response":
        from zephyri.http.response import Response

        return Response

    if name == "ServerConfig":
        from zephyri.config import ServerConfig

        return ServerConfig

    if name == "ASGIApp":
        from zephyri.server.asgi import ASGIApp

        return ASGIApp

    if name == "run_server":
        from zephyri.server.runner import run_server

        return run_server

    if name in ("ZephyriError", "CompileError", "ConfigurationError"):
        from zephyri import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
