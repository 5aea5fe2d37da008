"""ASGI bridge — serves an ``HTTPRouter`` to any ASGI 3 server.

The only component that touches raw ASGI directly. Reads the request
body, builds ``Request``/``Response``, runs ``router.lookup()``
synchronously, and sends the buffered response back.

Policies that belong to the host, not the router:

- a lookup that leaves the response unfinished is answered with 404
- a handler exception is logged and answered with 500
"""

import logging

from zephyri._internal.asgi import Message, Receive, Scope, Send
from zephyri.config import ServerConfig
from zephyri.http.request import Request
from zephyri.http.response import Response
from zephyri.http.router import HTTPRouter

logger = logging.getLogger("zephyri.server")


async def read_body(receive: Receive) -> bytes:
    """Drain ``http.request`` messages into a single body."""
    chunks: list[bytes] = []
    while True:
        message = await receive()
        if message["type"] == "http.disconnect":
            break
        chunks.append(message.get("body", b""))
        if not message.get("more_body", False):
            break
    return b"".join(chunks)


def response_messages(response: Response) -> tuple[Message, Message]:
    """The ``http.response.start`` and ``http.response.body`` messages for *response*.

    ``content-length`` is always computed here; a handler-set value is dropped.
    1xx, 204 and 304 responses go out with an empty body.
    """
    status = response.status
    body = b"" if status < 200 or status in (204, 304) else response.body
    headers = [(b"content-type", response.content_type.encode("latin-1"))]
    for name, value in response.headers:
        if name != "content-length":
            headers.append((name.encode("latin-1"), value.encode("latin-1")))
    headers.append((b"content-length", b"%d" % len(body)))
    start = {"type": "http.response.start", "status": status, "headers": headers}
    return start, {"type": "http.response.body", "body": body}


class ASGIApp:
    """ASGI 3.0 application wrapping an ``HTTPRouter[Request, Response]``.

    Usage::

        router = HTTPRouter[Request, Response]().on("GET", "/", index)
        app = ASGIApp(router)
    """

    __slots__ = ("config", "router")

    def __init__(
        self,
        router: HTTPRouter[Request, Response],
        config: ServerConfig | None = None,
    ) -> None:
        self.router = router
        self.config = config or ServerConfig()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        request = Request.from_asgi(scope, await read_body(receive))
        for message in response_messages(self.dispatch(request)):
            await send(message)

    def dispatch(self, request: Request) -> Response:
        """Route *request* and return the response to send."""
        response = Response()
        try:
            self.router.lookup(request, response)
        except Exception as exc:
            logger.exception("500 %s %s", request.method, request.url)
            detail = f"Internal Server Error: {exc}" if self.config.debug else "Internal Server Error"
            error = Response(status=500)
            error.end(detail)
            return error

        if not response.finished:
            logger.debug("404 %s %s (no handler finished the response)", request.method, request.url)
            not_found = Response(status=404)
            not_found.end("Not Found")
            return not_found
        return response

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Acknowledge lifespan startup and shutdown; there is nothing to set up."""
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
