"""Async test client for ASGI apps built on zephyri.

Sends requests through the ASGI interface directly — no sockets involved.

Usage::

    async with TestClient(ASGIApp(router)) as client:
        result = await client.get("/user/42")
        assert result.status == 200
        assert result.text == "42"
"""

import asyncio
from dataclasses import dataclass
from typing import Any
from urllib.parse import unquote

from zephyri._internal.asgi import Message


@dataclass(frozen=True, slots=True)
class TestResponse:
    """What the app sent back, decoded from ASGI messages."""

    __test__ = False  # Tell pytest this is not a test class

    status: int
    headers: tuple[tuple[str, str], ...]
    body: bytes

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")

    @property
    def content_type(self) -> str | None:
        return self.header("content-type")

    def header(self, name: str) -> str | None:
        name = name.lower()
        for key, value in self.headers:
            if key == name:
                return value
        return None


class TestClient:
    """Async test client that drives an ASGI app, lifespan included."""

    __test__ = False  # Tell pytest this is not a test class

    __slots__ = ("_events", "_lifespan", "_lifespan_sent", "app")

    def __init__(self, app: Any) -> None:
        self.app = app
        self._events: asyncio.Queue[Message] = asyncio.Queue()
        self._lifespan_sent: list[Message] = []
        self._lifespan: asyncio.Task[None] | None = None

    async def __aenter__(self) -> "TestClient":
        async def send(message: Message) -> None:
            self._lifespan_sent.append(message)

        self._lifespan = asyncio.create_task(
            self.app({"type": "lifespan", "asgi": {"version": "3.0"}}, self._events.get, send)
        )
        await self._events.put({"type": "lifespan.startup"})
        while not self._lifespan_sent and not self._lifespan.done():
            await asyncio.sleep(0)
        return self

    async def __aexit__(self, *args: object) -> None:
        if self._lifespan is not None:
            await self._events.put({"type": "lifespan.shutdown"})
            await self._lifespan

    @property
    def lifespan_messages(self) -> list[str]:
        """Types of the lifespan messages the app has sent so far."""
        return [message["type"] for message in self._lifespan_sent]

    async def get(self, path: str, *, headers: dict[str, str] | None = None) -> TestResponse:
        """Send a GET request."""
        return await self.request("GET", path, headers=headers)

    async def post(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
    ) -> TestResponse:
        """Send a POST request."""
        return await self.request("POST", path, headers=headers, body=body)

    async def delete(self, path: str, *, headers: dict[str, str] | None = None) -> TestResponse:
        """Send a DELETE request."""
        return await self.request("DELETE", path, headers=headers)

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
    ) -> TestResponse:
        """Send an arbitrary request through the ASGI app."""
        path_part, _, query_string = path.partition("?")

        raw_headers = [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or {}).items()
        ]
        scope: dict[str, Any] = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": method.upper(),
            "path": unquote(path_part),
            "raw_path": path_part.encode("latin-1"),
            "query_string": query_string.encode("latin-1"),
            "root_path": "",
            "headers": raw_headers,
            "server": ("testserver", 80),
            "client": ("127.0.0.1", 0),
        }

        body_sent = False

        async def receive() -> Message:
            nonlocal body_sent
            if not body_sent:
                body_sent = True
                return {"type": "http.request", "body": body or b"", "more_body": False}
            return {"type": "http.disconnect"}

        status = 200
        response_headers: list[tuple[str, str]] = []
        body_parts: list[bytes] = []

        async def send(message: Message) -> None:
            nonlocal status
            if message["type"] == "http.response.start":
                status = message["status"]
                response_headers.extend(
                    (name.decode("latin-1"), value.decode("latin-1"))
                    for name, value in message.get("headers", [])
                )
            elif message["type"] == "http.response.body":
                body_parts.append(message.get("body", b""))

        await self.app(scope, receive, send)
        return TestResponse(status=status, headers=tuple(response_headers), body=b"".join(body_parts))
