"""Immutable HTTP request handed to ``HTTPRouter`` handlers.

Built by the ASGI bridge after the body has been read in full, so
handlers stay synchronous.
"""

from dataclasses import dataclass

from zephyri._internal.asgi import Scope


def request_path(scope: Scope) -> str:
    """The request path as sent on the wire, still percent-encoded.

    ``scope["path"]`` is already percent-decoded, which would let ``%2F``
    split a segment. ``raw_path`` is optional in ASGI, hence the fallback.
    Some servers leave the query string on ``raw_path``; it is cut off.
    """
    raw_path = scope.get("raw_path")
    if raw_path:
        return raw_path.decode("latin-1").partition("?")[0]
    return scope["path"]


@dataclass(frozen=True, slots=True)
class Request:
    """A received HTTP request. Satisfies the ``URLReq`` protocol."""

    method: str
    path: str
    query_string: str = ""
    headers: tuple[tuple[str, str], ...] = ()
    body: bytes = b""

    @property
    def url(self) -> str:
        """Request target: path plus ``?query`` when present."""
        if self.query_string:
            return f"{self.path}?{self.query_string}"
        return self.path

    def header(self, name: str, default: str | None = None) -> str | None:
        """First value of header *name* (case-insensitive), or *default*."""
        name = name.lower()
        for key, value in self.headers:
            if key == name:
                return value
        return default

    def text(self) -> str:
        return self.body.decode("utf-8")

    @classmethod
    def from_asgi(cls, scope: Scope, body: bytes = b"") -> "Request":
        """Create a Request from an ASGI HTTP scope and its read body."""
        headers = tuple(
            (name.decode("latin-1").lower(), value.decode("latin-1"))
            for name, value in scope.get("headers", ())
        )
        return cls(
            method=scope["method"],
            path=request_path(scope),
            query_string=scope.get("query_string", b"").decode("latin-1"),
            headers=headers,
            body=body,
        )
