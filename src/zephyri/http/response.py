"""Mutable response writer handed to ``HTTPRouter`` handlers.

Handlers set the status and headers, ``write()`` any number of chunks,
then ``end()``. The ASGI bridge sends whatever was buffered once the
handler returns.
"""


class Response:
    """A buffered HTTP response.

    Usage::

        def show_user(req, res, params):
            res.status = 200
            res.set_header("content-type", "application/json")
            res.end(json.dumps(params))
    """

    __slots__ = ("_chunks", "_finished", "content_type", "headers", "status")

    def __init__(self, status: int = 200, content_type: str = "text/plain; charset=utf-8") -> None:
        self.status = status
        self.content_type = content_type
        self.headers: list[tuple[str, str]] = []
        self._chunks: list[bytes] = []
        self._finished = False

    @property
    def finished(self) -> bool:
        """True once ``end()`` has been called."""
        return self._finished

    @property
    def body(self) -> bytes:
        return b"".join(self._chunks)

    def set_header(self, name: str, value: str) -> None:
        """Set header *name*, replacing earlier values (``content-type`` included)."""
        name = name.lower()
        if name == "content-type":
            self.content_type = value
            return
        self.headers = [(k, v) for k, v in self.headers if k != name]
        self.headers.append((name, value))

    def write(self, chunk: str | bytes) -> None:
        if self._finished:
            msg = "Cannot write to a response after end()."
            raise RuntimeError(msg)
        self._chunks.append(chunk.encode("utf-8") if isinstance(chunk, str) else chunk)

    def end(self, chunk: str | bytes = b"") -> None:
        """Write a final *chunk* and mark the response finished."""
        self.write(chunk)
        self._finished = True

    def __repr__(self) -> str:
        state = "finished" if self._finished else "open"
        return f"<Response {self.status} {state}>"
