"""Zephyri exception hierarchy.

Shared across the pattern compiler, router, and server layer so every
module raises and catches the same types. Not finding a route is not an
error and has no exception type.
"""


class ZephyriError(Exception):
    """Base for all zephyri-specific errors."""


class ConfigurationError(ZephyriError):
    """Raised when server configuration is invalid.

    Typically raised by ``ServerConfig.validate()`` before the server starts.
    """


class CompileError(ZephyriError):
    """A route pattern produced an invalid regular expression.

    Raised synchronously at registration time. The route is not added.
    The underlying ``re.error`` is chained as ``__cause__``.
    """

    def __init__(self, pattern: str, expression: str, reason: str = "") -> None:
        self.pattern = pattern
        self.expression = expression
        self.reason = reason
        super().__init__(pattern, expression, reason)

    def __str__(self) -> str:
        msg = f"Cannot compile route pattern {self.pattern!r} (generated {self.expression!r})"
        if self.reason:
            return f"{msg}: {self.reason}"
        return msg
