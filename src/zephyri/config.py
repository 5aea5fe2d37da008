"""Server configuration.

ServerConfig is a frozen dataclass — immutable after creation, no
string-key dict lookups. The router itself takes no configuration.
"""

from dataclasses import dataclass

from zephyri.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Configuration for hosting an ``HTTPRouter`` over ASGI.

    All fields have defaults. Override what you need::

        config = ServerConfig(port=3000, debug=True)
    """

    host: str = "127.0.0.1"
    port: int = 8000

    # Include exception text in 500 responses
    debug: bool = False

    workers: int = 1
    reload: bool = False
    reload_include: tuple[str, ...] = ()  # Extra extensions to watch (e.g. ".html")
    reload_dirs: tuple[str, ...] = ()  # Extra directories to watch alongside cwd

    def validate(self) -> None:
        """Raise ``ConfigurationError`` if the settings cannot be served."""
        if not 0 <= self.port <= 65535:
            msg = f"port must be between 0 and 65535, got {self.port}"
            raise ConfigurationError(msg)
        if self.workers < 1:
            msg = f"workers must be at least 1, got {self.workers}"
            raise ConfigurationError(msg)
        if self.reload and self.workers != 1:
            msg = "reload requires a single worker"
            raise ConfigurationError(msg)
