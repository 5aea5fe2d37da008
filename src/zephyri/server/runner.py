"""Run an ASGI app under pounce.

Requires the ``server`` extra (``pip install zephyri[server]``).
"""

from zephyri.config import ServerConfig
from zephyri.errors import ConfigurationError


def run_server(app: object, config: ServerConfig | None = None) -> None:
    """Start a pounce server with the given ASGI callable.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``),
    but here we have a live object, so ``pounce.Server`` is used
    directly with the ASGI callable.

    Raises ``ConfigurationError`` for invalid settings or when pounce
    is not installed.
    """
    config = config or ServerConfig()
    config.validate()

    try:
        from pounce.config import ServerConfig as PounceConfig
        from pounce.server import Server
    except ImportError as exc:
        msg = "run_server() requires pounce. Install it with: pip install zephyri[server]"
        raise ConfigurationError(msg) from exc

    pounce_config = PounceConfig(
        host=config.host,
        port=config.port,
        workers=config.workers,
        reload=config.reload,
        reload_include=config.reload_include,
        reload_dirs=config.reload_dirs,
    )
    Server(pounce_config, app).run()
