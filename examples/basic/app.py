"""Basic — an HTTP router served over ASGI.

Run with ``python examples/basic/app.py`` (needs ``zephyri[server]``).
Routes are tried in the order they are declared, so the catch-all
comes last.
"""

import json

from zephyri import ASGIApp, HTTPRouter, Request, Response, ServerConfig, run_server


def echo_params(req: Request, res: Response, params: dict[str, str]) -> None:
    res.set_header("content-type", "application/json")
    res.end(json.dumps(params))


def show_user(req: Request, res: Response, params: dict[str, str]) -> None:
    res.end(params["id"])


def not_found(req: Request, res: Response, params: dict[str, str]) -> None:
    res.status = 404
    res.end("404")


router = (
    HTTPRouter[Request, Response]()
    .on("GET", "/:param", echo_params)
    .on("GET", "/user/:id", show_user)
    .on("GET", "**", not_found)
)

app = ASGIApp(router)

if __name__ == "__main__":
    run_server(app, ServerConfig(port=3000))
