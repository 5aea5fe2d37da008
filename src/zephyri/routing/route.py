"""Route and RouteMatch frozen dataclasses."""

import re
from dataclasses import dataclass
from typing import Protocol


class RouteHandler[*Ts](Protocol):
    """Callback invoked with the extracted params and the lookup data."""

    def __call__(self, params: dict[str, str], /, *data: *Ts) -> object: ...


@dataclass(frozen=True, slots=True)
class Route[*Ts]:
    """A registered route: the source pattern, its compiled matcher, and handler.

    Created by ``Router.register()``. Never mutated afterwards.
    """

    path: str
    matcher: re.Pattern[str]
    handler: RouteHandler[*Ts]

    def matches(self, path: str) -> bool:
        return self.matcher.match(path) is not None

    def params(self, path: str) -> dict[str, str] | None:
        """Extract named parameters from *path*, or ``None`` if it doesn't match.

        A pattern without named parameters yields ``{}`` on a match.
        """
        match = self.matcher.match(path)
        if match is None:
            return None
        return match.groupdict()


@dataclass(frozen=True, slots=True)
class RouteMatch[*Ts]:
    """Result of a successful route lookup."""

    route: Route[*Ts]
    params: dict[str, str]
