"""Route and RouteMatch frozen dataclasses."""

import re
from collections.abc import Mapping
from dataclasses import dataclass

from simplerouter._internal.types import Handler


@dataclass(frozen=True, slots=True)
class Route:
    """A registered route.

    ``path`` is the pattern as given at registration; ``pattern`` is
    the compiled, anchored form used for matching.
    """

    method: str
    path: str
    pattern: re.Pattern[str]
    handler: Handler

    def matches(self, path: str) -> re.Match[str] | None:
        """Match *path* against the whole pattern, or return None."""
        return self.pattern.fullmatch(path)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    path_params: Mapping[str, str]
