"""Path parameter extraction and lookup.

A route's named capture groups become the request's parameter set.
Unnamed groups, and named groups that did not take part in the match,
are left out.
"""

import re

from simplerouter._internal.types import Params
from simplerouter.http.request import Request


def extract_params(match: re.Match[str]) -> Params:
    """Collect the named groups of *match* that captured something.

    ``(?P<id>\\d+)`` contributes ``{"id": ...}``; ``(\\d+)`` contributes
    nothing. An optional named group that was skipped is absent, not
    ``None``.
    """
    return {name: value for name, value in match.groupdict().items() if value is not None}


def get_param(request: Request, name: str) -> tuple[str, bool]:
    """Look up parameter *name* on a request handled by the router.

    Returns ``(value, True)`` when the selected route captured *name*,
    otherwise ``("", False)``. A request that never went through a
    matching route has an empty parameter set, so every lookup on it
    reports not found.
    """
    try:
        return request.path_params[name], True
    except KeyError:
        return "", False
