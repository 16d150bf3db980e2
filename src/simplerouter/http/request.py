"""Immutable HTTP request.

Frozen metadata plus the parameter set of the route that matched it.
The router never mutates a request: attaching parameters produces a new
``Request`` that is handed to exactly one handler.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any


def _empty_params() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path_params`` is empty until the router selects a route; the
    request passed to a handler carries that route's named groups.
    """

    method: str
    path: str
    query_string: bytes = b""
    path_params: Mapping[str, str] = field(default_factory=_empty_params)
    http_version: str = "1.1"
    client: tuple[str, int] | None = None

    @property
    def url(self) -> str:
        """Request path plus query string."""
        if self.query_string:
            return f"{self.path}?{self.query_string.decode('latin-1')}"
        return self.path

    def with_params(self, params: Mapping[str, str]) -> Request:
        """Return a copy carrying *params* as a read-only parameter set."""
        return replace(self, path_params=MappingProxyType(dict(params)))

    # -- Factories --

    @classmethod
    def from_asgi(cls, scope: Mapping[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            query_string=scope.get("query_string", b""),
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
        )

    @classmethod
    def build(cls, method: str, path: str) -> Request:
        """Create a Request directly, without an ASGI scope.

        Splits a ``?query`` suffix off *path*.
        """
        path, _, query = path.partition("?")
        return cls(
            method=method,
            path=path,
            query_string=query.encode("latin-1"),
        )
