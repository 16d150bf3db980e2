"""simplerouter exception hierarchy.

Shared across Router, dispatch, and the ASGI entry point so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class RouterError(Exception):
    """Base for all simplerouter-specific errors."""


class ConfigurationError(RouterError):
    """Raised when a route registration is invalid.

    Surfaces at registration time (``Router.add()``), never on a request.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(RouterError):
    """An outcome that maps directly to an HTTP status code.

    Raised by ``Router.match()`` and resolved into a ``Response`` by
    ``Router.dispatch()``. Handlers never see these.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404: no route pattern matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405: at least one pattern matched the path, none under this method.

    ``allowed`` keeps the methods in the order the routes were scanned,
    duplicates included. The ``Allow`` header joins them with ``", "``.
    """

    def __init__(self, allowed: tuple[str, ...], detail: str = "") -> None:
        allow_value = ", ".join(allowed)
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )
        object.__setattr__(self, "_allowed", allowed)

    @property
    def allowed(self) -> tuple[str, ...]:
        """Methods of the routes whose pattern matched the path."""
        return self._allowed
