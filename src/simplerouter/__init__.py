"""simplerouter: a minimal regular-expression HTTP router for ASGI.

Routes are tried in registration order; the first whose pattern matches
the whole path under the request's method handles the request. A path
that matches only under other methods gets 405 with an ``Allow`` header,
a path that matches nothing gets 404.

Basic usage::

    from simplerouter import Router, get_param

    router = Router()

    @router.get(r"/users/(?P<id>\\d+)")
    def show_user(request):
        user_id, found = get_param(request, "id")
        return f"user {user_id}"

    # serve with any ASGI server, e.g. ``pounce app:router``
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "HTTPError",
    "MethodNotAllowed",
    "NotFound",
    "Request",
    "Response",
    "Route",
    "Router",
    "RouterConfig",
    "RouterError",
    "get_param",
    "get_request",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import simplerouter`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from simplerouter.routing.router import Router

        return Router

    if name == "Route":
        from simplerouter.routing.route import Route

        return Route

    if name == "RouterConfig":
        from simplerouter.config import RouterConfig

        return RouterConfig

    if name == "Request":
        from simplerouter.http.request import Request

        return Request

    if name == "Response":
        from simplerouter.http.response import Response

        return Response

    if name == "get_param":
        from simplerouter.routing.params import get_param

        return get_param

    if name == "get_request":
        from simplerouter.context import get_request

        return get_request

    if name in ("ConfigurationError", "HTTPError", "MethodNotAllowed", "NotFound", "RouterError"):
        from simplerouter import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
