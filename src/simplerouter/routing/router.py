"""Regular-expression router with first-match-wins linear scan.

Routes are registered during setup, in priority order, and the route
list is treated as read-only once serving begins.
"""

import logging
import re
from http import HTTPStatus
from typing import Any

from simplerouter._internal.asgi import Receive, Scope, Send
from simplerouter._internal.invoke import invoke
from simplerouter._internal.types import Handler
from simplerouter.config import RouterConfig
from simplerouter.context import request_var
from simplerouter.errors import ConfigurationError, HTTPError, MethodNotAllowed, NotFound
from simplerouter.http.request import Request
from simplerouter.http.response import Response
from simplerouter.routing.params import extract_params
from simplerouter.routing.route import Route, RouteMatch
from simplerouter.server.negotiation import negotiate
from simplerouter.server.sender import send_response

logger = logging.getLogger("simplerouter.routing")
server_logger = logging.getLogger("simplerouter.server")


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a route pattern anchored at both ends.

    Raises ``ConfigurationError`` if *pattern* is not a valid regular
    expression.
    """
    try:
        return re.compile(f"^{pattern}$")
    except re.error as exc:
        msg = f"Invalid route pattern {pattern!r}: {exc}"
        raise ConfigurationError(msg) from exc


class Router:
    """Dispatches requests to the first route whose pattern and method match.

    Usage::

        router = Router()

        @router.get(r"/users/(?P<id>\\d+)")
        def show_user(request):
            user_id, _ = get_param(request, "id")
            return f"user {user_id}"

        # ASGI application
        await router(scope, receive, send)

    All registration must happen before the router starts serving
    concurrent requests. Registering while requests are in flight is
    unsupported; the router does not lock its route list.
    """

    __slots__ = (
        "_frozen",
        "_routes",
        "config",
        "method_not_allowed_handler",
        "not_found_handler",
    )

    def __init__(
        self,
        *,
        not_found_handler: Handler | None = None,
        method_not_allowed_handler: Handler | None = None,
        config: RouterConfig | None = None,
    ) -> None:
        self._routes: list[Route] = []
        self._frozen = False
        self.not_found_handler = not_found_handler
        self.method_not_allowed_handler = method_not_allowed_handler
        self.config = config or RouterConfig()

    # -- Registration --

    def add(self, method: str, pattern: str, handler: Handler | None = None) -> Any:
        """Register *handler* for *method* requests whose path matches *pattern*.

        *pattern* is a regular expression without anchors; it must match
        the entire path. Named groups (``(?P<name>...)``) become request
        parameters.

        Returns *handler*. Called without one, returns a decorator::

            @router.add("GET", r"/health")
            def health(request): ...

        Raises ``ConfigurationError`` for an empty method or a pattern
        that does not compile. Raises ``RuntimeError`` once the router
        is frozen.
        """
        if handler is None:

            def decorator(fn: Handler) -> Handler:
                return self.add(method, pattern, fn)

            return decorator

        if self._frozen:
            msg = "Cannot add routes after the router is frozen."
            raise RuntimeError(msg)
        if not method:
            msg = f"Route {pattern!r} needs a non-empty HTTP method."
            raise ConfigurationError(msg)

        route = Route(
            method=method,
            path=pattern,
            pattern=compile_pattern(pattern),
            handler=handler,
        )
        self._routes.append(route)
        logger.debug("registered %s %s", method, pattern)
        return handler

    def get(self, pattern: str, handler: Handler | None = None) -> Any:
        """Register a GET route."""
        return self.add("GET", pattern, handler)

    def head(self, pattern: str, handler: Handler | None = None) -> Any:
        """Register a HEAD route."""
        return self.add("HEAD", pattern, handler)

    def post(self, pattern: str, handler: Handler | None = None) -> Any:
        """Register a POST route."""
        return self.add("POST", pattern, handler)

    def put(self, pattern: str, handler: Handler | None = None) -> Any:
        """Register a PUT route."""
        return self.add("PUT", pattern, handler)

    def patch(self, pattern: str, handler: Handler | None = None) -> Any:
        """Register a PATCH route."""
        return self.add("PATCH", pattern, handler)

    def delete(self, pattern: str, handler: Handler | None = None) -> Any:
        """Register a DELETE route."""
        return self.add("DELETE", pattern, handler)

    def options(self, pattern: str, handler: Handler | None = None) -> Any:
        """Register an OPTIONS route."""
        return self.add("OPTIONS", pattern, handler)

    def connect(self, pattern: str, handler: Handler | None = None) -> Any:
        """Register a CONNECT route."""
        return self.add("CONNECT", pattern, handler)

    def trace(self, pattern: str, handler: Handler | None = None) -> Any:
        """Register a TRACE route."""
        return self.add("TRACE", pattern, handler)

    @property
    def routes(self) -> tuple[Route, ...]:
        """All registered routes, in registration (priority) order."""
        return tuple(self._routes)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Freeze the route list. No more routes can be added."""
        self._frozen = True

    # -- Matching --

    def match(self, method: str, path: str) -> RouteMatch:
        """Find the route for *method* and *path*.

        Scans routes in registration order and returns the first one
        whose pattern matches the whole path and whose method equals
        *method*. Routes whose pattern matches under another method are
        remembered and scanning goes on.

        Raises ``MethodNotAllowed`` if some pattern matched the path but
        none under *method*. Raises ``NotFound`` if no pattern matched.
        """
        allowed: list[str] = []

        for route in self._routes:
            found = route.matches(path)
            if found is None:
                continue
            if route.method != method:
                allowed.append(route.method)
                continue
            return RouteMatch(route=route, path_params=extract_params(found))

        if allowed:
            if self.config.dedupe_allow:
                allowed = list(dict.fromkeys(allowed))
            raise MethodNotAllowed(tuple(allowed))

        raise NotFound(f"No route matches {method} {path!r}")

    # -- Dispatch --

    async def dispatch(self, request: Request) -> Response:
        """Resolve *request* to exactly one response.

        Calls the matched route's handler with the request carrying the
        route's parameters, or the not-found / method-not-allowed
        fallback. Routing outcomes never escape as exceptions; handler
        exceptions propagate unchanged.
        """
        try:
            match = self.match(request.method, request.path)
        except HTTPError as exc:
            return await self._handle_http_error(exc, request)

        request = request.with_params(match.path_params)
        token = request_var.set(request)
        try:
            result = await invoke(
                match.route.handler,
                request,
                offload_sync=self.config.sync_handlers_in_thread,
            )
        except Exception:
            server_logger.exception(
                "handler for %s %s raised", match.route.method, match.route.path
            )
            raise
        finally:
            request_var.reset(token)

        return negotiate(result, text_content_type=self.config.default_content_type)

    async def _handle_http_error(self, exc: HTTPError, request: Request) -> Response:
        """Build the 404/405 response, custom handler first."""
        logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

        if isinstance(exc, MethodNotAllowed):
            fallback = self.method_not_allowed_handler
        else:
            fallback = self.not_found_handler

        if fallback is None:
            response = Response(
                body=HTTPStatus(exc.status).phrase,
                status=exc.status,
                content_type=self.config.default_content_type,
            )
        else:
            token = request_var.set(request)
            try:
                result = await invoke(
                    fallback,
                    request,
                    offload_sync=self.config.sync_handlers_in_thread,
                )
            except Exception:
                server_logger.exception(
                    "%d handler for %s %s raised", exc.status, request.method, request.path
                )
                raise
            finally:
                request_var.reset(token)
            response = negotiate(result, text_content_type=self.config.default_content_type)

        # Allow is set before the fallback runs; a fallback's own value wins
        for name, value in exc.headers:
            if not response.has_header(name):
                response = response.with_header(name, value)
        return response

    # -- ASGI entry point --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3 application entry point, one call per inbound request."""
        if scope["type"] == "lifespan":
            await _handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            # websocket: not routed, reject the handshake
            await receive()
            await send({"type": "websocket.close", "code": 1000})
            return

        if self.config.freeze_on_serve and not self._frozen:
            self.freeze()

        request = Request.from_asgi(scope)
        response = await self.dispatch(request)
        await send_response(response, send, head=request.method == "HEAD")


async def _handle_lifespan(receive: Receive, send: Send) -> None:
    """Acknowledge lifespan startup and shutdown; there is nothing to set up."""
    while True:
        message = await receive()
        if message["type"] == "lifespan.startup":
            await send({"type": "lifespan.startup.complete"})
        elif message["type"] == "lifespan.shutdown":
            await send({"type": "lifespan.shutdown.complete"})
            return
