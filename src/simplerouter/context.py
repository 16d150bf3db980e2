"""Request-scoped context via ContextVar.

Provides ``request_var``: the request currently being handled, with the
matched route's parameters attached. Set by ``Router.dispatch()`` around
the handler call and reset afterwards.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    threads. Concurrent requests never observe each other's request or
    parameters. No locks needed.
"""

from contextvars import ContextVar

from simplerouter.http.request import Request

request_var: ContextVar[Request] = ContextVar("simplerouter_request")
"""The current request. Set by the router around handler invocation."""


def get_request() -> Request:
    """Return the request being handled.

    Raises ``LookupError`` if called outside a handler invoked by the router.
    """
    return request_var.get()
