"""Invoke helpers: call sync or async handlers uniformly.

Route handlers and the not-found / method-not-allowed fallbacks can be
``def`` or ``async def``. This module keeps the sync/async check in
exactly one place.

Usage::

    from simplerouter._internal.invoke import invoke

    result = await invoke(handler, request)
"""

import functools
import inspect
from typing import Any

import anyio.to_thread


async def invoke(handler: Any, *args: Any, offload_sync: bool = False) -> Any:
    """Call a handler and await the result if it's awaitable.

    Sync handlers run inline in the calling task unless *offload_sync*
    is set, in which case they run in an anyio worker thread. The
    current context (and so ``request_var``) is copied into the thread.
    """
    if offload_sync and not inspect.iscoroutinefunction(handler):
        result = await anyio.to_thread.run_sync(functools.partial(handler, *args))
    else:
        result = handler(*args)
    if inspect.isawaitable(result):
        result = await result
    return result
