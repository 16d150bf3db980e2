"""Shared type aliases used across simplerouter modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: receives the Request, returns a response value
Handler: TypeAlias = Callable[..., Any]

# Parameter set: named group -> matched substring, one per request
Params: TypeAlias = dict[str, str]
