"""Router configuration.

RouterConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have defaults that reproduce the plain routing contract.
    Override what you need::

        config = RouterConfig(dedupe_allow=True)
    """

    # 405 handling: collapse repeated methods in the Allow header,
    # keeping the first occurrence of each
    dedupe_allow: bool = False

    # Content type of default 404/405 bodies and of str handler returns
    default_content_type: str = "text/plain; charset=utf-8"

    # Freeze the route list when the ASGI entry point serves its first request
    freeze_on_serve: bool = True

    # Run sync handlers in an anyio worker thread instead of inline
    sync_handlers_in_thread: bool = False
