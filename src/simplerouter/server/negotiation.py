"""Content negotiation: maps handler return values to Response objects.

isinstance-based dispatch, no magic, fully predictable.
"""

import json as json_module
from collections.abc import Mapping
from typing import Any

from simplerouter.http.response import Response

_JSON_CONTENT_TYPE = "application/json"


def negotiate(value: Any, *, text_content_type: str = "text/plain; charset=utf-8") -> Response:
    """Convert a route handler's return value to a Response.

    Dispatch order:

    1. ``Response``               -> pass through
    2. ``None``                   -> 200, empty body
    3. ``str``                    -> 200, *text_content_type*
    4. ``bytes``                  -> 200, application/octet-stream
    5. ``dict`` / ``list``        -> 200, application/json
    6. ``(value, int)``           -> negotiate value, override status
    7. ``(value, int, Mapping)``  -> negotiate value, override status + add headers

    Raises ``TypeError`` for anything else; that is a handler bug.
    """
    match value:
        case Response():
            return value
        case None:
            return Response(content_type=text_content_type)
        case str():
            return Response(body=value, content_type=text_content_type)
        case bytes():
            return Response(body=value, content_type="application/octet-stream")
        case dict() | list():
            return Response(
                body=json_module.dumps(value, separators=(",", ":")),
                content_type=_JSON_CONTENT_TYPE,
            )
        case (inner, int() as status):
            return negotiate(inner, text_content_type=text_content_type).with_status(status)
        case (inner, int() as status, Mapping() as headers):
            return (
                negotiate(inner, text_content_type=text_content_type)
                .with_status(status)
                .with_headers(headers)
            )
        case _:
            msg = (
                f"Cannot convert {type(value).__name__} to a response. "
                "Return a Response, None, str, bytes, dict, list, or a (value, status) tuple."
            )
            raise TypeError(msg)
