"""Test utilities for simplerouter applications.

Provides an in-process ASGI test client and response assertions::

    from simplerouter.testing import TestClient, assert_status
"""

from simplerouter.testing.assertions import assert_allow, assert_body, assert_status
from simplerouter.testing.client import TestClient

__all__ = [
    "TestClient",
    "assert_allow",
    "assert_body",
    "assert_status",
]
