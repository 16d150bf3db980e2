"""Response assertion helpers for router tests.

Each assertion produces a clear error message on failure.
"""

from simplerouter.http.response import Response


def assert_status(response: Response, status: int) -> None:
    """Assert the response has the expected status code."""
    assert response.status == status, (
        f"Expected status {status}, got {response.status}.\n"
        f"Response body: {response.text[:500]}"
    )


def assert_body(response: Response, body: str) -> None:
    """Assert the response body equals *body*, ignoring surrounding whitespace."""
    assert response.text.strip() == body.strip(), (
        f"Expected body {body.strip()!r}, got {response.text.strip()!r}"
    )


def assert_allow(response: Response, *methods: str) -> None:
    """Assert the ``Allow`` header lists exactly *methods*, in order."""
    allow = response.header("Allow")
    assert allow is not None, "Response has no Allow header"
    expected = ", ".join(methods)
    assert allow == expected, f"Expected Allow {expected!r}, got {allow!r}"
