"""Tests for simplerouter.http.request: immutable Request."""

import pytest

from simplerouter.http.request import Request


class TestFromASGI:
    def test_basic(self) -> None:
        scope = {
            "type": "http",
            "method": "POST",
            "path": "/users/42",
            "query_string": b"a=1",
            "http_version": "2",
            "client": ["127.0.0.1", 5000],
        }
        request = Request.from_asgi(scope)

        assert request.method == "POST"
        assert request.path == "/users/42"
        assert request.query_string == b"a=1"
        assert request.http_version == "2"
        assert request.client == ("127.0.0.1", 5000)
        assert dict(request.path_params) == {}

    def test_defaults_for_missing_keys(self) -> None:
        request = Request.from_asgi({"type": "http", "method": "GET", "path": "/"})

        assert request.query_string == b""
        assert request.http_version == "1.1"
        assert request.client is None


class TestBuild:
    def test_splits_query(self) -> None:
        request = Request.build("GET", "/search?q=x&page=2")
        assert request.path == "/search"
        assert request.query_string == b"q=x&page=2"
        assert request.url == "/search?q=x&page=2"

    def test_url_without_query(self) -> None:
        assert Request.build("GET", "/plain").url == "/plain"


class TestWithParams:
    def test_returns_new_request(self) -> None:
        original = Request.build("GET", "/users/1")
        updated = original.with_params({"id": "1"})

        assert updated is not original
        assert dict(updated.path_params) == {"id": "1"}
        assert dict(original.path_params) == {}
        assert updated.path == original.path

    def test_copies_params(self) -> None:
        params = {"id": "1"}
        request = Request.build("GET", "/users/1").with_params(params)
        params["id"] = "2"
        assert request.path_params["id"] == "1"

    def test_frozen(self) -> None:
        request = Request.build("GET", "/")
        with pytest.raises(AttributeError):
            request.method = "POST"  # type: ignore[misc]
