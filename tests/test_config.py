"""Tests for simplerouter.config: RouterConfig frozen dataclass."""

import pytest

from simplerouter.config import RouterConfig
from simplerouter.http.request import Request
from simplerouter.routing.router import Router


class TestRouterConfig:
    def test_defaults(self) -> None:
        cfg = RouterConfig()

        assert cfg.dedupe_allow is False
        assert cfg.default_content_type == "text/plain; charset=utf-8"
        assert cfg.freeze_on_serve is True
        assert cfg.sync_handlers_in_thread is False

    def test_frozen(self) -> None:
        cfg = RouterConfig()

        with pytest.raises(AttributeError):
            cfg.dedupe_allow = True  # type: ignore[misc]

    def test_router_default_config(self) -> None:
        assert Router().config == RouterConfig()

    @pytest.mark.asyncio
    async def test_default_content_type_applies_to_fallbacks(self) -> None:
        router = Router(config=RouterConfig(default_content_type="text/html; charset=utf-8"))
        router.get("/page", lambda request: "<p>page</p>")

        missing = await router.dispatch(Request.build("GET", "/nope"))
        assert missing.content_type == "text/html; charset=utf-8"
        assert missing.text == "Not Found"

        page = await router.dispatch(Request.build("GET", "/page"))
        assert page.content_type == "text/html; charset=utf-8"

    @pytest.mark.asyncio
    async def test_dedupe_allow_header(self) -> None:
        router = Router(config=RouterConfig(dedupe_allow=True))
        router.get("/ops", lambda request: "a")
        router.get(r"/o\w+", lambda request: "b")

        response = await router.dispatch(Request.build("POST", "/ops"))
        assert response.header("Allow") == "GET"
