import asyncio
import logging

import httpx
import pytest

from covid_api.config import ServiceConfig
from covid_api.integrations.renderers import ImageRenderer, open_map_renderer
from covid_api.results import Failure, Success


def _renderer(handler, **kwargs) -> ImageRenderer:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ImageRenderer(http=http, url="https://charts.test/chart", **kwargs)


def test_render_returns_binary_payload_and_media_type() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["cht"] == "p3"
        return httpx.Response(200, content=b"\x89PNG", headers={"content-type": "image/png; charset=binary"})

    result = asyncio.run(_renderer(handler).render({"cht": "p3"}))

    assert isinstance(result, Success)
    assert result.value.content == b"\x89PNG"
    assert result.value.media_type == "image/png"


def test_render_sends_list_values_as_repeated_keys() -> None:
    seen: list[list[str]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.params.get_list("shape"))
        assert request.url.params["key"] == "k"
        return httpx.Response(200, content=b"img")

    renderer = _renderer(handler, base_params={"key": "k"})
    asyncio.run(renderer.render({"shape": ["a", "b"]}))

    assert seen == [["a", "b"]]


def test_render_failure_status_becomes_failure(caplog: pytest.LogCaptureFixture) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, content=b"boom")

    with caplog.at_level(logging.ERROR, logger="covid_api.integrations.renderers"):
        result = asyncio.run(_renderer(handler).render({}))

    assert isinstance(result, Failure)
    assert "500" in result.error
    assert "https://charts.test/chart" in caplog.text


def test_render_timeout_becomes_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    result = asyncio.run(_renderer(handler).render({}))

    assert isinstance(result, Failure)
    assert "timed out" in result.error


def test_open_map_renderer_adds_api_key() -> None:
    config = ServiceConfig(map_service_url="https://maps.test/map", mapquest_key="secret")

    async def run() -> ImageRenderer:
        async with open_map_renderer(config) as renderer:
            return renderer

    renderer = asyncio.run(run())

    assert renderer.url == "https://maps.test/map"
    assert renderer.base_params == {"key": "secret"}
