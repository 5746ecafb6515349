"""Clients for the third-party chart and map rendering services."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any

import httpx

from covid_api.config import ServiceConfig
from covid_api.results import Result, Success, failure_from_exception

LOGGER = logging.getLogger(__name__)

DEFAULT_MEDIA_TYPE = "image/png"


@dataclass(frozen=True)
class RenderedImage:
    """Binary image returned by a rendering service."""

    content: bytes
    media_type: str = DEFAULT_MEDIA_TYPE


@dataclass
class ImageRenderer:
    """GET-style rendering service that turns query parameters into an image.

    ``base_params`` are merged into every request (e.g. an API key). List
    values are sent as repeated keys (``shape=a&shape=b``).
    """

    http: httpx.AsyncClient
    url: str
    base_params: dict[str, Any] = field(default_factory=dict)

    async def render(self, params: dict[str, Any]) -> Result[RenderedImage]:
        """Request an image for ``params`` and return it or a failure value."""
        try:
            response = await self.http.get(self.url, params={**self.base_params, **params})
            response.raise_for_status()
        except httpx.HTTPError as exc:
            LOGGER.error("Rendering request to %s failed: %s", self.url, exc)
            return failure_from_exception(exc)

        media_type = response.headers.get("content-type", DEFAULT_MEDIA_TYPE).split(";")[0].strip()
        return Success(RenderedImage(content=response.content, media_type=media_type or DEFAULT_MEDIA_TYPE))


@asynccontextmanager
async def open_chart_renderer(config: ServiceConfig) -> AsyncIterator[ImageRenderer]:
    """Yield a renderer bound to the chart service."""
    async with httpx.AsyncClient(timeout=config.timeout_seconds, follow_redirects=True) as http:
        yield ImageRenderer(http=http, url=config.chart_service_url)


@asynccontextmanager
async def open_map_renderer(config: ServiceConfig) -> AsyncIterator[ImageRenderer]:
    """Yield a renderer bound to the map service, authenticated with the API key."""
    async with httpx.AsyncClient(timeout=config.timeout_seconds, follow_redirects=True) as http:
        yield ImageRenderer(http=http, url=config.map_service_url, base_params={"key": config.mapquest_key})
