"""Read-only client for the upstream COVID-19 data API."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter

from covid_api.config import ServiceConfig
from covid_api.results import Result, Success, failure_from_exception
from covid_api.schemas import Entry, Region

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

_REGION_LIST = TypeAdapter(list[Region])


def cases_path(region_id: int, year: int | None = None, month: int | None = None, day: int | None = None) -> str:
    """Build the cases path, appending only the date components actually supplied.

    A month is used only together with a year and a day only together with a month.
    """
    path = f"/region/{region_id}/cases"
    if year is None:
        return path
    path = f"{path}/{year}"
    if month is None:
        return path
    path = f"{path}/{month}"
    if day is None:
        return path
    return f"{path}/{day}"


class DataClient:
    """Upstream data API client returning ``Success``/``Failure`` values."""

    def __init__(self, http: httpx.AsyncClient) -> None:
        """Wrap an HTTP client whose ``base_url`` points at the data API."""
        self._http = http

    async def list_regions(self) -> Result[list[Region]]:
        """Fetch the full region catalog."""
        return await self._get("/regions", _REGION_LIST.validate_python)

    async def get_region(self, region_id: int) -> Result[Region]:
        """Fetch one region by its upstream identifier."""
        return await self._get(f"/region/{region_id}", Region.model_validate)

    async def get_cases(
        self,
        region_id: int,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> Result[Entry]:
        """Fetch case statistics for a region, optionally filtered by date."""
        return await self._get(cases_path(region_id, year, month, day), Entry.model_validate)

    async def get_raw_cases(
        self,
        region_id: int,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> Result[Any]:
        """Fetch case data without decoding it into an ``Entry``.

        Without a full date the upstream answers with a structure of its own
        choosing (typically entries grouped by date), which is passed through.
        """
        return await self._get(cases_path(region_id, year, month, day), lambda payload: payload)

    async def _get(self, path: str, decode: Callable[[Any], T]) -> Result[T]:
        try:
            response = await self._http.get(path)
            response.raise_for_status()
            return Success(decode(response.json()))
        except (httpx.HTTPError, ValueError) as exc:
            LOGGER.error("Upstream data request %s failed: %s", path, exc)
            return failure_from_exception(exc)


def create_http_client(config: ServiceConfig) -> httpx.AsyncClient:
    """Create the HTTP client used to reach the upstream data API."""
    return httpx.AsyncClient(
        base_url=config.data_base_url,
        timeout=config.timeout_seconds,
        follow_redirects=True,
    )


@asynccontextmanager
async def open_data_client(config: ServiceConfig) -> AsyncIterator[DataClient]:
    """Yield a ``DataClient`` bound to a fresh HTTP connection pool."""
    async with create_http_client(config) as http:
        yield DataClient(http)
