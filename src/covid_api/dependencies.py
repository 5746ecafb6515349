"""FastAPI dependencies providing configuration and per-request clients."""

from collections.abc import AsyncIterator
from datetime import date
from typing import Annotated

from fastapi import Depends, Query

from covid_api.config import ServiceConfig
from covid_api.integrations.data_client import DataClient, open_data_client
from covid_api.integrations.renderers import ImageRenderer, open_chart_renderer, open_map_renderer


def get_config() -> ServiceConfig:
    """Read outbound service configuration for this request."""
    return ServiceConfig.from_env()


async def get_data_client(config: Annotated[ServiceConfig, Depends(get_config)]) -> AsyncIterator[DataClient]:
    """Yield an upstream data client scoped to the request."""
    async with open_data_client(config) as client:
        yield client


async def get_chart_renderer(config: Annotated[ServiceConfig, Depends(get_config)]) -> AsyncIterator[ImageRenderer]:
    """Yield a chart renderer scoped to the request."""
    async with open_chart_renderer(config) as renderer:
        yield renderer


async def get_map_renderer(config: Annotated[ServiceConfig, Depends(get_config)]) -> AsyncIterator[ImageRenderer]:
    """Yield a map renderer scoped to the request."""
    async with open_map_renderer(config) as renderer:
        yield renderer


def today() -> date:
    """Return the current local date."""
    return date.today()


class RequestMonth:
    """Year and month query parameters, each defaulting to today's value."""

    def __init__(
        self,
        y: Annotated[int | None, Query(ge=1, description="Year, defaults to the current year")] = None,
        m: Annotated[int | None, Query(ge=1, le=12, description="Month, defaults to the current month")] = None,
    ) -> None:
        current = today()
        self.year = current.year if y is None else y
        self.month = current.month if m is None else m


class RequestDate:
    """Year, month and day query parameters, each defaulting to today's value."""

    def __init__(
        self,
        y: Annotated[int | None, Query(ge=1, description="Year, defaults to the current year")] = None,
        m: Annotated[int | None, Query(ge=1, le=12, description="Month, defaults to the current month")] = None,
        d: Annotated[int | None, Query(ge=1, le=31, description="Day, defaults to the current day")] = None,
    ) -> None:
        current = today()
        self.year = current.year if y is None else y
        self.month = current.month if m is None else m
        self.day = current.day if d is None else d


DataClientDep = Annotated[DataClient, Depends(get_data_client)]
ChartRendererDep = Annotated[ImageRenderer, Depends(get_chart_renderer)]
MapRendererDep = Annotated[ImageRenderer, Depends(get_map_renderer)]
RequestDateDep = Annotated[RequestDate, Depends()]
RequestMonthDep = Annotated[RequestMonth, Depends()]
