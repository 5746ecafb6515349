"""Endpoints for rankings, charts and maps derived from upstream data."""

from typing import Annotated

from fastapi import APIRouter, Query, Response

from covid_api.aggregations import charts, maps, ranking
from covid_api.dependencies import ChartRendererDep, DataClientDep, MapRendererDep, RequestDateDep, RequestMonthDep
from covid_api.errors import invalid_parameter, upstream_error
from covid_api.integrations.renderers import RenderedImage
from covid_api.results import Failure, Result
from covid_api.schemas import CasesPerRegion, Ordering

router = APIRouter()

DEFAULT_LINE_CHART_REGION = 22


def _image_response(result: Result[RenderedImage]) -> Response:
    if isinstance(result, Failure):
        raise upstream_error(result)
    return Response(content=result.value.content, media_type=result.value.media_type)


@router.get("/ranking", tags=["Ranking"])
async def get_ranking(
    client: DataClientDep,
    when: RequestDateDep,
    n: Annotated[int, Query(description="Number of regions to return")] = ranking.DEFAULT_RANKING_SIZE,
    order: Annotated[Ordering, Query(alias="ord", description="Sort direction")] = Ordering.DESC,
) -> list[CasesPerRegion]:
    """Return the top (or bottom) ``n`` regions by total positive cases."""
    if n < 0:
        raise invalid_parameter("n must be a non-negative integer")
    return await ranking.rank(client, n, order, when.year, when.month, when.day)


@router.get("/charts/pie", tags=["Charts"], response_class=Response)
async def get_pie_chart(client: DataClientDep, renderer: ChartRendererDep, when: RequestDateDep) -> Response:
    """Return a pie chart of each region's share of positive cases."""
    return _image_response(await charts.pie_chart(client, renderer, when.year, when.month, when.day))


@router.get("/charts/bar", tags=["Charts"], response_class=Response)
async def get_bar_chart(client: DataClientDep, renderer: ChartRendererDep, when: RequestDateDep) -> Response:
    """Return a bar chart of positive cases per region."""
    return _image_response(await charts.bar_chart(client, renderer, when.year, when.month, when.day))


@router.get("/charts/line", tags=["Charts"], response_class=Response)
async def get_line_chart(
    client: DataClientDep,
    renderer: ChartRendererDep,
    when: RequestMonthDep,
    region_id: Annotated[int, Query(alias="id", description="Region identifier")] = DEFAULT_LINE_CHART_REGION,
) -> Response:
    """Return a line chart of one region's positive cases over a month."""
    return _image_response(await charts.line_chart(client, renderer, region_id, when.year, when.month))


@router.get("/map", tags=["Map"], response_class=Response)
async def get_map(client: DataClientDep, renderer: MapRendererDep, when: RequestDateDep) -> Response:
    """Return a map with one circle per region sized by positive cases."""
    return _image_response(await maps.build_map(client, renderer, when.year, when.month, when.day))
