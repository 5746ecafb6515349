"""Pie, bar and line chart builders backed by the chart rendering service.

Every builder gathers ``(label, value)`` pairs, joins them into the
``labels`` (``|``-separated) and ``data`` (``,``-separated) strings the
rendering service expects, and returns the rendered image or a failure.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

from covid_api.aggregations.collect import collect_cases
from covid_api.integrations.data_client import DataClient
from covid_api.integrations.renderers import ImageRenderer, RenderedImage
from covid_api.results import Failure, Result, Success
from covid_api.schemas import CasesPerRegion

logger = logging.getLogger(__name__)

CHART_SIZE = "600x250"
CHART_TITLE = "Covid Infections"
CHART_PALETTE = "ef476f,ffd166,06d6a0,118ab2,073b4c"
LINE_COLOR = "118ab2"
AXIS_FLOOR = 10000
SHORT_NAME_LENGTH = 4
AUTONOMOUS_PROVINCE_PREFIX = "P.A. "
DAYS_PER_MONTH_PROBE = range(1, 32)


def join_series(pairs: Sequence[tuple[Any, int]]) -> tuple[str, str]:
    """Return the ``labels`` and ``data`` strings for a list of pairs."""
    labels = "|".join(str(label) for label, _ in pairs)
    data = ",".join(str(value) for _, value in pairs)
    return labels, data


def axis_maximum(values: Sequence[int]) -> int:
    """Return the y-axis maximum: the largest value, never below ``AXIS_FLOOR``."""
    return max([AXIS_FLOOR, *values])


def short_region_name(name: str) -> str:
    """Abbreviate a region name for dense bar labels, e.g. ``P.A. Bolzano`` -> ``Bolz.``."""
    if name.startswith(AUTONOMOUS_PROVINCE_PREFIX):
        name = name[len(AUTONOMOUS_PROVINCE_PREFIX) :]
    return f"{name[:SHORT_NAME_LENGTH]}."


def percentages(cases: Sequence[CasesPerRegion]) -> list[tuple[str, int]]:
    """Return ``(name, percentage)`` pairs rounded down against the combined total."""
    total = sum(item.cases for item in cases)
    if total == 0:
        return [(item.region.name, 0) for item in cases]
    return [(item.region.name, item.cases * 100 // total) for item in cases]


def pie_chart_params(cases: Sequence[CasesPerRegion]) -> dict[str, str]:
    """Build chart service parameters for a 3D pie of each region's share."""
    labels, data = join_series(percentages(cases))
    return {
        "cht": "p3",
        "chs": CHART_SIZE,
        "chtt": CHART_TITLE,
        "chl": labels,
        "chd": f"t:{data}",
        "chco": CHART_PALETTE,
    }


def bar_chart_params(cases: Sequence[CasesPerRegion]) -> dict[str, str]:
    """Build chart service parameters for a grouped vertical bar snapshot."""
    pairs = [(short_region_name(item.region.name), item.cases) for item in cases]
    labels, data = join_series(pairs)
    maximum = axis_maximum([value for _, value in pairs])
    return {
        "cht": "bvg",
        "chs": CHART_SIZE,
        "chtt": CHART_TITLE,
        "chds": f"0,{maximum}",
        "chd": f"t:{data}",
        "chco": CHART_PALETTE,
        "chxt": "x,y",
        "chxl": f"0:|{labels}",
        "chxr": f"1,0,{maximum}",
    }


def line_chart_params(region_name: str, points: Sequence[tuple[int, int]]) -> dict[str, str]:
    """Build chart service parameters for one region's day-by-day series."""
    labels, data = join_series(points)
    maximum = axis_maximum([value for _, value in points])
    return {
        "cht": "lc",
        "chs": CHART_SIZE,
        "chtt": CHART_TITLE,
        "chds": f"0,{maximum}",
        "chd": f"t:{data}",
        "chdl": region_name,
        "chco": LINE_COLOR,
        "chl": labels,
        "chxt": "x,y",
        "chxr": f"1,0,{maximum}",
    }


async def _region_cases(
    client: DataClient,
    year: int,
    month: int,
    day: int,
) -> Result[list[CasesPerRegion]]:
    regions = await client.list_regions()
    if isinstance(regions, Failure):
        return regions
    return Success(await collect_cases(client, regions.value, year, month, day))


async def pie_chart(
    client: DataClient,
    renderer: ImageRenderer,
    year: int,
    month: int,
    day: int,
) -> Result[RenderedImage]:
    """Render each region's share of total positive cases on a date."""
    cases = await _region_cases(client, year, month, day)
    if isinstance(cases, Failure):
        return cases
    return await renderer.render(pie_chart_params(cases.value))


async def bar_chart(
    client: DataClient,
    renderer: ImageRenderer,
    year: int,
    month: int,
    day: int,
) -> Result[RenderedImage]:
    """Render total positive cases of every region on a date."""
    cases = await _region_cases(client, year, month, day)
    if isinstance(cases, Failure):
        return cases
    return await renderer.render(bar_chart_params(cases.value))


async def line_chart(
    client: DataClient,
    renderer: ImageRenderer,
    region_id: int,
    year: int,
    month: int,
) -> Result[RenderedImage]:
    """Render a region's total positive cases for each day of a month.

    Days 1 to 31 are all requested; days the month does not have fail
    upstream and are left out of the series.
    """
    region = await client.get_region(region_id)
    if isinstance(region, Failure):
        return region

    days = list(DAYS_PER_MONTH_PROBE)
    results = await asyncio.gather(*(client.get_cases(region.value.id, year, month, day) for day in days))
    points = [(day, result.value.total_positive) for day, result in zip(days, results) if isinstance(result, Success)]
    logger.debug("Line chart for region %s: %d of %d days available", region.value.id, len(points), len(days))
    return await renderer.render(line_chart_params(region.value.name, points))
