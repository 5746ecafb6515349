"""Concurrent fan-out helpers shared by the ranking, chart and map builders."""

import asyncio
from collections.abc import Sequence

from covid_api.integrations.data_client import DataClient
from covid_api.results import Success
from covid_api.schemas import CasesPerRegion, Region


async def collect_cases(
    client: DataClient,
    regions: Sequence[Region],
    year: int | None,
    month: int | None,
    day: int | None,
) -> list[CasesPerRegion]:
    """Fetch every region's entry for a date and pair it with ``total_positive``.

    Regions whose fetch fails are skipped. The result keeps the order of
    ``regions``.
    """
    results = await asyncio.gather(*(client.get_cases(region.id, year, month, day) for region in regions))
    return [
        CasesPerRegion(region=region, cases=result.value.total_positive)
        for region, result in zip(regions, results)
        if isinstance(result, Success)
    ]
