"""Top/bottom-N ranking of regions by total positive cases."""

import logging

from covid_api.aggregations.collect import collect_cases
from covid_api.integrations.data_client import DataClient
from covid_api.results import Failure
from covid_api.schemas import CasesPerRegion, Ordering

logger = logging.getLogger(__name__)

DEFAULT_RANKING_SIZE = 5


def order_ranking(cases: list[CasesPerRegion], n: int, order: Ordering | str) -> list[CasesPerRegion]:
    """Sort descending (stable), mirror for ascending, then keep the first ``n``."""
    if n < 0:
        raise ValueError(f"Ranking size must be non-negative, got {n}")

    ranks = sorted(cases, key=lambda item: item.cases, reverse=True)
    if Ordering(order) is Ordering.ASC:
        ranks.reverse()
    return ranks[:n]


async def rank(
    client: DataClient,
    n: int,
    order: Ordering | str,
    year: int,
    month: int,
    day: int,
) -> list[CasesPerRegion]:
    """Rank regions by ``total_positive`` on the given date.

    A failed region list yields an empty ranking rather than a failure, while
    a failed case fetch only drops that region.
    """
    regions = await client.list_regions()
    if isinstance(regions, Failure):
        logger.warning("Region list unavailable, returning empty ranking: %s", regions.error)
        return []

    cases = await collect_cases(client, regions.value, year, month, day)
    return order_ranking(cases, n, order)
