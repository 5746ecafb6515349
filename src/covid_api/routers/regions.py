"""Pass-through endpoints for upstream regions and case entries."""

from typing import Any

from fastapi import APIRouter

from covid_api.dependencies import DataClientDep
from covid_api.errors import upstream_error
from covid_api.results import Failure
from covid_api.schemas import Entry, Region

router = APIRouter(tags=["Regions"])


@router.get("/regions")
async def list_regions(client: DataClientDep) -> list[Region]:
    """Return every region known upstream."""
    regions = await client.list_regions()
    if isinstance(regions, Failure):
        raise upstream_error(regions)
    return regions.value


@router.get("/region/{region_id}")
async def get_region(region_id: int, client: DataClientDep) -> Region:
    """Return a single region."""
    region = await client.get_region(region_id)
    if isinstance(region, Failure):
        raise upstream_error(region)
    return region.value


@router.get("/region/{region_id}/cases")
async def get_region_cases(region_id: int, client: DataClientDep) -> Any:
    """Return all case data for a region in whatever shape the upstream groups it."""
    cases = await client.get_raw_cases(region_id)
    if isinstance(cases, Failure):
        raise upstream_error(cases)
    return cases.value


@router.get("/region/{region_id}/cases/{year}/{month}/{day}")
async def get_region_cases_by_date(region_id: int, year: int, month: int, day: int, client: DataClientDep) -> Entry:
    """Return one day of case statistics for a region."""
    entry = await client.get_cases(region_id, year, month, day)
    if isinstance(entry, Failure):
        raise upstream_error(entry)
    return entry.value
