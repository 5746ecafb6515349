import logging
from collections.abc import Callable
from typing import Any

import pytest
from fastapi.testclient import TestClient

from covid_api.integrations.renderers import RenderedImage
from covid_api.main import app
from covid_api.results import Failure, Result, Success
from covid_api.schemas import Entry, Region

REGIONS = [
    Region(id=1, name="Lombardia", lat=45.46, long=9.19),
    Region(id=2, name="Lazio", lat=41.89, long=12.48),
    Region(id=3, name="P.A. Bolzano", lat=46.49, long=11.35),
]


class FakeDataClient:
    """In-memory stand-in for DataClient keyed by region id and date."""

    def __init__(
        self,
        regions: list[Region] | Failure,
        cases: dict[tuple[int, int | None, int | None, int | None], int] | None = None,
    ) -> None:
        self.regions = regions
        self.cases = cases or {}
        self.case_requests: list[tuple[int, int | None, int | None, int | None]] = []

    async def list_regions(self) -> Result[list[Region]]:
        if isinstance(self.regions, Failure):
            return self.regions
        return Success(list(self.regions))

    async def get_region(self, region_id: int) -> Result[Region]:
        if isinstance(self.regions, Failure):
            return self.regions
        for region in self.regions:
            if region.id == region_id:
                return Success(region)
        return Failure(error=f"Region {region_id} not found")

    async def get_cases(
        self,
        region_id: int,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> Result[Entry]:
        key = (region_id, year, month, day)
        self.case_requests.append(key)
        if key not in self.cases:
            return Failure(error=f"No cases for {key}")
        return Success(Entry(total_positive=self.cases[key]))

    async def get_raw_cases(self, region_id: int, *args: Any) -> Result[Any]:
        return Success({"region": region_id})


class FakeRenderer:
    """Records rendering parameters and returns a canned image or failure."""

    def __init__(self, failure: Failure | None = None) -> None:
        self.failure = failure
        self.calls: list[dict[str, Any]] = []

    async def render(self, params: dict[str, Any]) -> Result[RenderedImage]:
        self.calls.append(params)
        if self.failure is not None:
            return self.failure
        return Success(RenderedImage(content=b"\x89PNG fake", media_type="image/png"))


@pytest.fixture(autouse=True)
def propagate_package_logs(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(logging.getLogger("covid_api"), "propagate", True)


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def make_data_client() -> Callable[..., FakeDataClient]:
    return FakeDataClient


@pytest.fixture
def make_renderer() -> Callable[..., FakeRenderer]:
    return FakeRenderer


@pytest.fixture
def regions() -> list[Region]:
    return list(REGIONS)
