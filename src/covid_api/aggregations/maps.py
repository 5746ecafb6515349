"""Map overlay shapes sized by case counts, rendered by the map service."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from covid_api.aggregations.collect import collect_cases
from covid_api.integrations.data_client import DataClient
from covid_api.integrations.renderers import ImageRenderer, RenderedImage
from covid_api.results import Failure, Result
from covid_api.schemas import CasesPerRegion

MAX_RADIUS = 50
BORDER_COLOR = "ff0000ff"
FILL_COLOR = "ff000099"
MAP_SIZE = "300,370"
MAP_CENTER = "42,12.5"
MAP_ZOOM = 5
MAP_TYPE = "light"


@dataclass(frozen=True)
class MapShape:
    """Circle overlay drawn at a region's coordinates."""

    lat: float
    long: float
    radius: float

    def to_param(self) -> str:
        """Format the shape as a map service ``shape`` value."""
        return f"border:{BORDER_COLOR}|fill:{FILL_COLOR}|radius:{self.radius:g}|{self.lat},{self.long}"


def build_shapes(cases: Sequence[CasesPerRegion]) -> list[MapShape]:
    """Scale each region's radius against the largest case count.

    With no regions there are no shapes; when every count is 0 all radii are 0.
    """
    max_cases = max((item.cases for item in cases), default=0)
    return [
        MapShape(
            lat=item.region.lat,
            long=item.region.long,
            radius=MAX_RADIUS * item.cases / max_cases if max_cases else 0.0,
        )
        for item in cases
    ]


def map_params(shapes: Sequence[MapShape]) -> dict[str, object]:
    """Build map service parameters; the API key is added by the renderer."""
    return {
        "size": MAP_SIZE,
        "center": MAP_CENTER,
        "zoom": MAP_ZOOM,
        "type": MAP_TYPE,
        "shape": [shape.to_param() for shape in shapes],
    }


async def build_map(
    client: DataClient,
    renderer: ImageRenderer,
    year: int,
    month: int,
    day: int,
) -> Result[RenderedImage]:
    """Render a map with one circle per region, sized by total positive cases."""
    regions = await client.list_regions()
    if isinstance(regions, Failure):
        return regions

    cases = await collect_cases(client, regions.value, year, month, day)
    return await renderer.render(map_params(build_shapes(cases)))
