"""Root API endpoints."""

from fastapi import APIRouter, Request

from covid_api.schemas import HealthStatus, Link, RootResponse, Status

router = APIRouter(tags=["System"])


@router.get("/")
def read_index(request: Request) -> RootResponse:
    """Return a welcome message with navigation links."""
    base = str(request.base_url).rstrip("/")
    return RootResponse(
        message="Welcome to the COVID-19 regional statistics API",
        links=[
            Link(href=f"{base}/regions", rel="regions", title="Regions"),
            Link(href=f"{base}/ranking", rel="ranking", title="Ranking"),
            Link(href=f"{base}/charts/pie", rel="charts", title="Charts"),
            Link(href=f"{base}/map", rel="map", title="Map"),
            Link(href=f"{base}/docs", rel="docs", title="API Docs"),
        ],
    )


@router.get("/health")
def health() -> HealthStatus:
    """Return health status for container health checks."""
    return HealthStatus(status=Status.HEALTHY)
