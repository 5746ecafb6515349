"""Outbound service configuration read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

LOGGER = logging.getLogger(__name__)

DEFAULT_DATA_BASE_URL = "http://localhost:3000/api"
DEFAULT_CHART_SERVICE_URL = "https://chart.googleapis.com/chart"
DEFAULT_MAP_SERVICE_URL = "https://www.mapquestapi.com/staticmap/v5/map"
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0


def _timeout_from_env() -> float:
    """Read HTTP_TIMEOUT_SECONDS, falling back to the default when it is not a positive number."""
    raw = os.getenv("HTTP_TIMEOUT_SECONDS")
    if raw is None:
        return DEFAULT_HTTP_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError:
        timeout = 0.0
    if not timeout > 0:
        LOGGER.warning(
            "HTTP_TIMEOUT_SECONDS=%r is not a positive number; using %s",
            raw,
            DEFAULT_HTTP_TIMEOUT_SECONDS,
        )
        return DEFAULT_HTTP_TIMEOUT_SECONDS
    return timeout


@dataclass(frozen=True)
class ServiceConfig:
    """Endpoints and request options for the upstream and rendering services.

    Passed explicitly to every client instead of living in module globals, so
    two requests never share outbound request settings.
    """

    data_base_url: str = DEFAULT_DATA_BASE_URL
    chart_service_url: str = DEFAULT_CHART_SERVICE_URL
    map_service_url: str = DEFAULT_MAP_SERVICE_URL
    mapquest_key: str = ""
    timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> ServiceConfig:
        """Build a configuration from environment variables, falling back to defaults."""
        return cls(
            data_base_url=os.getenv("COVID_DATA_BASE_URL", DEFAULT_DATA_BASE_URL).rstrip("/"),
            chart_service_url=os.getenv("CHART_SERVICE_URL", DEFAULT_CHART_SERVICE_URL),
            map_service_url=os.getenv("MAP_SERVICE_URL", DEFAULT_MAP_SERVICE_URL),
            mapquest_key=os.getenv("MAPQUEST_KEY", ""),
            timeout_seconds=_timeout_from_env(),
        )
