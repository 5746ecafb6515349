import logging

import pytest

from covid_api.config import (
    DEFAULT_CHART_SERVICE_URL,
    DEFAULT_DATA_BASE_URL,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    ServiceConfig,
)


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("COVID_DATA_BASE_URL", "CHART_SERVICE_URL", "MAP_SERVICE_URL", "MAPQUEST_KEY", "HTTP_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)

    config = ServiceConfig.from_env()

    assert config.data_base_url == DEFAULT_DATA_BASE_URL
    assert config.chart_service_url == DEFAULT_CHART_SERVICE_URL
    assert config.mapquest_key == ""
    assert config.timeout_seconds == 30.0


def test_from_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COVID_DATA_BASE_URL", "https://data.example.org/api/")
    monkeypatch.setenv("MAPQUEST_KEY", "secret")
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "12.5")

    config = ServiceConfig.from_env()

    assert config.data_base_url == "https://data.example.org/api"
    assert config.mapquest_key == "secret"
    assert config.timeout_seconds == 12.5


@pytest.mark.parametrize("raw", ["soon", "0", "-5", "nan"])
def test_invalid_timeout_falls_back_to_default(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
    raw: str,
) -> None:
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", raw)

    with caplog.at_level(logging.WARNING, logger="covid_api.config"):
        config = ServiceConfig.from_env()

    assert config.timeout_seconds == DEFAULT_HTTP_TIMEOUT_SECONDS
    assert "HTTP_TIMEOUT_SECONDS" in caplog.text
