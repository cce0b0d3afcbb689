"""Tests for the HTTP surface using FastAPI's TestClient."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from zipweather.api import create_app
from zipweather.config.defaults import DEFAULT_STATIC_DIR
from zipweather.models.errors import (
    ForecastUnavailableError,
    LocationNotFoundError,
    UnknownConditionCode,
)
from zipweather.models.forecast import RawForecast
from zipweather.models.icons import IconTable
from zipweather.pipeline.weather_service import WeatherService
from zipweather.transform.forecast_transformer import transform


@pytest.fixture
def service(springfield_payload: dict, icons: IconTable) -> MagicMock:
    display = transform(
        RawForecast.from_payload(springfield_payload),
        "Springfield, Sangamon County, Illinois, 62701, United States",
        icons,
    )
    mock = MagicMock(spec=WeatherService)
    mock.icons = icons
    mock.lookup.return_value = display
    return mock


@pytest.fixture
def client(service: MagicMock) -> TestClient:
    return TestClient(create_app(service))


class TestWeatherEndpoint:
    def test_success(self, client: TestClient, service: MagicMock):
        resp = client.get("/weather", params={"zipcode": "62701"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["location_name"] == "Springfield"
        assert data["current"] == {
            "formatted_time": "3:15 PM",
            "temp": -1,
            "temp_max_today": 30,
            "temp_min_today": -1,
        }
        assert len(data["hourly_outlook"]) == 24
        assert len(data["daily_outlook"]) == 5
        service.lookup.assert_called_once_with("62701")

    def test_missing_zipcode(self, client: TestClient):
        resp = client.get("/weather")
        assert resp.status_code == 422

    def test_location_not_found(self, client: TestClient, service: MagicMock):
        service.lookup.side_effect = LocationNotFoundError("00000")
        resp = client.get("/weather", params={"zipcode": "00000"})
        assert resp.status_code == 404
        assert "00000" in resp.json()["detail"]

    def test_forecast_unavailable(self, client: TestClient, service: MagicMock):
        service.lookup.side_effect = ForecastUnavailableError("503 Service Unavailable")
        resp = client.get("/weather", params={"zipcode": "62701"})
        assert resp.status_code == 500

    def test_transform_failure(self, client: TestClient, service: MagicMock):
        service.lookup.side_effect = UnknownConditionCode("42")
        resp = client.get("/weather", params={"zipcode": "62701"})
        assert resp.status_code == 500
        assert "Could not build forecast" in resp.json()["detail"]


class TestHealth:
    def test_health(self, client: TestClient, icons: IconTable):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "icon_codes": len(icons)}


class TestStatic:
    def test_serves_index(self, service: MagicMock):
        client = TestClient(create_app(service, DEFAULT_STATIC_DIR))
        resp = client.get("/")
        assert resp.status_code == 200
        assert "<form" in resp.text

    def test_serves_script(self, service: MagicMock):
        client = TestClient(create_app(service, DEFAULT_STATIC_DIR))
        resp = client.get("/time.js")
        assert resp.status_code == 200

    def test_api_routes_win_over_static(self, service: MagicMock):
        client = TestClient(create_app(service, DEFAULT_STATIC_DIR))
        resp = client.get("/weather", params={"zipcode": "62701"})
        assert resp.json()["location_name"] == "Springfield"

    def test_missing_static_dir(self, service: MagicMock, tmp_path: Path):
        client = TestClient(create_app(service, tmp_path / "absent"))
        assert client.get("/").status_code == 404
        assert client.get("/health").status_code == 200
