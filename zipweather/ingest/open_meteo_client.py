"""Open-Meteo forecast client."""

import logging

import httpx

from zipweather.config.schema import TemperatureUnit

logger = logging.getLogger(__name__)

OPEN_METEO_BASE_URL = "https://api.open-meteo.com"
HOURLY_FIELDS = "temperature_2m,weather_code,is_day"
DAILY_FIELDS = "temperature_2m_max,temperature_2m_min,weather_code"
CURRENT_FIELDS = "temperature_2m,weather_code"


class OpenMeteoClient:
    def __init__(
        self,
        base_url: str = OPEN_METEO_BASE_URL,
        timeout: float = 10.0,
        forecast_days: int = 5,
        past_days: int = 1,
        temperature_unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.forecast_days = forecast_days
        self.past_days = past_days
        self.temperature_unit = temperature_unit

    def build_params(self, longitude: float, latitude: float) -> dict:
        return {
            "latitude": latitude,
            "longitude": longitude,
            "hourly": HOURLY_FIELDS,
            "daily": DAILY_FIELDS,
            "current": CURRENT_FIELDS,
            "temperature_unit": str(self.temperature_unit),
            "forecast_days": self.forecast_days,
            "past_days": self.past_days,
            "timezone": "auto",
            "timeformat": "unixtime",
        }

    def get_forecast(self, longitude: float, latitude: float) -> dict:
        """Fetch the raw forecast payload for a coordinate pair.

        Timestamps come back as epoch seconds alongside utc_offset_seconds
        for the auto-detected timezone.
        """
        url = f"{self.base_url}/v1/forecast"
        params = self.build_params(longitude, latitude)
        try:
            resp = httpx.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Open-Meteo error for lat=%s lon=%s: %d %s",
                latitude, longitude, e.response.status_code, e.response.text[:200],
            )
            raise
        except httpx.RequestError as e:
            logger.error(
                "Open-Meteo request failed for lat=%s lon=%s: %s",
                latitude, longitude, e,
            )
            raise
        return resp.json()
